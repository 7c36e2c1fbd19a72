import enum
from dataclasses import dataclass

from rpncalc.utils import PrintableEnum, RpnError, position_for_humans


class TokenizerError(RpnError):
    pass


@dataclass
class InvalidCharacter(TokenizerError):
    code: str
    pos: int
    char: str

    def __str__(self) -> str:
        return f'Invalid character at position {position_for_humans(self.pos)}, "{self.char}"'

    def excerpt(self) -> str:
        print_start_idx = max(0, self.pos - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.pos + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.pos - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()

    @property
    def glyph(self) -> str:
        return OPERATOR_GLYPHS[self]


OPERATOR_GLYPHS = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
}


@dataclass(frozen=True)
class OperatorToken:
    pos: int
    operator: Operator

    def __str__(self) -> str:
        return f"<{self.operator}>{self.operator.glyph}"


@dataclass(frozen=True)
class NumberToken:
    pos: int
    value: int

    def __str__(self) -> str:
        return f"<NUMBER>{self.value}"


@dataclass(frozen=True)
class SpaceToken:
    pos: int

    def __str__(self) -> str:
        return "<SPACE>"


Token = OperatorToken | NumberToken | SpaceToken


# x/X are accepted as an alternate multiplication sign
SINGLE_CHAR_OPERATORS = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "x": Operator.MUL,
    "X": Operator.MUL,
    "/": Operator.DIV,
}

DIGITS = "0123456789"


def tokenize(code: str) -> list[Token]:
    """One token per character, raising on the first one that is not recognized.

    Expects the caller to have stripped surrounding whitespace already.
    """
    tokens: list[Token] = []
    for i, char in enumerate(code):
        if char in SINGLE_CHAR_OPERATORS:
            tokens.append(OperatorToken(pos=i, operator=SINGLE_CHAR_OPERATORS[char]))
        elif char in DIGITS:
            tokens.append(NumberToken(pos=i, value=DIGITS.index(char)))
        elif char == " ":
            tokens.append(SpaceToken(pos=i))
        else:
            raise InvalidCharacter(code=code, pos=i, char=char)
    return tokens


def untokenize(tokens: list[Token]) -> str:
    parts: list[str] = []
    for token in tokens:
        if isinstance(token, OperatorToken):
            parts.append(token.operator.glyph)
        elif isinstance(token, NumberToken):
            parts.append(str(token.value))
        elif isinstance(token, SpaceToken):
            parts.append(" ")
        else:
            raise RuntimeError(f"Unexpected token: {token}")
    return "".join(parts)
