import logging
from dataclasses import dataclass
from typing import Callable

from rpncalc.tokenizer import NumberToken, Operator, OperatorToken, SpaceToken, Token, tokenize
from rpncalc.utils import RpnError, position_for_humans

logger = logging.getLogger(__name__)

# operands and results are unsigned 32-bit integers
U32_MAX = 2**32 - 1


class CalcRuntimeError(RpnError):
    pass


@dataclass
class NoNumberFoundForOperation(CalcRuntimeError):
    pos: int
    operator: Operator

    def __str__(self) -> str:
        return (
            f"No number found before the operation {self.operator.glyph} "
            f"at position {position_for_humans(self.pos)}"
        )


@dataclass
class IncompleteExpression(CalcRuntimeError):
    stack_size: int

    def __str__(self) -> str:
        # one of the leftover values is counted as the would-be result
        return f"Incomplete expression. {self.stack_size - 1} tokens unprocessed."


@dataclass
class NoResultAvailable(CalcRuntimeError):
    def __str__(self) -> str:
        return "No result can be generated."


@dataclass
class ArithmeticFailure(CalcRuntimeError):
    pos: int
    operator: Operator
    x: int
    y: int


class DivisionByZero(ArithmeticFailure):
    def __str__(self) -> str:
        return f"Division by zero at position {position_for_humans(self.pos)}: {self.x} / 0"


class ArithmeticUnderflow(ArithmeticFailure):
    def __str__(self) -> str:
        return (
            f"Subtraction underflow at position {position_for_humans(self.pos)}: "
            f"{self.x} - {self.y} is negative"
        )


class ArithmeticOverflow(ArithmeticFailure):
    def __str__(self) -> str:
        return (
            f"Overflow at position {position_for_humans(self.pos)}: "
            f"{self.x} {self.operator.glyph} {self.y} exceeds {U32_MAX}"
        )


def calculate(code: str) -> int:
    return evaluate(tokenize(code))


def evaluate(tokens: list[Token]) -> int:
    stack: list[int] = []
    for token in tokens:
        if isinstance(token, SpaceToken):
            continue
        elif isinstance(token, NumberToken):
            stack.append(token.value)
        elif isinstance(token, OperatorToken):
            apply_operator(token, stack)
        else:
            raise RuntimeError(f"Unexpected token: {token}")
        logger.debug("after %s at %d: stack=%s", token, token.pos, stack)

    if len(stack) > 1:
        raise IncompleteExpression(stack_size=len(stack))
    if not stack:
        raise NoResultAvailable()
    return stack.pop()


def apply_operator(token: OperatorToken, stack: list[int]) -> None:
    if len(stack) < 2:
        raise NoNumberFoundForOperation(pos=token.pos, operator=token.operator)
    y = stack.pop()
    x = stack.pop()
    impl = OPERATOR_IMPLS.get(token.operator)
    if impl is None:
        raise RuntimeError(f"Unexpected operator: {token.operator}")
    stack.append(impl(token, x, y))


OperatorImpl = Callable[[OperatorToken, int, int], int]


def _checked(token: OperatorToken, x: int, y: int, result: int) -> int:
    if result > U32_MAX:
        raise ArithmeticOverflow(pos=token.pos, operator=token.operator, x=x, y=y)
    return result


def add_impl(token: OperatorToken, x: int, y: int) -> int:
    return _checked(token, x, y, x + y)


def sub_impl(token: OperatorToken, x: int, y: int) -> int:
    if y > x:
        raise ArithmeticUnderflow(pos=token.pos, operator=token.operator, x=x, y=y)
    return x - y


def mul_impl(token: OperatorToken, x: int, y: int) -> int:
    return _checked(token, x, y, x * y)


def div_impl(token: OperatorToken, x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZero(pos=token.pos, operator=token.operator, x=x, y=y)
    return x // y


OPERATOR_IMPLS: dict[Operator, OperatorImpl] = {
    Operator.ADD: add_impl,
    Operator.SUB: sub_impl,
    Operator.MUL: mul_impl,
    Operator.DIV: div_impl,
}
