import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class RpnError(Exception):
    """Base for tokenizer and runtime errors; str() gives the user-facing message"""


def position_for_humans(pos: int) -> int:
    return pos + 1
