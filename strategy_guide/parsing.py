from enum import Enum
from typing import Dict, Iterator, NamedTuple, Type, TypeVar

from .errors import ErrorKind, ParseError
from .game import Hand, Outcome

DELIMITER = " "


class Column1Code(Enum):
    A = "A"
    B = "B"
    C = "C"


class Column2Code(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"


Code = TypeVar("Code", Column1Code, Column2Code)

COLUMN_1_HANDS: Dict[Column1Code, Hand] = dict(zip(Column1Code, Hand))
COLUMN_2_HANDS: Dict[Column2Code, Hand] = dict(zip(Column2Code, Hand))
COLUMN_2_OUTCOMES: Dict[Column2Code, Outcome] = dict(zip(Column2Code, Outcome))


class StrategyLine(NamedTuple):
    col1: Column1Code
    col2: Column2Code

    def __str__(self):
        return f"{self.col1.value}{DELIMITER}{self.col2.value}"


def column_1_hand(code: Column1Code) -> Hand:
    return COLUMN_1_HANDS[code]


def column_2_hand(code: Column2Code) -> Hand:
    return COLUMN_2_HANDS[code]


def column_2_outcome(code: Column2Code) -> Outcome:
    return COLUMN_2_OUTCOMES[code]


def parse_code(code_type: Type[Code], column: int, chars: Iterator[str]) -> Code:
    char = next(chars, None)
    if char is None:
        raise ParseError(ErrorKind.missing_char, column=column)
    try:
        return code_type(char)
    except ValueError:
        raise ParseError(ErrorKind.invalid_char, column=column, char=char) from None


def parse_line(line: str) -> StrategyLine:
    """Parse a line of the form `<A|B|C> <X|Y|Z>`. Characters are consumed strictly left to
    right and the first problem encountered is the one raised; there is no recovery within a line.
    """
    chars = iter(line)
    col1 = parse_code(Column1Code, 1, chars)
    if next(chars, None) != DELIMITER:
        raise ParseError(ErrorKind.missing_delimiter)
    col2 = parse_code(Column2Code, 2, chars)
    if next(chars, None) is not None:
        raise ParseError(ErrorKind.trailing_chars)
    return StrategyLine(col1, col2)
