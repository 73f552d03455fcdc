from enum import Enum, auto
from typing import Dict, Optional


class ErrorKind(Enum):
    missing_char = auto()
    invalid_char = auto()
    missing_delimiter = auto()
    trailing_chars = auto()
    missing_mode_line = auto()
    unknown_mode = auto()
    io_failure = auto()


PARSE_REASONS: Dict[ErrorKind, str] = {
    ErrorKind.missing_char: "missing column {column} character",
    ErrorKind.invalid_char: "invalid character {char!r} in column {column}",
    ErrorKind.missing_delimiter: "invalid or missing space delimiter",
    ErrorKind.trailing_chars: "unexpected trailing characters",
}


class StrategyGuideError(ValueError):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ParseError(StrategyGuideError):
    """A single strategy line was rejected; the rest of the guide is still scored"""

    def __init__(self, kind: ErrorKind, column: Optional[int] = None, char: Optional[str] = None):
        if kind not in PARSE_REASONS:
            raise ValueError(f"Not a line parsing error: {kind}")
        super().__init__(kind, PARSE_REASONS[kind].format(column=column, char=char))
        self.column = column
        self.char = char


class MalformedInputError(StrategyGuideError):
    """The guide as a whole can't be scored"""
