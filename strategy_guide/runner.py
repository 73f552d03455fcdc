"""Score a rock-paper-scissors strategy guide.

The first line of the input names the mode, `Part 1` or `Part 2`; every following line is a
strategy line like `A Y`. In Part 1 both columns are hands; in Part 2 the second column is the
outcome we're told to achieve and our hand is chosen to achieve it. Lines that fail to parse are
reported on stderr and skipped; a missing or unknown mode line aborts the whole run.
"""
import sys
from enum import Enum
from typing import IO, Callable, Dict, Iterable, Iterator, List, Optional

from .errors import ErrorKind, MalformedInputError, ParseError
from .game import pick_strategy, score
from .parsing import StrategyLine, column_1_hand, column_2_hand, column_2_outcome, parse_line
from .util import print_, set_verbose, zip_with

Game = Callable[[StrategyLine], int]
ErrorHandler = Callable[[int, ParseError], None]


class Mode(Enum):
    part_1 = "Part 1"
    part_2 = "Part 2"


def part_1_game(line: StrategyLine) -> int:
    return score(column_1_hand(line.col1), column_2_hand(line.col2))


def part_2_game(line: StrategyLine) -> int:
    opponent = column_1_hand(line.col1)
    return score(opponent, pick_strategy(opponent, column_2_outcome(line.col2)))


GAMES: Dict[Mode, Game] = {
    Mode.part_1: part_1_game,
    Mode.part_2: part_2_game,
}


def strip_line_ending(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def read_lines(input_: IO[str]) -> List[str]:
    try:
        text = input_.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(ErrorKind.io_failure, f"Unable to read input: {e}") from e
    lines = text.split("\n")
    if lines[-1] == "":
        # a final newline terminates the last record rather than starting a new one
        lines.pop()
    return list(map(strip_line_ending, lines))


def parse_mode(line: Optional[str]) -> Mode:
    if line is None:
        raise MalformedInputError(ErrorKind.missing_mode_line, "Missing data on first line")
    try:
        return Mode(line)
    except ValueError:
        raise MalformedInputError(
            ErrorKind.unknown_mode, f"Malformed input: unknown mode {line!r}"
        ) from None


def report_parse_error(line_no: int, error: ParseError):
    print(f"Parsing error on line {line_no}: {error}", file=sys.stderr)


def parse_lines(lines: Iterable[str], on_error: ErrorHandler) -> Iterator[StrategyLine]:
    for line_no, line in enumerate(lines, 1):
        try:
            yield parse_line(line)
        except ParseError as e:
            on_error(line_no, e)


def score_guide(
    lines: Iterable[str], game: Game, on_error: ErrorHandler = report_parse_error
) -> int:
    total = 0
    for strategy, points in zip_with(game, parse_lines(lines, on_error)):
        print_(f"{strategy} -> {points}")
        total += points
    return total


def run(input_: IO[str], verbose: bool = False) -> int:
    previous = set_verbose(verbose)
    try:
        lines = read_lines(input_)
        mode = parse_mode(lines[0] if lines else None)
        print_(f"Scoring {len(lines) - 1} strategy lines as {mode.value}")
        return score_guide(lines[1:], GAMES[mode])
    finally:
        set_verbose(previous)


test_input = """
Part 1
A Y
B X
C Z
""".lstrip(
    "\n"
)


def test():
    import io

    result = run(io.StringIO(test_input))
    expected = 15
    assert result == expected, (expected, result)

    result = run(io.StringIO(test_input.replace("Part 1", "Part 2")))
    expected = 12
    assert result == expected, (expected, result)

    errors = []
    result = score_guide(["A Y", "Q Q", "B X"], part_1_game, lambda n, e: errors.append((n, e.kind)))
    expected = 9
    assert result == expected, (expected, result)
    assert errors == [(2, ErrorKind.invalid_char)], errors

    try:
        run(io.StringIO("Part 3\nA Y\n"))
    except MalformedInputError as e:
        assert e.kind == ErrorKind.unknown_mode, e.kind
    else:
        raise AssertionError("Expected an unknown mode to be fatal")
