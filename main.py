#! /usr/bin/env python
import sys
from contextlib import contextmanager
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Iterator

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from strategy_guide import runner
from strategy_guide.errors import MalformedInputError
from strategy_guide.util import print_, set_verbose

INPUT_DIR = Path("inputs/")
DEFAULT_INPUT = INPUT_DIR / "strategy_guide.txt"


def print_total(total):
    print(total)


@contextmanager
def get_input() -> Iterator[IO[str]]:
    if sys.stdin.isatty():
        with open(DEFAULT_INPUT) as f:
            yield f
    else:
        yield sys.stdin


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    exit_codes={MalformedInputError: 1, OSError: 1},
)


@cli.definition
class StrategyGuide:
    """Score a rock-paper-scissors tournament strategy guide"""

    @cli_spec.output_handler(print_total)
    def run(self, trace: bool = False):
        """Score the strategy guide and print the total. The default input is
        inputs/strategy_guide.txt, but input will be read from stdin if input is piped there.

        :param trace: print the mode, each scored round and the run time to stderr
        """
        set_verbose(trace)
        tic = perf_counter_ns()
        with get_input() as input_:
            total = runner.run(input_, verbose=trace)
        toc = perf_counter_ns()
        print_(f"Ran in {(toc - tic) / 1000000} ms")
        return total

    def test(self):
        """Run the built-in example scenarios against the scorer"""
        runner.test()
        print("Tests pass!")

    def info(self):
        """Print the doc string for the scorer, describing the input format and the two modes"""
        if runner.__doc__:
            print(runner.__doc__, end="\n\n")
        print("Signature:")
        print(signature(runner.run))


if __name__ == "__main__":
    cli.run()
