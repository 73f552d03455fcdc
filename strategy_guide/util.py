import sys
from typing import Callable, Iterable, Iterator, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")
U = TypeVar("U")


# Iterators


def zip_with(f: Callable[[T], U], it: Iterable[T]) -> Iterator[Tuple[T, U]]:
    for i in it:
        yield i, f(i)


# I/O


def set_verbose(value: bool) -> bool:
    global VERBOSE
    previous, VERBOSE = VERBOSE, value
    return previous


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)
