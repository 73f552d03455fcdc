from enum import IntEnum
from itertools import chain, islice
from typing import Dict


class Hand(IntEnum):
    rock = 1
    paper = 2
    scissors = 3


class Outcome(IntEnum):
    lose = 0
    draw = 3
    win = 6


# hand -> the hand it defeats
BEATS_RELATION: Dict[Hand, Hand] = dict(zip(Hand, islice(chain(Hand, Hand), 2, 5)))


def beats(hand: Hand) -> Hand:
    return BEATS_RELATION[hand]


def outcome(opponent: Hand, me: Hand) -> Outcome:
    if beats(opponent) == me:
        return Outcome.lose
    elif opponent == me:
        return Outcome.draw
    else:
        return Outcome.win


def score(opponent: Hand, me: Hand) -> int:
    """Points for one round: the value of our hand plus the value of the result"""
    return int(me) + int(outcome(opponent, me))


def pick_strategy(opponent: Hand, outcome_: Outcome) -> Hand:
    if outcome_ == Outcome.draw:
        return opponent
    elif outcome_ == Outcome.lose:
        return beats(opponent)
    else:
        return beats(beats(opponent))
