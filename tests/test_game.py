from itertools import product

import pytest

from strategy_guide.game import Hand, Outcome, beats, outcome, pick_strategy, score

rock, paper, scissors = Hand.rock, Hand.paper, Hand.scissors


@pytest.mark.parametrize("hand", Hand)
def test_beats_is_cyclic(hand: Hand):
    assert beats(beats(beats(hand))) == hand
    assert beats(hand) != hand


@pytest.mark.parametrize(
    "hand, expected", [(rock, scissors), (paper, rock), (scissors, paper)]
)
def test_beats(hand: Hand, expected: Hand):
    assert beats(hand) == expected


@pytest.mark.parametrize(
    "opponent, me, expected",
    [
        (rock, rock, 4),
        (rock, paper, 8),
        (rock, scissors, 3),
        (paper, rock, 1),
        (paper, paper, 5),
        (paper, scissors, 9),
        (scissors, rock, 7),
        (scissors, paper, 2),
        (scissors, scissors, 6),
    ],
)
def test_score(opponent: Hand, me: Hand, expected: int):
    actual = score(opponent, me)
    assert actual == expected, (expected, actual)


def test_score_is_a_bijection_onto_1_to_9():
    scores = sorted(score(opponent, me) for opponent, me in product(Hand, Hand))
    assert scores == list(range(1, 10))


@pytest.mark.parametrize("opponent, outcome_", list(product(Hand, Outcome)))
def test_pick_strategy_achieves_outcome(opponent: Hand, outcome_: Outcome):
    me = pick_strategy(opponent, outcome_)
    assert outcome(opponent, me) == outcome_
    assert score(opponent, me) - me == outcome_
