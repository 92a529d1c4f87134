import itertools

import pytest

from rps.models import Choice, Outcome
from rps.services.rules import OUTCOMES, complement, outcome_for, resolve


@pytest.mark.parametrize('winner, loser', [
    (Choice.ROCK, Choice.SCISSORS),
    (Choice.SCISSORS, Choice.PAPER),
    (Choice.PAPER, Choice.ROCK),
])
def test_dominance(winner, loser):
    assert outcome_for(winner, loser) == Outcome.WIN
    assert outcome_for(loser, winner) == Outcome.LOSE


@pytest.mark.parametrize('choice', list(Choice))
def test_identical_choices_draw(choice):
    assert resolve(choice, choice) == (Outcome.DRAW, Outcome.DRAW)


def test_table_covers_all_nine_pairs():
    pairs = [(a, b) for a in OUTCOMES for b in OUTCOMES[a]]
    assert sorted(pairs) == sorted(itertools.product(Choice, Choice))


@pytest.mark.parametrize('a, b', list(itertools.product(Choice, Choice)))
def test_outcomes_are_symmetric(a, b):
    result_a, result_b = resolve(a, b)
    assert result_b == outcome_for(b, a)
    assert {result_a, result_b} in ({Outcome.WIN, Outcome.LOSE}, {Outcome.DRAW})


def test_complement():
    assert complement(Outcome.WIN) == Outcome.LOSE
    assert complement(Outcome.LOSE) == Outcome.WIN
    assert complement(Outcome.DRAW) == Outcome.DRAW


@pytest.mark.parametrize('value, expected', [
    ('rock', Choice.ROCK),
    ('paper', Choice.PAPER),
    ('scissors', Choice.SCISSORS),
    ('Rock', None),
    ('lizard', None),
    ('', None),
    (None, None),
    (3, None),
    (['rock'], None),
])
def test_choice_parse(value, expected):
    assert Choice.parse(value) == expected
