from typing import Tuple

from rps.models import Choice, Outcome


# OUTCOMES[mine][theirs] is the result for the player who picked `mine`
OUTCOMES = {
    Choice.ROCK: {Choice.ROCK: Outcome.DRAW, Choice.PAPER: Outcome.LOSE, Choice.SCISSORS: Outcome.WIN},
    Choice.PAPER: {Choice.ROCK: Outcome.WIN, Choice.PAPER: Outcome.DRAW, Choice.SCISSORS: Outcome.LOSE},
    Choice.SCISSORS: {Choice.ROCK: Outcome.LOSE, Choice.PAPER: Outcome.WIN, Choice.SCISSORS: Outcome.DRAW},
}

_COMPLEMENT = {
    Outcome.WIN: Outcome.LOSE,
    Outcome.LOSE: Outcome.WIN,
    Outcome.DRAW: Outcome.DRAW,
}


def outcome_for(mine: Choice, theirs: Choice) -> Outcome:
    return OUTCOMES[mine][theirs]


def complement(outcome: Outcome) -> Outcome:
    """Outcome seen by the opponent of a player who got `outcome`."""
    return _COMPLEMENT[outcome]


def resolve(choice_a: Choice, choice_b: Choice) -> Tuple[Outcome, Outcome]:
    """Return (outcome for a, outcome for b).

    The second outcome is derived from the first so the pair can never be
    win/win or lose/lose.
    """
    result_a = outcome_for(choice_a, choice_b)
    return result_a, complement(result_a)
