"""
Ascending Consistent solver (reference strategy).

Strategy:
  - First guess is the all-zero code.
  - After each feedback, walk the numerals upward from the last guess and
    play the FIRST one consistent with every record in the history.

Notes:
  - Guesses come out in strictly ascending numeral order, so none repeats.
  - Complete: an honest secret is always consistent and lies above every
    wrong guess, so it is reached within k**n guesses.
  - Not guess-count optimal; it is the plain enumerate-then-test baseline.
"""

from __future__ import annotations

from mastermind.engine.constraints import is_consistent
from mastermind.engine.enumeration import successor
from mastermind.engine.errors import ContradictionError, SpaceExhausted
from mastermind.engine.types import Code, History, zero_code
from .base import BaseSolver, register


def next_guess(history: History, k: int, n: int) -> Code:
    """
    Smallest code above the last recorded guess that fits all of `history`.

    Returns the all-zero code for an empty history.

    Raises:
      ContradictionError if the enumeration runs out first.
    """
    if not history:
        return zero_code(n)

    guess = history[-1].guess
    try:
        while True:
            guess = successor(guess, k, n)
            if is_consistent(guess, history, k, n):
                return guess
    except SpaceExhausted as e:
        raise ContradictionError(
            f"no code is consistent with the {len(history)} feedback record(s) received") from e


@register
class AscendingSolver(BaseSolver):
    id = "ascending"
    name = "Ascending Consistent"
    version = "1.0.0"

    def next_guess(self, history: History) -> Code:
        return next_guess(history, self.k, self.n)
