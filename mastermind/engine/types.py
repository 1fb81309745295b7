"""
Shared type aliases and limits for the code-deduction game.

Conventions:
  - K : alphabet size (symbols are the integers 0..K-1)
  - N : code length (positions per code)
  - a Code is a tuple of N symbols; a Guess is structurally the same thing
  - Feedback is (b, w): b = exact matches, w = symbol matches in the wrong place
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

# Parameter limits (inclusive). MAX_POWER bounds the size of the search space.
MIN_K = 2
MAX_K = 256
MIN_N = 2
MAX_N = 10
MAX_POWER = 2 ** 24

Code = Tuple[int, ...]
Feedback = Tuple[int, int]  # (b, w)


class GuessRecord(NamedTuple):
    """One finished round: a guess and the feedback it received."""
    guess: Code
    feedback: Feedback


# Append-only, owned by exactly one session.
History = List[GuessRecord]


def zero_code(n: int) -> Code:
    """The all-zero code: the smallest numeral, and the first guess."""
    return (0,) * n
