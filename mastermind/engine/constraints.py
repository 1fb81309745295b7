"""
Consistency of candidate codes with the game history.

Given:
  - a candidate code
  - a history of (guess, feedback) records

A candidate is consistent iff scoring it against every past guess reproduces
exactly the recorded feedback. An inconsistent candidate cannot be the
secret, so the codebreaker never plays it.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .scoring import score
from .types import Code, GuessRecord


def is_consistent(candidate: Sequence[int], history: Iterable[GuessRecord],
                  k: int, n: int) -> bool:
    """True iff `candidate` reproduces the feedback of every record in `history`."""
    for guess, feedback in history:
        if score(candidate, guess, k, n) != feedback:
            return False
    return True


def filter_candidates(codes: Iterable[Sequence[int]], history: Iterable[GuessRecord],
                      k: int, n: int) -> List[Code]:
    """
    Keep only the codes consistent with ALL of `history`.

    Order is preserved as in `codes`. `history` is materialized once since it
    is walked for every code.
    """
    records = list(history)
    out: List[Code] = []
    for code in codes:
        if is_consistent(code, records, k, n):
            out.append(tuple(code))
    return out
