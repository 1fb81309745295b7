"""
Mastermind scoring (feedback) for a single (code, guess) pair.

Feedback is a pair (b, w):
  - b : positions where code and guess hold the same symbol
  - w : further symbol matches ignoring position (multiset overlap minus b)

Algorithm:
  1) Count exact position matches -> b.
  2) For every symbol, take min(count in code, count in guess) and sum.
     That overlap counts the exact matches too, so subtract b -> w.

Properties (relied on by the consistency filter):
  - symmetric: score(a, b) == score(b, a)
  - score(x, x) == (n, 0)
  - 0 <= b <= n, 0 <= w, b + w <= n
"""

from __future__ import annotations

from collections import Counter

from .types import Code, Feedback


def score(code: Code, guess: Code, k: int, n: int) -> Feedback:
    """
    Compute feedback for `guess` against `code`.

    Preconditions:
      - len(code) == len(guess) == n
      - every symbol lies in [0, k)

    Examples:
      score((0, 1, 2, 3), (0, 0, 0, 0), 6, 4) -> (1, 0)
      score((2, 2, 5, 5), (2, 5, 2, 5), 8, 4) -> (2, 2)
    """
    b = 0
    for i in range(n):
        if code[i] == guess[i]:
            b += 1

    # Only symbols present in both sequences contribute to the overlap,
    # so iterating the (at most n) distinct guess symbols covers all of [0, k).
    code_counts = Counter(code)
    guess_counts = Counter(guess)
    overlap = 0
    for symbol, c in guess_counts.items():
        overlap += min(c, code_counts[symbol])

    return b, overlap - b


def is_solved(feedback: Feedback, n: int) -> bool:
    """All n positions matched (w is necessarily 0 then)."""
    return feedback[0] == n
