"""
Ordered enumeration of the candidate space.

A code is read as an n-digit base-k numeral, leftmost position most
significant. successor() steps to the next numeral; sweeping from the
all-zero code visits all k**n codes exactly once, in ascending order.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .errors import SpaceExhausted
from .types import Code, zero_code


def successor(seq: Sequence[int], k: int, n: int) -> Code:
    """
    Return the numeral immediately after `seq`.

    Scans right to left for the first position below k-1, increments it and
    resets every position to its right to 0.

    Raises:
      SpaceExhausted if `seq` is already the largest numeral (all k-1).
    """
    out = list(seq)
    for i in range(n - 1, -1, -1):
        if out[i] < k - 1:
            out[i] += 1
            return tuple(out)
        out[i] = 0
    raise SpaceExhausted(f"no code follows {tuple(seq)} for k={k}, n={n}")


def iter_codes(k: int, n: int, start: Optional[Sequence[int]] = None) -> Iterator[Code]:
    """
    Yield codes in ascending numeral order.

    With no `start` the sweep begins at the all-zero code; otherwise it begins
    right after `start`. Stops quietly once the space is exhausted.
    """
    if start is None:
        cur = zero_code(n)
        yield cur
    else:
        cur = tuple(start)
    while True:
        try:
            cur = successor(cur, k, n)
        except SpaceExhausted:
            return
        yield cur


def code_to_index(code: Sequence[int], k: int) -> int:
    """Numeral value of `code` in base k."""
    value = 0
    for symbol in code:
        value = value * k + symbol
    return value


def index_to_code(index: int, k: int, n: int) -> Code:
    """Inverse of code_to_index for an n-digit numeral."""
    digits = [0] * n
    for i in range(n - 1, -1, -1):
        index, digits[i] = divmod(index, k)
    return tuple(digits)
