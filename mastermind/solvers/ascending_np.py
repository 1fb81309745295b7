"""
Ascending Consistent solver, vectorized with numpy.

Same contract as `ascending`: ascending numeral order, first consistent
candidate wins, so both solvers emit identical guess sequences for identical
feedback. The difference is how candidates are tested.

Acceleration:
  - Instead of stepping one numeral at a time, take the next CHUNK numerals
    as an integer range, decode them to an (m, n) digit matrix and score the
    whole block against every history record at once.
  - The first surviving row of the first block with any survivor is the guess.
  - Memory stays at O(CHUNK * n) no matter how large k**n is.
"""

from __future__ import annotations

from collections import Counter

import numpy as np

from mastermind.engine.enumeration import code_to_index, index_to_code
from mastermind.engine.errors import ContradictionError
from mastermind.engine.types import Code, History, zero_code
from .base import BaseSolver, register


def _decode(indices: np.ndarray, k: int, n: int) -> np.ndarray:
    """Integer numerals -> (m, n) digit matrix, leftmost digit most significant."""
    digits = np.empty((indices.size, n), dtype=np.int64)
    rem = indices.copy()
    for j in range(n - 1, -1, -1):
        digits[:, j] = rem % k
        rem //= k
    return digits


def _consistent_mask(digits: np.ndarray, history: History) -> np.ndarray:
    """Boolean mask of rows whose feedback against every past guess matches the record."""
    mask = np.ones(digits.shape[0], dtype=bool)
    for guess, (b, w) in history:
        g = np.asarray(guess, dtype=np.int64)
        exact = (digits == g).sum(axis=1)

        # Multiset overlap: only symbols that occur in the guess can contribute.
        overlap = np.zeros(digits.shape[0], dtype=np.int64)
        for symbol, c in Counter(guess).items():
            overlap += np.minimum((digits == symbol).sum(axis=1), c)

        mask &= (exact == b) & (overlap - exact == w)
        if not mask.any():
            break
    return mask


@register
class VectorizedAscendingSolver(BaseSolver):
    id = "ascending_np"
    name = "Ascending Consistent (numpy)"
    version = "1.0.0"

    # Numerals tested per block
    CHUNK = 1 << 16

    def next_guess(self, history: History) -> Code:
        k, n = self.k, self.n
        if not history:
            return zero_code(n)

        total = k ** n
        start = code_to_index(history[-1].guess, k) + 1
        for lo in range(start, total, self.CHUNK):
            hi = min(lo + self.CHUNK, total)
            block = _decode(np.arange(lo, hi, dtype=np.int64), k, n)
            hits = np.flatnonzero(_consistent_mask(block, history))
            if hits.size:
                return index_to_code(lo + int(hits[0]), k, n)

        raise ContradictionError(
            f"no code is consistent with the {len(history)} feedback record(s) received")
