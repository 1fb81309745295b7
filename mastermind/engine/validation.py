"""
Range checks for game parameters, codes and feedback.

The core trusts its inputs; these checks run at the edges (command line,
line protocol, secret lists) before anything reaches a session.
"""

from __future__ import annotations

from typing import Sequence

from .errors import ProtocolError
from .types import MAX_K, MAX_N, MAX_POWER, MIN_K, MIN_N


def valid_data_size(k: int, n: int) -> bool:
    """
    Return True if (k, n) is playable:
      - MIN_K <= k <= MAX_K
      - MIN_N <= n <= MAX_N
      - k**n <= MAX_POWER (keeps a full enumeration affordable)
    """
    if k < MIN_K or k > MAX_K:
        return False
    if n < MIN_N or n > MAX_N:
        return False

    # Multiply up with an early exit instead of computing k**n outright.
    power = 1
    for _ in range(n):
        power *= k
        if power > MAX_POWER:
            return False
    return True


def validate_data_size(k: int, n: int) -> None:
    if not valid_data_size(k, n):
        raise ProtocolError(f"unsupported game size k={k}, n={n}")


def validate_code(code: Sequence[int], k: int, n: int) -> None:
    """Raise ProtocolError unless `code` has n symbols, each in [0, k)."""
    if len(code) != n:
        raise ProtocolError(f"code must have exactly {n} symbols, got {len(code)}")
    for symbol in code:
        if symbol < 0 or symbol >= k:
            raise ProtocolError(f"symbol {symbol} out of range 0..{k - 1}")


def validate_feedback(feedback: Sequence[int], n: int) -> None:
    """Raise ProtocolError unless feedback is a pair (b, w) with b, w >= 0 and b + w <= n."""
    if len(feedback) != 2:
        raise ProtocolError("feedback must be a pair (b, w)")
    b, w = feedback
    if b < 0 or w < 0 or b + w > n:
        raise ProtocolError(f"impossible feedback ({b}, {w}) for n={n}")
