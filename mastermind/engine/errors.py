"""
Exception hierarchy.

Only ContradictionError can come out of the core during normal play; the
rest are raised by the session guards and the line protocol.
"""

from __future__ import annotations


class MastermindError(Exception):
    """Base class for every error raised by this package."""


class SpaceExhausted(MastermindError):
    """successor() was asked to step past the largest numeral (all K-1)."""


class ContradictionError(MastermindError):
    """
    No code is consistent with the feedback received so far.

    The feedback must have been internally contradictory; the session
    cannot continue.
    """


class SessionStateError(MastermindError):
    """A session step was called in a state that does not accept it."""


class ProtocolError(MastermindError, ValueError):
    """Malformed line, token or argument."""
