"""
Codebreaker session: the program guesses, the other side answers.

State machine:
  INIT --start()--> AWAITING_FEEDBACK
  AWAITING_FEEDBACK --receive((n, 0))--> DONE
  AWAITING_FEEDBACK --receive(other)--> AWAITING_FEEDBACK   (next guess emitted)
  AWAITING_FEEDBACK --receive(contradictory)--> CONTRADICTION_FATAL

If the feedback source simply stops, the driver stops calling receive();
the session stays in AWAITING_FEEDBACK and that is not an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple

from mastermind.engine.errors import ContradictionError, SessionStateError
from mastermind.engine.scoring import is_solved
from mastermind.engine.types import Code, GuessRecord, History
from mastermind.solvers import BaseSolver, create_solver


class BreakerState(Enum):
    INIT = "init"
    AWAITING_FEEDBACK = "awaiting_feedback"
    DONE = "done"
    CONTRADICTION_FATAL = "contradiction_fatal"


class CodebreakerSession:
    """
    Owns one game's history and current guess.

    Args:
      k      : alphabet size
      n      : code length
      solver : strategy choosing each guess (defaults to the ascending solver)
    """

    def __init__(self, k: int, n: int, solver: BaseSolver | None = None):
        self.k = k
        self.n = n
        self.solver = solver if solver is not None else create_solver()
        self.solver.reset(k=k, n=n)
        self.state = BreakerState.INIT
        self.guess: Optional[Code] = None
        self._history: History = []

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        """Snapshot of the records so far (the session's own list is never exposed)."""
        return tuple(self._history)

    @property
    def finished(self) -> bool:
        return self.state in (BreakerState.DONE, BreakerState.CONTRADICTION_FATAL)

    def _expect(self, state: BreakerState) -> None:
        if self.state is not state:
            raise SessionStateError(f"codebreaker is {self.state.value}, expected {state.value}")

    def start(self) -> Code:
        """Emit the first guess (the all-zero code)."""
        self._expect(BreakerState.INIT)
        self.guess = self.solver.first_guess()
        self.state = BreakerState.AWAITING_FEEDBACK
        return self.guess

    def receive(self, feedback: Sequence[int]) -> Optional[Code]:
        """
        Take feedback for the current guess.

        Returns:
          the next guess, or None once the secret has been found.

        Raises:
          ContradictionError if no code fits the accumulated feedback; the
          session is then in CONTRADICTION_FATAL for good.
        """
        self._expect(BreakerState.AWAITING_FEEDBACK)
        b, w = feedback
        if is_solved((b, w), self.n):
            self.state = BreakerState.DONE
            return None

        self._history.append(GuessRecord(self.guess, (b, w)))
        try:
            self.guess = self.solver.next_guess(self._history)
        except ContradictionError:
            self.state = BreakerState.CONTRADICTION_FATAL
            raise
        return self.guess
