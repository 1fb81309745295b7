"""
Codemaker session: the program holds the secret and scores guesses.

State machine:
  AWAITING_GUESS --respond(secret)--> DONE
  AWAITING_GUESS --respond(other)--> AWAITING_GUESS
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from mastermind.engine.errors import SessionStateError
from mastermind.engine.scoring import is_solved, score
from mastermind.engine.types import Code, Feedback


class MakerState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    DONE = "done"


class CodemakerSession:
    def __init__(self, secret: Sequence[int], k: int, n: int):
        self._secret: Code = tuple(secret)
        self.k = k
        self.n = n
        self.state = MakerState.AWAITING_GUESS
        self.rounds = 0

    @property
    def secret(self) -> Code:
        return self._secret

    @property
    def finished(self) -> bool:
        return self.state is MakerState.DONE

    def respond(self, guess: Sequence[int]) -> Feedback:
        """Score `guess` against the secret; a full match ends the session."""
        if self.state is MakerState.DONE:
            raise SessionStateError("codemaker is done; the code has already been broken")

        feedback = score(self._secret, tuple(guess), self.k, self.n)
        self.rounds += 1
        if is_solved(feedback, self.n):
            self.state = MakerState.DONE
        return feedback
