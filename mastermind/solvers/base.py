from __future__ import annotations

from typing import Dict, Type

from mastermind.engine.types import Code, History, zero_code

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.k: int = 6
        self.n: int = 4

    def reset(self, *, k: int, n: int) -> None:
        self.k = int(k)
        self.n = int(n)

    def first_guess(self) -> Code:
        return zero_code(self.n)

    def next_guess(self, history: History) -> Code:
        """
        Return the guess to play after `history`.

        Raises ContradictionError when no code fits the history.
        """
        raise NotImplementedError("Override in subclass")
