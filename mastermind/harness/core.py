"""
Experiment harness core primitives.

- run_case:  play one secret to the end with a given solver.
- run_batch: run many secrets in sequence (optionally a sample prefix).

Each case wires a CodebreakerSession (the solver under test) to a
CodemakerSession (the honest oracle holding the secret). Both sides are
ordinary sessions, so the harness exercises exactly what the CLI plays.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Sequence

from mastermind.engine.types import Code
from mastermind.sessions import CodebreakerSession, CodemakerSession


def run_case(solver, secret: Sequence[int], *, k: int, n: int) -> Dict:
    """
    Execute one game until the codebreaker finds `secret`.

    Args:
        solver: an object implementing BaseSolver
        secret: the hidden code for this case
        k, n:   game size

    Returns:
        dict with keys:
            secret (tuple), success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)])

    Raises:
        ContradictionError if the solver ever runs out of candidates, which
        with an honest codemaker means the solver is broken.
    """
    breaker = CodebreakerSession(k, n, solver=solver)
    maker = CodemakerSession(secret, k, n)

    # Honest play reaches the secret within k**n guesses; never loop past that.
    max_turns = k ** n
    history: List[tuple] = []

    t0 = time.perf_counter()
    guess = breaker.start()
    while guess is not None and len(history) < max_turns:
        feedback = maker.respond(guess)
        history.append((guess, feedback))
        guess = breaker.receive(feedback)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": maker.secret,
        "success": maker.finished,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        secrets: Iterable[Code],
        *,
        k: int,
        n: int,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first
    `sample` secrets are used to speed up quick experiments.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for secret in pool:
        r = run_case(solver, secret, k=k, n=n)
        r["solver_id"] = solver.id
        out.append(r)
    return out
