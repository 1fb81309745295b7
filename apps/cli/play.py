# apps/cli/play.py
"""
Play Mastermind over stdin/stdout.

Usage:
  mastermind K N             the program is the codebreaker: it prints a guess,
                             you answer "b w", until you answer "N 0"
  mastermind K C1 ... CN     the program is the codemaker holding C1..CN: you
                             send guesses, it answers "b w"

Limits: 2 <= K <= 256, 2 <= N <= 10, K**N <= 2**24.

Any malformed line, bad argument or contradictory feedback prints ERROR on
stderr and exits with status 1. Closing the input early is not an error.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Sequence, TextIO

from mastermind.engine.errors import MastermindError
from mastermind.engine.validation import validate_code, validate_data_size
from mastermind.protocol import (
    format_code, format_feedback, parse_feedback, parse_guess, parse_number,
)
from mastermind.sessions import CodebreakerSession, CodemakerSession
from mastermind.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def play_codebreaker(k: int, n: int, *, solver_id: str = DEFAULT_SOLVER,
                     stdin: TextIO, stdout: TextIO) -> None:
    """Emit guesses and read feedback until solved or the input ends."""
    session = CodebreakerSession(k, n, solver=create_solver(solver_id))
    guess = session.start()
    while guess is not None:
        stdout.write(format_code(guess) + "\n")
        stdout.flush()

        line = stdin.readline()
        if not line:
            return  # the other side hung up; not an error
        guess = session.receive(parse_feedback(line, n))


def play_codemaker(k: int, secret: Sequence[int], *, stdin: TextIO, stdout: TextIO) -> None:
    """Answer guess lines until one matches the secret or the input ends."""
    session = CodemakerSession(secret, k, len(secret))
    for line in iter(stdin.readline, ""):
        feedback = session.respond(parse_guess(line, k, len(secret)))
        stdout.write(format_feedback(feedback) + "\n")
        stdout.flush()
        if session.finished:
            return


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mastermind",
        description="Mastermind: break a code (K N) or hold one (K C1 ... CN).")
    ap.add_argument("k", help="alphabet size K (symbols are 0..K-1)")
    ap.add_argument("values", nargs="+", metavar="N_OR_C",
                    help="either the code length N, or the secret code C1 ... CN (N >= 2)")
    ap.add_argument("--solver", default=DEFAULT_SOLVER, choices=get_solver_ids(),
                    help="codebreaker strategy")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print the reason after ERROR")
    return ap


def main(argv: List[str] | None = None, *, stdin: TextIO | None = None,
         stdout: TextIO | None = None) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        k = parse_number(args.k)
        values = [parse_number(v) for v in args.values]

        if len(values) == 1:
            n = values[0]
            validate_data_size(k, n)
            play_codebreaker(k, n, solver_id=args.solver, stdin=stdin, stdout=stdout)
        else:
            validate_data_size(k, len(values))
            validate_code(values, k, len(values))
            play_codemaker(k, values, stdin=stdin, stdout=stdout)
    except MastermindError as e:
        sys.stderr.write("ERROR\n")
        if args.verbose:
            sys.stderr.write(f"{type(e).__name__}: {e}\n")
        sys.stderr.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
