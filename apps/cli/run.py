# apps/cli/run.py
"""
CLI entry point for running codebreaker experiments.

This script:
  1) Picks the secrets: a validated secrets file (prints counts + SHA), a
     seeded random sample of the code space, or the whole space.
  2) Instantiates the requested solver.
  3) Plays every secret against an honest codemaker with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, secrets report, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from mastermind.datasets import load_codes, pretty_summary, validate_codes
from mastermind.engine.enumeration import index_to_code, iter_codes
from mastermind.engine.types import Code
from mastermind.engine.validation import valid_data_size
from mastermind.harness import run_case
from mastermind.harness.io import (
    git_commit_or_unknown, summarize, timestamp_id, write_csv, write_manifest,
)
from mastermind.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def _choose_cases(k: int, n: int, sample: int | None, seed: int) -> List[Code]:
    """
    Deterministic sample (without replacement) of the code space, or the
    whole space in ascending order when no sample is requested.
    """
    total = k ** n
    if sample and sample < total:
        rng = random.Random(seed)
        return [index_to_code(i, k, n) for i in rng.sample(range(total), sample)]
    return list(iter_codes(k, n))


def main():
    """
    Parse CLI args, pick secrets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="mastermind — run codebreaker experiments")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--k", type=int, default=6, help="alphabet size")
    ap.add_argument("--n", type=int, default=4, help="code length")
    ap.add_argument("--secrets",
                    help="path to a secrets file (one code per line); default: the code space")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    if not valid_data_size(args.k, args.n):
        raise SystemExit(f"Unsupported game size k={args.k}, n={args.n} "
                         f"(need 2<=k<=256, 2<=n<=10, k**n<=2**24)")

    # 1) Secrets: validated file, or the code space itself
    rep = None
    if args.secrets:
        rep = validate_codes(args.secrets, args.k, args.n)
        print(pretty_summary(rep))
        if not rep["passed"]:
            raise SystemExit(f"Secrets file failed validation: {rep['issues']}")
        cases = load_codes(args.secrets, args.k, args.n)
        if args.sample and args.sample < len(cases):
            rng = random.Random(args.seed)
            cases = rng.sample(cases, args.sample)
    else:
        cases = _choose_cases(args.k, args.n, args.sample, args.seed)

    # 2) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 4) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        r = run_case(solver, secret, k=args.k, n=args.n)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), k=args.k, n=args.n)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "secrets": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['games']} | mean guesses {summary['mean']:.3f} "
          f"| max {summary['max']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
