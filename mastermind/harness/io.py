"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- summarize:      guess-count statistics for a batch (numpy).
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Codes and feedback are written as space-separated numbers ("0 1 1 3",
  "2 1"), the same text the line protocol uses. Guess columns are emitted
  only up to the longest game in the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np

from mastermind.protocol import format_code, format_feedback


def write_csv(results: List[Dict], path: str, k: int, n: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, k, n, secret, success, guesses, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_T, fb_T

    where T is the largest number of guesses in `results`.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["solver", "k", "n", "secret", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "k": k,
                "n": n,
                "secret": format_code(r["secret"]),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = format_code(g)
                    row[f"fb_{i}"] = format_feedback(fb)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"fb_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, k, n, secrets, seed, sample, outdir)
      - secrets: output of datasets.validate_codes(...) when a file was used
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Guess-count statistics over a batch.

    Returns plain floats/ints so the dict is JSON-serializable.
    """
    if not results:
        return {"games": 0, "solved": 0, "mean": 0.0, "median": 0.0, "p90": 0.0, "max": 0,
                "time_ms_total": 0.0}
    guesses = np.array([r["guesses"] for r in results], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)
    return {
        "games": len(results),
        "solved": int(sum(1 for r in results if r["success"])),
        "mean": float(guesses.mean()),
        "median": float(np.median(guesses)),
        "p90": float(np.percentile(guesses, 90)),
        "max": int(guesses.max()),
        "time_ms_total": round(float(times.sum()), 3),
    }


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
