"""
Secret-list validator.

What this module does:
- Validate a file of secret codes for a game of size (k, n), one code per
  line in the guess line format ("0 3 1 2").
- Detect invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from mastermind.datasets import validate_codes, pretty_summary
    rep = validate_codes("secrets_6x4.txt", k=6, n=4)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from mastermind.engine.errors import ProtocolError
from mastermind.engine.types import Code
from mastermind.engine.validation import valid_data_size
from mastermind.protocol import parse_guess


@dataclass
class CodesReport:
    """Validation result for one secrets file."""
    path: str            # file path (as given)
    k: int
    n: int
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID codes
    unique_count: int    # unique valid codes
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, k: int, n: int) -> Tuple[List[Code], int]:
    """
    Parse every line with the guess line rules.

    Returns:
      (valid_codes, invalid_count)
    """
    valid: List[Code] = []
    invalid = 0
    with path.open("r", encoding="utf-8", newline="") as f:
        for raw in f:
            try:
                valid.append(parse_guess(raw, k, n))
            except ProtocolError:
                invalid += 1
    return valid, invalid


def load_codes(path: str, k: int, n: int) -> List[Code]:
    """Valid codes from `path` in file order; invalid lines are skipped."""
    codes, _ = _load_and_check(Path(path), k, n)
    return codes


def validate_codes(path: str, k: int, n: int) -> Dict:
    """
    Validate a secrets file for a game of size (k, n).

    Returns
    -------
    Dict
        JSON-serializable (see CodesReport). `passed` is strict: requires a
        playable (k, n), an existing non-empty file and no invalid lines.
        Duplicates are reported as an issue but do not fail validation.
    """
    issues: List[str] = []
    p = Path(path)

    if not valid_data_size(k, n):
        issues.append(f"unsupported game size k={k}, n={n}")
    if not p.exists():
        issues.append(f"secrets file not found: {path}")
    if issues:
        return asdict(CodesReport(path, k, n, p.exists(), 0, 0, 0, "", False, issues))

    codes, invalid = _load_and_check(p, k, n)
    unique = len(set(codes))

    if not codes:
        issues.append("secrets file contains 0 valid codes")
    if invalid:
        issues.append(f"secrets has {invalid} invalid line(s)")
    if unique != len(codes):
        issues.append("secrets contains duplicate codes")

    rep = CodesReport(
        path=str(p),
        k=k,
        n=n,
        exists=True,
        count=len(codes),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(codes) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        k=6 n=4 | secrets=1296 (uniq=1296, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"k={report['k']} n={report['n']} | secrets={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
