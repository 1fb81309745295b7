from pathlib import Path
from mastermind.datasets import validate_codes, load_codes, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_codes_happy_path(tmp_path: Path):
    secrets = tmp_path / "secrets_6x4.txt"
    _write(secrets, ["0 1 2 3", "5 5 5 5", "3 2 1 0"])

    rep = validate_codes(str(secrets), 6, 4)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "k=6 n=4" in s and "OK" in s
    assert load_codes(str(secrets), 6, 4) == [(0, 1, 2, 3), (5, 5, 5, 5), (3, 2, 1, 0)]


def test_validate_codes_flags_errors(tmp_path: Path):
    secrets = tmp_path / "secrets.txt"
    # wrong length, symbol out of range, stray tab
    secrets.write_text("0 1 2 3\n0 1 2\n0 1 2 6\n0\t1 2 3\n", encoding="utf-8")

    rep = validate_codes(str(secrets), 6, 4)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert load_codes(str(secrets), 6, 4) == [(0, 1, 2, 3)]


def test_validate_codes_duplicates_reported(tmp_path: Path):
    secrets = tmp_path / "secrets.txt"
    _write(secrets, ["1 1", "1 1"])
    rep = validate_codes(str(secrets), 2, 2)
    assert rep["passed"] is True
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_codes_missing_file_and_bad_size(tmp_path: Path):
    rep = validate_codes(str(tmp_path / "nope.txt"), 6, 4)
    assert rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])

    rep = validate_codes(str(tmp_path / "nope.txt"), 256, 4)
    assert any("unsupported" in msg for msg in rep["issues"])
