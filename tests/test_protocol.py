import pytest
from mastermind.engine import ProtocolError
from mastermind.protocol import (
    parse_guess, parse_feedback, parse_number, format_code, format_feedback,
)


def test_parse_guess_ok():
    assert parse_guess("0 1 2 3", 6, 4) == (0, 1, 2, 3)
    assert parse_guess("0 1 2 3\n", 6, 4) == (0, 1, 2, 3)
    assert parse_guess("0 1 2 3\r\n", 6, 4) == (0, 1, 2, 3)
    assert parse_guess("255 0", 256, 2) == (255, 0)


@pytest.mark.parametrize("line", [
    "",
    "\n",
    " 0 1 2 3",
    "0 1 2 3 ",
    "0  1 2 3",
    "0\t1 2 3",
    "0 1 2 3\r\r",
    "0 1\v2 3",
    "0 1 2",
    "0 1 2 3 4",
    "0 1 2 6",
    "00 1 2 3",
    "-1 1 2 3",
    "+1 1 2 3",
    "1000 1 2 3",
    "a 1 2 3",
])
def test_parse_guess_rejects(line):
    with pytest.raises(ProtocolError):
        parse_guess(line, 6, 4)


def test_parse_feedback():
    assert parse_feedback("1 2", 4) == (1, 2)
    assert parse_feedback("4 0\r\n", 4) == (4, 0)
    for bad in ["3 2", "1", "1 2 0", "1 02", " 1 2"]:
        with pytest.raises(ProtocolError):
            parse_feedback(bad, 4)


def test_parse_number():
    assert parse_number("0") == 0
    assert parse_number("999") == 999
    with pytest.raises(ProtocolError):
        parse_number("07")


def test_format():
    assert format_code((0, 10, 255)) == "0 10 255"
    assert format_feedback((1, 0)) == "1 0"
