"""
Text line protocol spoken on stdin/stdout.

Guess line    : n numbers separated by single spaces, e.g. "0 0 1 2"
Feedback line : two numbers separated by a single space, e.g. "1 0"

Strict rules shared by both directions:
  - one trailing '\\r' (from "\\r\\n" line endings) is dropped
  - the line must be non-empty
  - no tab, carriage return, vertical tab or form feed anywhere else
  - no leading or trailing space, no two consecutive spaces
  - every token is a plain decimal 0..999 without sign or leading zeros

Anything else raises ProtocolError; range checks against k and n follow.
"""

from __future__ import annotations

import re
from typing import List

from mastermind.engine.errors import ProtocolError
from mastermind.engine.types import Code, Feedback
from mastermind.engine.validation import validate_code, validate_feedback

SMALL_NUMBER = re.compile(r"[0-9]|[1-9][0-9]{0,2}")  # 0-999

# '\r' is listed because only a single trailing one is tolerated, and
# strip_line_ending() has already removed it by the time this is checked.
UNWANTED_WHITESPACE = ("\t", "\r", "\v", "\f")


def strip_line_ending(line: str) -> str:
    """Drop a trailing '\\n' and then at most one trailing '\\r'."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_number(token: str) -> int:
    if not SMALL_NUMBER.fullmatch(token):
        raise ProtocolError(f"not a number in 0..999: {token!r}")
    return int(token)


def _split(line: str, fields: int) -> List[str]:
    """Check the shape rules and return exactly `fields` tokens."""
    line = strip_line_ending(line)
    if not line:
        raise ProtocolError("empty line")
    if any(ch in line for ch in UNWANTED_WHITESPACE):
        raise ProtocolError("line contains unexpected whitespace")
    if line[0] == " " or line[-1] == " ":
        raise ProtocolError("line has leading or trailing spaces")
    if "  " in line:
        raise ProtocolError("line has consecutive spaces")
    tokens = line.split(" ")
    if len(tokens) != fields:
        raise ProtocolError(f"expected {fields} values, got {len(tokens)}")
    return tokens


def parse_guess(line: str, k: int, n: int) -> Code:
    """Parse a guess line into a code with n symbols in [0, k)."""
    code = tuple(parse_number(t) for t in _split(line, n))
    validate_code(code, k, n)
    return code


def parse_feedback(line: str, n: int) -> Feedback:
    """Parse a "b w" line; b + w must not exceed n."""
    b, w = (parse_number(t) for t in _split(line, 2))
    validate_feedback((b, w), n)
    return b, w


def format_code(code: Code) -> str:
    return " ".join(str(symbol) for symbol in code)


def format_feedback(feedback: Feedback) -> str:
    b, w = feedback
    return f"{b} {w}"
