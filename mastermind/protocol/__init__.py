from .lines import (
    parse_number, parse_guess, parse_feedback, format_code, format_feedback, strip_line_ending,
)

__all__ = [
    "parse_number", "parse_guess", "parse_feedback",
    "format_code", "format_feedback", "strip_line_ending",
]
