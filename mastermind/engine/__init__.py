from .scoring import score, is_solved
from .enumeration import successor, iter_codes, code_to_index, index_to_code
from .constraints import is_consistent, filter_candidates
from .validation import valid_data_size, validate_data_size, validate_code, validate_feedback
from .errors import (
    MastermindError, SpaceExhausted, ContradictionError, SessionStateError, ProtocolError,
)
from .types import Code, Feedback, GuessRecord, History, zero_code

__all__ = [
    "score", "is_solved",
    "successor", "iter_codes", "code_to_index", "index_to_code",
    "is_consistent", "filter_candidates",
    "valid_data_size", "validate_data_size", "validate_code", "validate_feedback",
    "MastermindError", "SpaceExhausted", "ContradictionError", "SessionStateError",
    "ProtocolError",
    "Code", "Feedback", "GuessRecord", "History", "zero_code",
]
