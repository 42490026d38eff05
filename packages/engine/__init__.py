from .slot import Slot, ALPHABET
from .feedback import (
    Exact, Present, Absent, Signal, NO_LETTER, WORD_LENGTH,
    FeedbackParseError, InvalidToken, InvalidLength, parse_line,
)
from .constraints import CandidateFilter, filter_candidates, matches
from .scoring import score, to_line, feedback_line

__all__ = [
    "Slot", "ALPHABET",
    "Exact", "Present", "Absent", "Signal", "NO_LETTER", "WORD_LENGTH",
    "FeedbackParseError", "InvalidToken", "InvalidLength", "parse_line",
    "CandidateFilter", "filter_candidates", "matches",
    "score", "to_line", "feedback_line",
]
