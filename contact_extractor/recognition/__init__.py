"""Phone number recognition for extracted document text.

Applies an ordered table of independent regular-expression rules, then
normalizes, deduplicates and sorts the matches.
"""

from contact_extractor.recognition.number_recognizer import (
    PATTERN_RULES,
    CandidateMatch,
    PatternRule,
    find_candidates,
    normalize_candidate,
    recognize_numbers,
)

__all__ = [
    "PATTERN_RULES",
    "CandidateMatch",
    "PatternRule",
    "find_candidates",
    "normalize_candidate",
    "recognize_numbers",
]
