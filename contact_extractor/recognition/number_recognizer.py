"""Phone number recognition over flat document text.

Each rule scans the whole text on its own. Matches from every rule are
pooled, normalized to a 10-digit mobile number, deduplicated and sorted.
Rules overlap on purpose: the same number found by several rules collapses
to a single entry in the final set.
"""

import logging
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

COUNTRY_CODE = "91"
TRUNK_PREFIX = "0"
CANONICAL_LENGTH = 10
VALID_LEADING_DIGITS = frozenset("6789")

_NON_DIGIT = re.compile(r"\D", re.ASCII)

# Digits and word boundaries are ASCII-only, but whitespace covers the same
# Unicode spaces as JavaScript's \s, including NBSP and thin spaces.
_WS = r"\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_SEP = rf"[-.{_WS}]"
_GAP = rf"[{_WS}]*"


class PatternRule(NamedTuple):
    """A named regular expression that yields candidate numbers."""

    name: str
    pattern: re.Pattern[str]


class CandidateMatch(NamedTuple):
    """Raw text matched by a rule, before normalization."""

    text: str
    rule: str
    start: int
    end: int


PATTERN_RULES: tuple[PatternRule, ...] = (
    PatternRule("bare_ten_digit", re.compile(r"\b\d{10}\b", re.ASCII)),
    PatternRule(
        "grouped_3_3_4",
        re.compile(rf"\b\d{{3}}{_SEP}?\d{{3}}{_SEP}?\d{{4}}\b", re.ASCII),
    ),
    PatternRule("plus_91_prefix", re.compile(rf"\+91{_SEP}?\d{{10}}\b", re.ASCII)),
    PatternRule("bare_91_prefix", re.compile(rf"\b91{_SEP}?\d{{10}}\b", re.ASCII)),
    PatternRule("trunk_zero_prefix", re.compile(r"\b0\d{10}\b", re.ASCII)),
    PatternRule(
        "contact_label_bare",
        re.compile(rf"\bContact:{_GAP}\d{{10}}\b", re.ASCII | re.IGNORECASE),
    ),
    PatternRule(
        "contact_label_grouped",
        re.compile(
            rf"\bContact:{_GAP}\d{{3}}{_SEP}?\d{{3}}{_SEP}?\d{{4}}\b",
            re.ASCII | re.IGNORECASE,
        ),
    ),
)


def find_candidates(
    text: str, rules: tuple[PatternRule, ...] = PATTERN_RULES
) -> list[CandidateMatch]:
    """Collect every match of every rule, in rule order then text order.

    Args:
        text: Flat text to scan.
        rules: Rules to apply. Defaults to the built-in rule table.

    Returns:
        All candidate matches, including overlaps between rules.
    """
    return [
        CandidateMatch(m.group(0), rule.name, m.start(), m.end())
        for rule in rules
        for m in rule.pattern.finditer(text)
    ]


def normalize_candidate(raw: str) -> str | None:
    """Reduce a matched string to a canonical 10-digit mobile number.

    Non-digits are removed, then a leading ``91`` country code (12 digits)
    or a leading ``0`` trunk prefix (11 digits) is dropped.

    Args:
        raw: Matched text, possibly with separators and prefixes.

    Returns:
        The canonical number, or None if the digits do not form a
        10-digit number starting with 6, 7, 8 or 9.
    """
    digits = _NON_DIGIT.sub("", raw)

    if len(digits) == 12 and digits.startswith(COUNTRY_CODE):
        digits = digits[len(COUNTRY_CODE):]
    elif len(digits) == 11 and digits.startswith(TRUNK_PREFIX):
        digits = digits[len(TRUNK_PREFIX):]

    if len(digits) != CANONICAL_LENGTH or digits[0] not in VALID_LEADING_DIGITS:
        return None
    return digits


def recognize_numbers(text: str) -> list[str]:
    """Find all canonical phone numbers in a block of text.

    Args:
        text: Flat text extracted from a document. May be empty.

    Returns:
        Unique canonical numbers sorted in ascending order.
    """
    if not text:
        return []

    candidates = find_candidates(text)
    numbers = {n for c in candidates if (n := normalize_candidate(c.text)) is not None}

    logger.debug(
        f"Recognized {len(numbers)} unique numbers from {len(candidates)} candidates"
    )
    return sorted(numbers)
