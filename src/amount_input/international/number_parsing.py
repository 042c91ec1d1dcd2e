"""Locale-aware amount parsing for typed input."""
from __future__ import annotations
import math
import re

from ..models.locale import LocaleProfile

# Longest float literal at the start of the text, in the spirit of parseFloat
_FLOAT_PREFIX = re.compile(r'\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_amount_text(text: str, profile: LocaleProfile) -> float:
    """Parse a display string into its canonical float value.

    Handles:
    - Group separators anywhere in the text: "1,234,567" → 1234567.0
    - Locale decimal separator: "1.234,5" (de) → 1234.5
    - Trailing noise: "12a34" → 12.0
    - Repeated decimal separators: "12.5.3" → 12.5 (only the first one counts)

    Returns ``math.nan`` when the text has no numeric prefix at all.
    """
    cleaned = text.replace(profile.group_separator, '')
    cleaned = cleaned.replace(profile.decimal_separator, '.', 1)
    return _parse_float_prefix(cleaned)


def is_digit_run(text: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return bool(text) and all('0' <= ch <= '9' for ch in text)


def is_nan(value: float | None) -> bool:
    return value is not None and math.isnan(value)


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return math.nan
    literal = match.group(0).strip()
    if literal.endswith('Infinity'):
        return -math.inf if literal.startswith('-') else math.inf
    return float(literal)
