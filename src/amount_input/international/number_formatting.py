"""Render canonical amounts with a locale's separators."""
from __future__ import annotations
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..models.locale import DEFAULT_GROUPING, LocaleProfile


def group_integer_digits(digits: str, separator: str, grouping: tuple[int, int] = DEFAULT_GROUPING) -> str:
    """Insert *separator* between digit groups, counting from the right.

    The rightmost group has the primary size and every group to its left
    the secondary size, so (3, 2) gives Indian grouping: "12,34,567".
    """
    primary, secondary = grouping
    if len(digits) <= primary:
        return digits
    head, tail = digits[:-primary], digits[-primary:]
    first = len(head) % secondary or secondary
    groups = [head[:first]]
    groups.extend(head[i:i + secondary] for i in range(first, len(head), secondary))
    groups.append(tail)
    return separator.join(groups)


def format_integer_digits(digits: str, profile: LocaleProfile) -> str:
    """Group a run of ASCII digits without converting it to a number.

    Leading zeros are dropped; a run of zeros becomes "0".
    """
    return group_integer_digits(digits.lstrip("0") or "0", profile.group_separator, profile.grouping)


def fraction_digits_needed(value: float) -> int:
    """Number of fraction digits that print *value* without rounding it."""
    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(-exponent, 0)


def format_amount(
    value: float | int | None,
    profile: LocaleProfile,
    max_fraction_digits: int = 2,
    min_fraction_digits: int = 0,
) -> str:
    """Format *value* as a grouped display string.

    Rounds half away from zero to ``max_fraction_digits``. Trailing zero
    fraction digits are dropped down to ``min_fraction_digits``; when no
    fraction digits remain the decimal separator is omitted as well.
    NaN, infinities and ``None`` format as the empty string.
    """
    if value is None or not math.isfinite(value):
        return ""
    max_fraction_digits = max(max_fraction_digits, 0)
    min_fraction_digits = min(max(min_fraction_digits, 0), max_fraction_digits)

    exact = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + max_fraction_digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP)

    integer_digits, _, fraction_digits = format(abs(rounded), "f").partition(".")
    fraction_digits = fraction_digits.rstrip("0").ljust(min_fraction_digits, "0")

    text = group_integer_digits(integer_digits, profile.group_separator, profile.grouping)
    if fraction_digits:
        text += profile.decimal_separator + fraction_digits
    if rounded.is_signed() and rounded != 0:
        text = "-" + text
    return text
