"""Keystroke-by-keystroke synchronization of an amount field.

The field keeps two representations in step: the text shown in the input
control and the canonical number behind it. Each edit runs through
``apply_input``, a pure transition that returns a fresh ``InputState``;
``seed_state`` rebuilds a state from an initial value, which is how a field
is re-rendered after a locale switch. ``AmountInput`` wraps both for UI
code that prefers an object holding the current state and a change
callback.
"""

from __future__ import annotations

import math
from typing import Callable

from .config import Settings
from .international.expressions import contains_operator, evaluate_expression
from .international.locale_profiles import resolve_locale_profile
from .international.number_formatting import format_amount, format_integer_digits, fraction_digits_needed
from .international.number_parsing import is_digit_run, is_nan, parse_amount_text
from .models.input_state import InputState
from .models.locale import LocaleProfile
from .utils.logging import get_logger

logger = get_logger(__name__)

CALCULATION_FRACTION_DIGITS = 2


def filter_amount_chars(raw: str, profile: LocaleProfile) -> str:
    """Keep ASCII digits and the decimal separator, drop everything else.

    Group separators typed by the user are dropped too; they only ever
    come back through the formatter.
    """
    return "".join(ch for ch in raw if "0" <= ch <= "9" or ch == profile.decimal_separator)


def apply_input(
    state: InputState,
    profile: LocaleProfile,
    raw: str,
    *,
    allow_expressions: bool = False,
) -> InputState:
    """Return the state that follows *state* once the field text becomes *raw*.

    The previous state is replaced, never modified. Input is never
    rejected: text that is not yet a complete number yields a state with
    ``numeric_value=None``.
    """
    if allow_expressions and contains_operator(raw):
        return _apply_expression(raw, profile)

    filtered = filter_amount_chars(raw, profile)
    integer_part, separator, fraction_part = filtered.partition(profile.decimal_separator)

    formatted_integer = format_integer_digits(integer_part, profile) if is_digit_run(integer_part) else ""

    display_text = formatted_integer
    if separator:
        # The fraction is kept verbatim while typing; trimming it would eat a zero the user just typed
        display_text += separator + fraction_part

    if not display_text:
        numeric_value = None
    elif separator and (not formatted_integer or not fraction_part):
        numeric_value = None
    else:
        parsed = parse_amount_text(display_text, profile)
        # Runs of digits too long for a float stay editable but carry no value
        numeric_value = parsed if math.isfinite(parsed) else None

    next_state = InputState(display_text=display_text, numeric_value=numeric_value)
    logger.debug("amount_input_changed", raw=raw, display_text=display_text,
                 numeric_value=numeric_value, status=next_state.status.value)
    return next_state


def seed_state(
    initial_value: float | int | str | None,
    profile: LocaleProfile,
    max_fraction_digits: int = 2,
) -> InputState:
    """Build a fresh state for *initial_value* under *profile*.

    Text is parsed with the profile's separators first; numbers are used
    as they are. Either way the display text is produced by the formatter,
    so the field reads correctly right after a locale change.
    """
    if initial_value is None:
        return InputState.empty()
    if isinstance(initial_value, str):
        value = parse_amount_text(initial_value, profile)
    else:
        value = float(initial_value)

    display_text = format_amount(value, profile, max_fraction_digits)
    if not display_text:
        return InputState.empty()
    return InputState(display_text=display_text, numeric_value=parse_amount_text(display_text, profile))


def external_value(state: InputState) -> float:
    """Value reported to the form layer, 0 while the field is empty or partial."""
    return state.external_value


def _apply_expression(raw: str, profile: LocaleProfile) -> InputState:
    result = evaluate_expression(raw, profile)
    if result is None:
        return InputState(display_text=raw, numeric_value=None, calculation_result=None)
    calculation = format_amount(result, profile, CALCULATION_FRACTION_DIGITS, CALCULATION_FRACTION_DIGITS)
    logger.debug("amount_expression_evaluated", expression=raw, result=result)
    return InputState(display_text=raw, numeric_value=result, calculation_result=calculation)


class AmountInput:
    """Amount field bound to a locale and an optional change callback.

    Example:
        >>> field = AmountInput(locale_tag="de-DE")
        >>> field.handle_input_change("1234,5")
        >>> field.display_text
        '1.234,5'
    """

    def __init__(
        self,
        initial_value: float | int | str | None = None,
        locale_tag: str | None = None,
        on_value_change: Callable[[float], None] | None = None,
        *,
        max_fraction_digits: int = 2,
        allow_expressions: bool = False,
    ):
        self.locale_tag = locale_tag
        self.on_value_change = on_value_change
        self.max_fraction_digits = max_fraction_digits
        self.allow_expressions = allow_expressions
        self.profile = resolve_locale_profile(locale_tag)
        self.initial_value = initial_value
        self.state = seed_state(initial_value, self.profile, max_fraction_digits)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        initial_value: float | int | str | None = None,
        locale_tag: str | None = None,
        on_value_change: Callable[[float], None] | None = None,
    ) -> AmountInput:
        return cls(
            initial_value,
            locale_tag or settings.default_locale,
            on_value_change,
            max_fraction_digits=settings.max_fraction_digits,
            allow_expressions=settings.enable_expressions,
        )

    @property
    def display_text(self) -> str:
        return self.state.display_text

    @property
    def numeric_value(self) -> float | None:
        return self.state.numeric_value

    @property
    def calculation_result(self) -> str | None:
        return self.state.calculation_result

    def handle_input_change(self, raw: str) -> None:
        """Apply one raw edit and report the resulting value."""
        self.state = apply_input(self.state, self.profile, raw, allow_expressions=self.allow_expressions)
        if self.on_value_change is not None:
            self.on_value_change(self.state.external_value)

    def set_locale(self, locale_tag: str | None) -> None:
        """Switch locale and re-render the current value with its separators."""
        previous = self.profile
        self.locale_tag = locale_tag
        self.profile = resolve_locale_profile(locale_tag)
        if self.state.numeric_value is not None:
            current: float | None = self.state.numeric_value
        elif self.state.display_text:
            # Partial text is read under the separators it was typed with
            parsed = parse_amount_text(self.state.display_text, previous)
            current = None if is_nan(parsed) else parsed
        else:
            current = None
        digits = self.max_fraction_digits
        if current is not None:
            # Re-rendering must not round what the user typed
            digits = max(digits, fraction_digits_needed(current))
        self.state = seed_state(current, self.profile, digits)

    def set_initial_value(self, initial_value: float | int | str | None) -> None:
        self.initial_value = initial_value
        self.state = seed_state(initial_value, self.profile, self.max_fraction_digits)
