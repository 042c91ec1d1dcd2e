#!/usr/bin/env python3
"""Type amounts line by line and watch how the field synchronizes them.

Usage: amount_repl.py [LOCALE]

Each line is treated as the complete field text after an edit. Lines
starting with ``:locale`` switch the locale and re-render the current
value; ``:quit`` exits.
"""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from amount_input.config import Settings
from amount_input.synchronizer import AmountInput
from amount_input.utils.logging import setup_logging


def main(locale_tag: str | None) -> None:
    settings = Settings()
    setup_logging(settings.log_level)

    reported: list[float] = []
    field = AmountInput.from_settings(settings, locale_tag=locale_tag, on_value_change=reported.append)
    profile = field.profile
    print(f"Locale: {profile.locale_tag} (group {profile.group_separator!r}, decimal {profile.decimal_separator!r})")
    print("-" * 50)

    for line in sys.stdin:
        raw = line.rstrip("\n")
        if raw == ":quit":
            break
        if raw.startswith(":locale"):
            field.set_locale(raw.removeprefix(":locale").strip() or None)
            print(f"Locale: {field.profile.locale_tag} -> {field.display_text!r}")
            continue

        field.handle_input_change(raw)
        line_out = f"{field.display_text!r:<20} value={field.numeric_value!r:<14} reported={reported[-1]!r}"
        if field.calculation_result is not None:
            line_out += f" = {field.calculation_result}"
        print(line_out)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
