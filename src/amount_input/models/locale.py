"""Locale separator data used to read and render amounts.

Provides the immutable ``LocaleProfile`` that the parser, formatter and
input synchronizer consume instead of a raw locale tag.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_GROUP_SEPARATOR = ","
DEFAULT_DECIMAL_SEPARATOR = "."
# Primary (rightmost) and secondary group sizes, as in CLDR patterns
DEFAULT_GROUPING = (3, 3)


class LocaleProfile(BaseModel):
    """Digit-grouping and decimal-separator characters of one locale."""

    model_config = ConfigDict(frozen=True)

    group_separator: str = Field(default=DEFAULT_GROUP_SEPARATOR, min_length=1, max_length=1)
    decimal_separator: str = Field(default=DEFAULT_DECIMAL_SEPARATOR, min_length=1, max_length=1)
    grouping: tuple[int, int] = DEFAULT_GROUPING
    locale_tag: str | None = None

    @model_validator(mode="after")
    def check_consistency(self) -> LocaleProfile:
        if self.group_separator == self.decimal_separator:
            raise ValueError(
                f"group and decimal separator must differ, both are {self.decimal_separator!r}"
            )
        if min(self.grouping) < 1:
            raise ValueError(f"group sizes must be positive, got {self.grouping}")
        return self

    @property
    def example(self) -> str:
        """Render ``1,234.56`` using this profile's separators."""
        return f"1{self.group_separator}234{self.decimal_separator}56"
