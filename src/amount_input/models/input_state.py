"""Snapshot of a single amount field while it is being edited."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FieldStatus(StrEnum):
    EMPTY = "empty"
    VALID = "valid"
    PARTIAL = "partial"


class InputState(BaseModel):
    """Display text and canonical value of an amount field.

    ``numeric_value`` is ``None`` when the field is empty or when the text
    is not yet a complete number (for example ``"12."``). A state is never
    patched; every edit produces a new instance.
    """

    model_config = ConfigDict(frozen=True)

    display_text: str = ""
    numeric_value: float | None = None
    # Evaluated result shown beside the field while an arithmetic expression is typed
    calculation_result: str | None = None

    @classmethod
    def empty(cls) -> InputState:
        return cls()

    @property
    def status(self) -> FieldStatus:
        if not self.display_text:
            return FieldStatus.EMPTY
        if self.numeric_value is None:
            return FieldStatus.PARTIAL
        return FieldStatus.VALID

    @property
    def external_value(self) -> float:
        """Value handed to the form layer; incomplete input reports 0."""
        if self.numeric_value is None:
            return 0.0
        return self.numeric_value
