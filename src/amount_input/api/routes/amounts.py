"""Amount parsing, formatting and input synchronization routes.

The input routes are stateless: the client sends the state it holds and
receives the next one, mirroring ``synchronizer.apply_input``.
"""
from __future__ import annotations
import math
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field
from ...config import Settings
from ...international.locale_profiles import resolve_locale_profile
from ...international.number_formatting import format_amount
from ...international.number_parsing import parse_amount_text
from ...models.input_state import InputState
from ...models.locale import LocaleProfile
from ...synchronizer import apply_input, seed_state
from ...utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


class ParseRequest(BaseModel):
    text: str
    locale: str | None = None


class FormatRequest(BaseModel):
    value: float
    locale: str | None = None
    max_fraction_digits: int | None = Field(default=None, ge=0, le=10)
    min_fraction_digits: int = Field(default=0, ge=0, le=10)


class InputRequest(BaseModel):
    raw: str
    locale: str | None = None
    state: InputState | None = None
    allow_expressions: bool | None = None


class SeedRequest(BaseModel):
    initial_value: float | str | None = None
    locale: str | None = None
    max_fraction_digits: int | None = Field(default=None, ge=0, le=10)


def _profile_for(request: Request, locale: str | None) -> tuple[Settings, LocaleProfile]:
    settings = request.app.state.settings
    return settings, resolve_locale_profile(locale or settings.default_locale)


def _serialize_state(state: InputState, profile: LocaleProfile) -> dict:
    return {
        "display_text": state.display_text,
        "numeric_value": state.numeric_value,
        "calculation_result": state.calculation_result,
        "external_value": state.external_value,
        "status": state.status.value,
        "locale": profile.locale_tag,
    }


@router.post("/parse")
async def parse_amount(payload: ParseRequest, request: Request):
    """Parse display text; ``value`` is null when nothing numeric was found."""
    _, profile = _profile_for(request, payload.locale)
    value = parse_amount_text(payload.text, profile)
    return {
        "value": value if math.isfinite(value) else None,
        "locale": profile.locale_tag,
    }


@router.post("/format")
async def format_value(payload: FormatRequest, request: Request):
    """Format a canonical value with the locale's separators."""
    settings, profile = _profile_for(request, payload.locale)
    max_digits = settings.max_fraction_digits if payload.max_fraction_digits is None else payload.max_fraction_digits
    return {
        "text": format_amount(payload.value, profile, max_digits, payload.min_fraction_digits),
        "locale": profile.locale_tag,
    }


@router.post("/input")
async def apply_input_change(payload: InputRequest, request: Request):
    """Apply one raw edit to the client's field state."""
    settings, profile = _profile_for(request, payload.locale)
    allow_expressions = settings.enable_expressions if payload.allow_expressions is None else payload.allow_expressions
    state = apply_input(payload.state or InputState.empty(), profile, payload.raw,
                        allow_expressions=allow_expressions)
    return _serialize_state(state, profile)


@router.post("/seed")
async def seed_field(payload: SeedRequest, request: Request):
    """Build the initial state of a field, e.g. after a locale change."""
    settings, profile = _profile_for(request, payload.locale)
    max_digits = settings.max_fraction_digits if payload.max_fraction_digits is None else payload.max_fraction_digits
    state = seed_state(payload.initial_value, profile, max_digits)
    logger.info("amount_field_seeded", locale=profile.locale_tag, status=state.status.value)
    return _serialize_state(state, profile)
