"""Locale profile routes."""
from __future__ import annotations
from fastapi import APIRouter, Request
from ...international.locale_profiles import resolve_locale_profile
from ...models.locale import LocaleProfile

router = APIRouter()


def _serialize_profile(profile: LocaleProfile) -> dict:
    return {
        "locale": profile.locale_tag,
        "group_separator": profile.group_separator,
        "decimal_separator": profile.decimal_separator,
        "grouping": list(profile.grouping),
        "example": profile.example,
    }


@router.get("")
async def get_default_profile(request: Request):
    """Separators of the configured default locale."""
    settings = request.app.state.settings
    return _serialize_profile(resolve_locale_profile(settings.default_locale))


@router.get("/{locale_tag}")
async def get_profile(locale_tag: str):
    """Separators of *locale_tag*; unknown tags fall back to defaults."""
    return _serialize_profile(resolve_locale_profile(locale_tag))
