"""Application configuration via environment variables with AMOUNT_INPUT_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Amount input configuration.

    All settings are read from environment variables prefixed with
    ``AMOUNT_INPUT_``. The defaults reproduce the behaviour of a plain
    currency field: US separators, two fraction digits when a value is
    re-rendered, and no arithmetic entry.
    """

    model_config = SettingsConfigDict(env_prefix="AMOUNT_INPUT_")

    # ── Locale ───────────────────────────────────────────────────────────
    # Used when neither the caller nor the environment names a locale
    default_locale: str = "en_US"

    # ── Formatting ───────────────────────────────────────────────────────
    max_fraction_digits: int = Field(default=2, ge=0, le=10)

    # ── Feature Flags ────────────────────────────────────────────────────
    enable_expressions: bool = False

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── API ──────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
