"""Shared test fixtures."""
import pytest
from amount_input.config import Settings
from amount_input.international.locale_profiles import _resolve
from amount_input.models.locale import LocaleProfile


@pytest.fixture
def mock_settings():
    """Create test settings with predictable values."""
    return Settings(
        default_locale="en_US",
        max_fraction_digits=2,
        enable_expressions=False,
        log_level="DEBUG",
    )


@pytest.fixture
def en_us():
    return LocaleProfile(group_separator=",", decimal_separator=".", locale_tag="en_US")


@pytest.fixture
def de_de():
    return LocaleProfile(group_separator=".", decimal_separator=",", locale_tag="de_DE")


@pytest.fixture
def fr_fr():
    return LocaleProfile(group_separator=" ", decimal_separator=",", locale_tag="fr_FR")


@pytest.fixture
def fresh_profile_cache():
    """Drop cached profiles so monkeypatched locale data is picked up."""
    _resolve.cache_clear()
    yield
    _resolve.cache_clear()
