"""Resolve the separator characters and group sizes of a locale from CLDR data."""
from __future__ import annotations
from functools import lru_cache

from babel.core import Locale, UnknownLocaleError, default_locale
from babel.numbers import format_decimal

from ..models.locale import DEFAULT_DECIMAL_SEPARATOR, DEFAULT_GROUP_SEPARATOR, DEFAULT_GROUPING, LocaleProfile
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Magnitude with a grouping boundary and a fractional part
PROBE_VALUE = 12345.67
PROBE_FRACTION = "67"

FALLBACK_LOCALE = "en_US"

# Used only when Babel has no data for a tag
LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en_US": (",", "."),
    "en_GB": (",", "."),
    "en_IN": (",", "."),
    "de_DE": (".", ","),
    "de_CH": ("’", "."),
    "fr_FR": (" ", ","),
    "fr_CH": (" ", ","),
    "es_ES": (".", ","),
    "es_MX": (",", "."),
    "it_IT": (".", ","),
    "nl_NL": (".", ","),
    "pt_BR": (".", ","),
    "pt_PT": (" ", ","),
    "pl_PL": (" ", ","),
    "ru_RU": (" ", ","),
    "sv_SE": (" ", ","),
    "ja_JP": (",", "."),
    "zh_CN": (",", "."),
}

# Language-only fallbacks for tags such as "de_AT" missing from the table above
LANGUAGE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en": (",", "."),
    "de": (".", ","),
    "fr": (" ", ","),
    "es": (".", ","),
    "it": (".", ","),
    "nl": (".", ","),
    "pt": (".", ","),
    "pl": (" ", ","),
    "ru": (" ", ","),
    "sv": (" ", ","),
    "ja": (",", "."),
    "zh": (",", "."),
}

# Group sizes that differ from CLDR's usual (3, 3), used without Babel data
LOCALE_GROUPING: dict[str, tuple[int, int]] = {
    "en_IN": (3, 2),
    "hi_IN": (3, 2),
}


def normalize_locale_tag(locale_tag: str | None) -> str | None:
    """Turn a BCP-47 style tag ("de-DE") into Babel's form ("de_DE").

    Encoding and modifier suffixes as found in POSIX environment variables
    ("de_DE.UTF-8@euro") are dropped. Blank tags normalise to ``None``.
    """
    if not locale_tag or not locale_tag.strip():
        return None
    tag = locale_tag.strip().split(".", 1)[0].split("@", 1)[0]
    return tag.replace("-", "_") or None


def resolve_locale_profile(locale_tag: str | None = None, default: str = FALLBACK_LOCALE) -> LocaleProfile:
    """Return the separator profile for *locale_tag*.

    ``None`` means the platform default locale (taken from the ``LC_ALL``,
    ``LC_NUMERIC`` and ``LANG`` environment variables), or *default* when
    the environment names none. Never raises.
    """
    tag = normalize_locale_tag(locale_tag)
    if tag is None:
        tag = normalize_locale_tag(default_locale("LC_NUMERIC")) or normalize_locale_tag(default) or FALLBACK_LOCALE
    return _resolve(tag)


@lru_cache(maxsize=256)
def _resolve(tag: str) -> LocaleProfile:
    try:
        probe = format_decimal(PROBE_VALUE, locale=tag)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        group, decimal = _lookup_separators(tag)
        grouping = LOCALE_GROUPING.get(tag, DEFAULT_GROUPING)
        logger.warning("locale_profile_fallback", locale=tag, error=str(e),
                       group_separator=group, decimal_separator=decimal)
        return _build_profile(tag, group, decimal, grouping)

    group, decimal = separators_from_probe(probe)
    grouping = pattern_grouping(tag)
    logger.debug("locale_profile_resolved", locale=tag, probe=probe,
                 group_separator=group, decimal_separator=decimal, grouping=grouping)
    return _build_profile(tag, group, decimal, grouping)


def pattern_grouping(tag: str) -> tuple[int, int]:
    """Primary and secondary group sizes of the locale's decimal pattern.

    Most locales group by (3, 3); Indian locales use (3, 2). Patterns
    without grouping report a size larger than any amount.
    """
    try:
        primary, secondary = Locale.parse(tag).decimal_formats[None].grouping
    except (UnknownLocaleError, ValueError, TypeError, KeyError):
        return LOCALE_GROUPING.get(tag, DEFAULT_GROUPING)
    return primary, secondary


def separators_from_probe(probe: str) -> tuple[str, str]:
    """Read the group and decimal characters out of a formatted probe.

    The probe is scanned as a stream of tokens: runs of ASCII digits and
    single separator characters. A separator directly followed by the final
    fraction digits is the decimal token; any earlier one is the group
    token. Missing tokens fall back to ``,`` and ``.``.
    """
    tokens: list[tuple[str, str]] = []
    for ch in probe:
        kind = "digits" if "0" <= ch <= "9" else "literal"
        if kind == "digits" and tokens and tokens[-1][0] == "digits":
            tokens[-1] = ("digits", tokens[-1][1] + ch)
        else:
            tokens.append((kind, ch))

    group = decimal = None
    for index, (kind, value) in enumerate(tokens):
        if kind != "literal" or index == 0 or tokens[index - 1][0] != "digits":
            continue
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if following is None or following[0] != "digits":
            continue
        if following[1] == PROBE_FRACTION and decimal is None:
            decimal = value
        elif group is None:
            group = value

    return group or DEFAULT_GROUP_SEPARATOR, decimal or DEFAULT_DECIMAL_SEPARATOR


def _lookup_separators(tag: str) -> tuple[str, str]:
    if tag in LOCALE_SEPARATORS:
        return LOCALE_SEPARATORS[tag]
    language = tag.split("_", 1)[0].lower()
    return LANGUAGE_SEPARATORS.get(language, (DEFAULT_GROUP_SEPARATOR, DEFAULT_DECIMAL_SEPARATOR))


def _build_profile(tag: str, group: str, decimal: str, grouping: tuple[int, int] = DEFAULT_GROUPING) -> LocaleProfile:
    if group == decimal:
        # Both characters must stay distinguishable for parsing to work
        replacement = DEFAULT_DECIMAL_SEPARATOR if decimal == DEFAULT_GROUP_SEPARATOR else DEFAULT_GROUP_SEPARATOR
        logger.warning("locale_profile_separator_clash", locale=tag,
                       separator=decimal, group_separator=replacement)
        group = replacement
    return LocaleProfile(group_separator=group, decimal_separator=decimal, grouping=grouping, locale_tag=tag)
