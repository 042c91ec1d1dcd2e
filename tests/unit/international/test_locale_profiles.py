"""Test locale profile resolution."""
import pytest
from babel.core import UnknownLocaleError
from amount_input.international import locale_profiles
from amount_input.international.locale_profiles import (
    normalize_locale_tag, resolve_locale_profile, separators_from_probe,
)


class TestNormalizeLocaleTag:
    def test_bcp47(self):
        assert normalize_locale_tag("de-DE") == "de_DE"

    def test_posix_encoding(self):
        assert normalize_locale_tag("fr_FR.UTF-8") == "fr_FR"

    def test_modifier(self):
        assert normalize_locale_tag("de_DE@euro") == "de_DE"

    def test_blank(self):
        assert normalize_locale_tag("  ") is None

    def test_none(self):
        assert normalize_locale_tag(None) is None


class TestSeparatorsFromProbe:
    def test_us(self):
        assert separators_from_probe("12,345.67") == (",", ".")

    def test_de(self):
        assert separators_from_probe("12.345,67") == (".", ",")

    def test_space_group(self):
        assert separators_from_probe("12 345,67") == (" ", ",")

    def test_no_grouping(self):
        assert separators_from_probe("12345.67") == (",", ".")

    def test_no_decimal(self):
        assert separators_from_probe("12,346") == (",", ".")


class TestResolveLocaleProfile:
    def test_en_us(self):
        profile = resolve_locale_profile("en-US")
        assert profile.group_separator == ","
        assert profile.decimal_separator == "."
        assert profile.locale_tag == "en_US"

    def test_de_de(self):
        profile = resolve_locale_profile("de-DE")
        assert profile.group_separator == "."
        assert profile.decimal_separator == ","

    def test_fr_fr(self):
        profile = resolve_locale_profile("fr-FR")
        assert profile.decimal_separator == ","
        assert profile.group_separator not in "0123456789,"

    def test_en_in_grouping(self):
        profile = resolve_locale_profile("en-IN")
        assert profile.grouping == (3, 2)
        assert profile.group_separator == ","

    def test_en_us_grouping(self):
        assert resolve_locale_profile("en-US").grouping == (3, 3)

    def test_underscore_tag(self):
        assert resolve_locale_profile("de_DE") == resolve_locale_profile("de-DE")

    def test_unknown_locale_defaults(self):
        profile = resolve_locale_profile("zz")
        assert profile.group_separator == ","
        assert profile.decimal_separator == "."

    def test_malformed_tag_defaults(self):
        profile = resolve_locale_profile("not a locale!")
        assert (profile.group_separator, profile.decimal_separator) == (",", ".")

    def test_platform_default_from_environment(self, monkeypatch, fresh_profile_cache):
        for name in ("LANGUAGE", "LC_ALL", "LC_NUMERIC", "LC_CTYPE", "LANG"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LC_ALL", "de_DE.UTF-8")
        profile = resolve_locale_profile(None)
        assert profile.decimal_separator == ","

    def test_default_when_environment_silent(self, monkeypatch, fresh_profile_cache):
        for name in ("LANGUAGE", "LC_ALL", "LC_NUMERIC", "LC_CTYPE", "LANG"):
            monkeypatch.delenv(name, raising=False)
        profile = resolve_locale_profile(None, default="de-DE")
        assert profile.locale_tag == "de_DE"
        assert profile.decimal_separator == ","


class TestResolverFallbacks:
    def test_table_used_when_babel_has_no_data(self, monkeypatch, fresh_profile_cache):
        def unknown(*args, **kwargs):
            raise UnknownLocaleError("de_AT")

        monkeypatch.setattr(locale_profiles, "format_decimal", unknown)
        profile = resolve_locale_profile("de-AT")
        assert (profile.group_separator, profile.decimal_separator) == (".", ",")

    def test_table_grouping_used_when_babel_has_no_data(self, monkeypatch, fresh_profile_cache):
        def unknown(*args, **kwargs):
            raise UnknownLocaleError("en_IN")

        monkeypatch.setattr(locale_profiles, "format_decimal", unknown)
        assert resolve_locale_profile("en-IN").grouping == (3, 2)

    def test_exact_table_entry(self, monkeypatch, fresh_profile_cache):
        def unknown(*args, **kwargs):
            raise UnknownLocaleError("es_MX")

        monkeypatch.setattr(locale_profiles, "format_decimal", unknown)
        profile = resolve_locale_profile("es-MX")
        assert (profile.group_separator, profile.decimal_separator) == (",", ".")

    def test_identical_separators_repaired(self, monkeypatch, fresh_profile_cache):
        monkeypatch.setattr(locale_profiles, "format_decimal", lambda *a, **kw: "12.345.67")
        profile = resolve_locale_profile("xx-XX")
        assert profile.decimal_separator == "."
        assert profile.group_separator == ","

    def test_identical_comma_separators_repaired(self, monkeypatch, fresh_profile_cache):
        monkeypatch.setattr(locale_profiles, "format_decimal", lambda *a, **kw: "12345,67")
        profile = resolve_locale_profile("xx-XX")
        assert profile.decimal_separator == ","
        assert profile.group_separator == "."
