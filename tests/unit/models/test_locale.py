"""Test locale profile model."""
import pytest
from pydantic import ValidationError
from amount_input.models.locale import LocaleProfile


class TestLocaleProfile:
    def test_defaults(self):
        profile = LocaleProfile()
        assert profile.group_separator == ","
        assert profile.decimal_separator == "."
        assert profile.locale_tag is None

    def test_example_us(self, en_us):
        assert en_us.example == "1,234.56"

    def test_example_de(self, de_de):
        assert de_de.example == "1.234,56"

    def test_identical_separators_rejected(self):
        with pytest.raises(ValidationError):
            LocaleProfile(group_separator=",", decimal_separator=",")

    def test_multi_char_separator_rejected(self):
        with pytest.raises(ValidationError):
            LocaleProfile(group_separator="..", decimal_separator=",")

    def test_default_grouping(self, en_us):
        assert en_us.grouping == (3, 3)

    def test_zero_group_size_rejected(self):
        with pytest.raises(ValidationError):
            LocaleProfile(grouping=(3, 0))

    def test_frozen(self, en_us):
        with pytest.raises(ValidationError):
            en_us.decimal_separator = ","
