"""Tests for the ISO 4217 currency table.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from currencytext.currency import (
    Currency,
    CurrencyInfo,
    clear_currency_cache,
    common_locale_for,
    get_currency,
    is_valid_currency_code,
    list_currencies,
)


class TestCurrencyEnum:
    """Currency members and minor units."""

    @pytest.mark.parametrize(
        ("currency", "digits"),
        [
            (Currency.USD, 2),
            (Currency.EUR, 2),
            (Currency.JPY, 0),
            (Currency.KRW, 0),
            (Currency.KWD, 3),
            (Currency.BHD, 3),
            (Currency.CLF, 4),
        ],
    )
    def test_decimal_digits(self, currency: Currency, digits: int) -> None:
        assert currency.decimal_digits == digits

    def test_str_enum_compares_to_code(self) -> None:
        assert Currency.USD == "USD"

    @pytest.mark.parametrize("code", ["usd", "USD", " Usd "])
    def test_from_code_case_insensitive(self, code: str) -> None:
        assert Currency.from_code(code) is Currency.USD

    def test_from_code_unknown(self) -> None:
        assert Currency.from_code("ZZZ") is None


class TestGetCurrency:
    """get_currency resolves CLDR symbols and names through Babel."""

    def test_usd_default_symbol(self) -> None:
        info = get_currency("USD")
        assert info is not None
        assert info.symbol == "$"
        assert info.decimal_digits == 2
        assert info.common_locale == "en_US"

    def test_cad_uses_common_locale(self) -> None:
        info = get_currency("CAD")
        assert info is not None
        assert info.symbol == "$"

    def test_explicit_locale(self) -> None:
        info = get_currency("USD", locale="en-CA")
        assert info is not None
        assert info.symbol == "US$"

    def test_localized_name(self) -> None:
        info = get_currency("EUR", locale="en_US")
        assert info is not None
        assert info.name == "Euro"

    def test_unknown_code(self) -> None:
        assert get_currency("ZZZ") is None

    def test_cached_per_code(self, fresh_caches: None) -> None:
        assert get_currency("usd") is get_currency(Currency.USD)

    def test_clear_cache(self) -> None:
        first = get_currency("JPY")
        clear_currency_cache()
        second = get_currency("JPY")
        assert first == second

    def test_info_is_hashable(self) -> None:
        info = get_currency("GBP")
        assert info is not None
        assert info in {info}


class TestListCurrencies:
    def test_one_entry_per_member(self) -> None:
        currencies = list_currencies()
        assert len(currencies) == len(Currency)
        assert all(isinstance(info, CurrencyInfo) for info in currencies)

    def test_localized_listing(self) -> None:
        codes = {info.code for info in list_currencies("de_DE")}
        assert Currency.EUR in codes


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("USD", True), ("usd", False), ("ZZZ", False), ("US", False), (840, False)],
    )
    def test_is_valid_currency_code(self, value: object, expected: bool) -> None:
        assert is_valid_currency_code(value) is expected

    def test_common_locale(self) -> None:
        assert common_locale_for("cad") == "en_CA"
        assert common_locale_for(Currency.JPY) == "ja_JP"
        assert common_locale_for("XYZ") == "en"


class TestTableProperties:
    @given(currency=st.sampled_from(list(Currency)))
    def test_every_member_resolves(self, currency: Currency) -> None:
        """Every member has a non-empty symbol and ISO minor units."""
        info = get_currency(currency)
        assert info is not None
        assert info.symbol
        assert info.decimal_digits in (0, 2, 3, 4)
