"""Tests for AmountFormatter: grouping, symbol placement, sign styles.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from currencytext import (
    AmountFormatter,
    CanonicalAmount,
    Currency,
    CurrencyFormatSettings,
    DisplayResult,
    NegativeStyle,
    SymbolPosition,
)
from currencytext.constants import MAX_INPUT_DIGITS
from currencytext.formatting import group_digits

USD = CurrencyFormatSettings(currency=Currency.USD)
USD_WHOLE = USD.replace(has_decimals=False)
EUR_DE = CurrencyFormatSettings(
    currency=Currency.EUR,
    locale="de_DE",
    grouping_separator=".",
    decimal_separator=",",
    symbol="€",
    symbol_position=SymbolPosition.SUFFIX,
    symbol_spacing="\xa0",
)


def fmt(settings: CurrencyFormatSettings, minor_units: int, negative: bool = False) -> str:
    return AmountFormatter(settings).format(CanonicalAmount(minor_units, negative)).text


class TestGroupDigits:
    """group_digits inserts separators from the right."""

    @pytest.mark.parametrize(
        ("digits", "primary", "secondary", "expected"),
        [
            ("1", 3, 3, "1"),
            ("123", 3, 3, "123"),
            ("1234", 3, 3, "1,234"),
            ("1234567", 3, 3, "1,234,567"),
            ("12345678", 3, 2, "1,23,45,678"),
            ("123456789", 4, 4, "1,2345,6789"),
        ],
    )
    def test_grouping(self, digits: str, primary: int, secondary: int, expected: str) -> None:
        assert group_digits(digits, ",", primary, secondary) == expected


class TestFormatNumber:
    """Integer/fraction split, grouping and padding."""

    def test_spec_example(self) -> None:
        assert fmt(USD, 123456789) == "$1,234,567.89"

    @pytest.mark.parametrize(
        ("minor_units", "expected"),
        [(0, "$0.00"), (1, "$0.01"), (12, "$0.12"), (123, "$1.23"), (100000, "$1,000.00")],
    )
    def test_type_to_fill_cents(self, minor_units: int, expected: str) -> None:
        assert fmt(USD, minor_units) == expected

    def test_no_decimals(self) -> None:
        assert fmt(USD_WHOLE, 1234) == "$1,234"

    def test_three_decimals(self) -> None:
        assert fmt(USD.replace(decimal_digits=3), 1234) == "$1.234"

    def test_grouping_disabled(self) -> None:
        assert fmt(USD.replace(uses_grouping=False), 123456789) == "$1234567.89"

    def test_indian_grouping(self) -> None:
        settings = USD_WHOLE.replace(grouping_sizes=(3, 2), symbol="₹")
        assert fmt(settings, 12345678) == "₹1,23,45,678"

    def test_symbol_hidden(self) -> None:
        assert fmt(USD.replace(show_currency_symbol=False), 123456) == "1,234.56"

    def test_suffix_symbol_with_spacing(self) -> None:
        assert fmt(EUR_DE, 123456) == "1.234,56\xa0€"

    def test_prefix_symbol_with_spacing(self) -> None:
        assert fmt(USD.replace(symbol="CHF", symbol_spacing=" "), 500) == "CHF 5.00"

    def test_multi_character_separators(self) -> None:
        settings = USD.replace(grouping_separator="'", decimal_separator="·")
        assert fmt(settings, 123456) == "$1'234·56"


class TestFormatSign:
    """Negative markers in MINUS and PARENTHESES styles."""

    def test_minus_prefix_symbol(self) -> None:
        assert fmt(USD_WHOLE, 5, negative=True) == "-$5"

    def test_parentheses(self) -> None:
        settings = USD_WHOLE.replace(negative_style=NegativeStyle.PARENTHESES)
        assert fmt(settings, 5, negative=True) == "($5)"

    def test_minus_suffix_symbol(self) -> None:
        assert fmt(EUR_DE.replace(has_decimals=False), 5, negative=True) == "-5\xa0€"

    def test_parentheses_suffix_symbol(self) -> None:
        settings = EUR_DE.replace(negative_style=NegativeStyle.PARENTHESES)
        assert fmt(settings, 500, negative=True) == "(5,00\xa0€)"

    def test_locale_minus_sign(self) -> None:
        assert fmt(USD_WHOLE.replace(minus_sign="−"), 5, negative=True) == "−$5"

    def test_negative_zero_hidden_by_default(self) -> None:
        assert fmt(USD, 0, negative=True) == "$0.00"

    def test_negative_zero_shown_on_request(self) -> None:
        result = AmountFormatter(USD).format(
            CanonicalAmount(0, is_negative=True), show_negative_zero=True
        )
        assert result.text == "-$0.00"


class TestDecimalMarkIndex:
    """decimal_mark_index points at the separator or where it would be."""

    def test_with_fraction(self) -> None:
        result = AmountFormatter(USD).format(CanonicalAmount(123456789))
        assert result == DisplayResult("$1,234,567.89", 10)
        assert result.text[result.decimal_mark_index] == "."

    def test_without_fraction(self) -> None:
        result = AmountFormatter(USD_WHOLE).format(CanonicalAmount(1234))
        assert result.decimal_mark_index == len("$1,234")

    def test_shifted_by_sign_and_parentheses(self) -> None:
        settings = USD.replace(negative_style=NegativeStyle.PARENTHESES)
        result = AmountFormatter(settings).format(CanonicalAmount(500, is_negative=True))
        assert result.text == "($5.00)"
        assert result.text[result.decimal_mark_index] == "."

    def test_suffix_symbol(self) -> None:
        result = AmountFormatter(EUR_DE).format(CanonicalAmount(123456))
        assert result.text[result.decimal_mark_index] == ","


class TestFormatDecimal:
    """format_decimal truncates toward zero."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1.23"), "$1.23"),
            (Decimal("1.999"), "$1.99"),
            (Decimal("-1.999"), "-$1.99"),
            (Decimal("-0.001"), "$0.00"),
            (Decimal("1E+3"), "$1,000.00"),
            (Decimal("12345678901234567890123456789012.34"), "$12,345,678,901,234,567,890,123,456,789,012.34"),
        ],
    )
    def test_format_decimal(self, value: Decimal, expected: str) -> None:
        assert AmountFormatter(USD).format_decimal(value).text == expected

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            AmountFormatter(USD).format_decimal(Decimal("NaN"))

    def test_largest_accepted_magnitude(self) -> None:
        text = AmountFormatter(USD).format_decimal(Decimal(10**36 - 1)).text
        assert text.count("9") == MAX_INPUT_DIGITS - 2

    @pytest.mark.parametrize("value", [Decimal(10**36), Decimal("1E+999999999")])
    def test_oversized_rejected(self, value: Decimal) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            AmountFormatter(USD).format_decimal(value)

    def test_zero_with_huge_exponent(self) -> None:
        assert AmountFormatter(USD).format_decimal(Decimal("0E+999999999")).text == "$0.00"

    def test_tiny_value(self) -> None:
        assert AmountFormatter(USD).format_decimal(Decimal("-1E-999999999")).text == "$0.00"
