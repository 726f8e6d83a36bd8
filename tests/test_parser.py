"""Tests for AmountParser: digit extraction, sign detection, totality.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from currencytext import (
    AmountParser,
    CanonicalAmount,
    Currency,
    CurrencyFormatSettings,
    NegativeStyle,
)
from tests.strategies import format_settings, garbage_text

USD = CurrencyFormatSettings(currency=Currency.USD)
USD_WHOLE = USD.replace(has_decimals=False)
USD_PARENS = USD.replace(negative_style=NegativeStyle.PARENTHESES)


class TestParseDigits:
    """Digits become minor units directly (type-to-fill-cents)."""

    @pytest.mark.parametrize(
        ("raw", "minor_units"),
        [
            ("1", 1),
            ("12", 12),
            ("123", 123),
            ("$1.23", 123),
            ("$1,234,567.89", 123456789),
            ("$0.05", 5),
            ("007", 7),
        ],
    )
    def test_digits_are_minor_units(self, raw: str, minor_units: int) -> None:
        assert AmountParser(USD).parse(raw) == CanonicalAmount(minor_units)

    def test_no_decimals_reads_whole_units(self) -> None:
        assert AmountParser(USD_WHOLE).parse("$1,234") == CanonicalAmount(1234)

    def test_garbage_parses_like_digits(self) -> None:
        parser = AmountParser(USD)
        assert parser.parse("ab1c2") == parser.parse("12") == CanonicalAmount(12)

    def test_unicode_decimal_digits(self) -> None:
        parser = AmountParser(USD)
        assert parser.parse("١٢٣") == CanonicalAmount(123)  # Arabic-Indic
        assert parser.parse("１２") == CanonicalAmount(12)  # fullwidth

    def test_superscripts_are_not_digits(self) -> None:
        assert AmountParser(USD).parse("5²") == CanonicalAmount(5)

    def test_empty_input(self) -> None:
        assert AmountParser(USD).parse("") == CanonicalAmount(0)

    def test_very_long_input(self) -> None:
        """Inputs beyond int()'s string length limit still parse."""
        amount = AmountParser(USD).parse("9" * 5000)
        assert amount.minor_units == 10**5000 - 1


class TestParseSign:
    """Sign markers before the first digit set the negative flag."""

    @pytest.mark.parametrize("raw", ["-5", "$-5", "-$5", "−5", " - 5"])
    def test_leading_minus(self, raw: str) -> None:
        assert AmountParser(USD_WHOLE).parse(raw) == CanonicalAmount(5, is_negative=True)

    def test_trailing_minus_discarded(self) -> None:
        assert AmountParser(USD_WHOLE).parse("5-") == CanonicalAmount(5)

    def test_minus_between_digits_discarded(self) -> None:
        assert AmountParser(USD_WHOLE).parse("5-3") == CanonicalAmount(53)

    def test_sign_only_is_negative_zero(self) -> None:
        amount = AmountParser(USD).parse("-")
        assert amount == CanonicalAmount(0, is_negative=True)
        assert amount.is_negative_zero

    def test_parenthesis_in_parentheses_style(self) -> None:
        assert AmountParser(USD_PARENS).parse("($5.00)") == CanonicalAmount(500, True)

    def test_parenthesis_ignored_in_minus_style(self) -> None:
        assert AmountParser(USD).parse("($5.00)") == CanonicalAmount(500)

    def test_locale_minus_sign(self) -> None:
        settings = USD.replace(minus_sign="–")
        assert AmountParser(settings).parse("–5") == CanonicalAmount(5, True)


class TestHelpers:
    """digits_of and has_content."""

    def test_digits_of_normalizes_to_ascii(self) -> None:
        assert AmountParser(USD).digits_of("$١,2.3") == "123"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", False), ("$", False), (",.", False), ("-", True), ("a1", True)],
    )
    def test_has_content(self, raw: str, expected: bool) -> None:
        assert AmountParser(USD).has_content(raw) is expected

    def test_has_sign_stops_at_first_digit(self) -> None:
        parser = AmountParser(USD)
        assert parser.has_sign("-1")
        assert not parser.has_sign("1-")


class TestParserProperties:
    """Properties that hold for every input."""

    @given(raw=st.text())
    def test_parse_never_raises(self, raw: str) -> None:
        amount = AmountParser(USD_PARENS).parse(raw)
        assert amount.minor_units >= 0

    @given(sample=garbage_text())
    def test_noise_is_ignored(self, sample: tuple[str, str]) -> None:
        noisy, digits = sample
        assert AmountParser(USD).parse(noisy) == CanonicalAmount(int(digits))

    @given(settings=format_settings(), raw=st.text(max_size=30))
    def test_digit_count_preserved(self, settings: CurrencyFormatSettings, raw: str) -> None:
        """The amount is the integer value of exactly the digits in the input."""
        parser = AmountParser(settings)
        digits = parser.digits_of(raw)
        event(f"has_digits={bool(digits)}")
        assert parser.parse(raw).minor_units == (int(digits) if digits else 0)
