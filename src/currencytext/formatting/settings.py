"""Immutable currency formatting settings.

CurrencyFormatSettings holds every knob the parser, formatter and live edit
engine read: currency, locale, decimal handling, separators, symbol
placement, sign style and input limits. Construction validates the
configuration and raises InvalidConfigurationError for anything malformed;
there is no later point at which a bad configuration can surface.

Python 3.13+. Uses Babel (via LocaleContext) for locale-derived defaults.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from currencytext.constants import MAX_DECIMAL_DIGITS
from currencytext.currency import Currency
from currencytext.diagnostics import ErrorTemplate, InvalidConfigurationError
from currencytext.locale_utils import get_system_locale, normalize_locale

from .amount import decimal_from
from .locale_context import LocaleContext, SymbolPosition

__all__ = ["CurrencyFormatSettings", "NegativeStyle", "SymbolPosition"]

logger = logging.getLogger(__name__)


class NegativeStyle(StrEnum):
    """How negative amounts are marked in display text."""

    MINUS = "minus"  # -$5
    PARENTHESES = "parentheses"  # ($5), accounting style


def _has_digit(text: str) -> bool:
    return any(ch.isdigit() for ch in text)


def _to_decimal(value: Any, field_name: str) -> Decimal | None:
    if value is None:
        return None
    try:
        result = decimal_from(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidConfigurationError(
            ErrorTemplate.value_not_numeric(field_name, value)
        ) from None
    if not result.is_finite():
        raise InvalidConfigurationError(ErrorTemplate.value_not_numeric(field_name, value))
    return result


@dataclass(frozen=True, slots=True)
class CurrencyFormatSettings:
    """Immutable configuration for currency parsing, formatting and editing.

    Build from locale data with for_locale(); construct directly when every
    field is known. Use replace() to derive a modified copy.

    Examples:
        >>> usd = CurrencyFormatSettings.for_locale("USD", "en_US")
        >>> usd.symbol, usd.grouping_separator, usd.decimal_separator
        ('$', ',', '.')

        >>> eur = CurrencyFormatSettings.for_locale("EUR", "de-DE")
        >>> eur.symbol_position
        <SymbolPosition.SUFFIX: 'suffix'>

        >>> usd.replace(grouping_separator=".")
        Traceback (most recent call last):
            ...
        currencytext.diagnostics.errors.InvalidConfigurationError: ...

    Attributes:
        currency: ISO 4217 currency
        locale: POSIX locale identifier the conventions were taken from
        has_decimals: When False, amounts are whole units (no fraction shown)
        decimal_digits: Fraction digits shown when has_decimals is True
        grouping_separator: Character(s) between digit groups
        decimal_separator: Character(s) between integer and fraction
        symbol: Currency symbol text
        symbol_position: PREFIX or SUFFIX
        symbol_spacing: Text joining symbol and number
        show_currency_symbol: When False the symbol is omitted
        minus_sign: Negative marker for NegativeStyle.MINUS
        negative_style: MINUS or PARENTHESES
        uses_grouping: When False no grouping separators are inserted
        grouping_sizes: (primary, secondary) group widths
        max_integers: Maximum integer digits accepted while editing
        min_value: Lowest committed value; None or negative allows negatives
        max_value: Highest value accepted while editing
    """

    currency: Currency
    locale: str = "en_US"
    has_decimals: bool = True
    decimal_digits: int = 2
    grouping_separator: str = ","
    decimal_separator: str = "."
    symbol: str = "$"
    symbol_position: SymbolPosition = SymbolPosition.PREFIX
    symbol_spacing: str = ""
    show_currency_symbol: bool = True
    minus_sign: str = "-"
    negative_style: NegativeStyle = NegativeStyle.MINUS
    uses_grouping: bool = True
    grouping_sizes: tuple[int, int] = (3, 3)
    max_integers: int | None = None
    min_value: Decimal | None = None
    max_value: Decimal | None = None

    def __post_init__(self) -> None:
        """Coerce loose inputs and validate invariants.

        Raises:
            InvalidConfigurationError: On the first violated invariant.
        """
        currency = Currency.from_code(str(self.currency))
        if currency is None:
            raise InvalidConfigurationError(ErrorTemplate.currency_code_unknown(str(self.currency)))
        object.__setattr__(self, "currency", currency)
        object.__setattr__(self, "locale", normalize_locale(self.locale))
        object.__setattr__(self, "symbol_position", SymbolPosition(self.symbol_position))
        object.__setattr__(self, "negative_style", NegativeStyle(self.negative_style))
        object.__setattr__(self, "grouping_sizes", tuple(self.grouping_sizes))
        object.__setattr__(self, "min_value", _to_decimal(self.min_value, "min_value"))
        object.__setattr__(self, "max_value", _to_decimal(self.max_value, "max_value"))
        self._validate()

    def _validate(self) -> None:
        if (
            isinstance(self.decimal_digits, bool)
            or not isinstance(self.decimal_digits, int)
            or not 0 <= self.decimal_digits <= MAX_DECIMAL_DIGITS
        ):
            raise InvalidConfigurationError(
                ErrorTemplate.decimal_digits_invalid(self.decimal_digits, MAX_DECIMAL_DIGITS)
            )

        for field_name in ("grouping_separator", "decimal_separator"):
            if not getattr(self, field_name):
                raise InvalidConfigurationError(ErrorTemplate.separator_empty(field_name))
        if self.grouping_separator == self.decimal_separator:
            raise InvalidConfigurationError(
                ErrorTemplate.separators_equal(self.grouping_separator)
            )
        for field_name in ("grouping_separator", "decimal_separator", "symbol", "symbol_spacing"):
            value = getattr(self, field_name)
            if _has_digit(value):
                raise InvalidConfigurationError(
                    ErrorTemplate.separator_contains_digit(field_name, value)
                )

        if (
            not self.minus_sign
            or _has_digit(self.minus_sign)
            or self.minus_sign in (self.grouping_separator, self.decimal_separator)
        ):
            raise InvalidConfigurationError(ErrorTemplate.minus_sign_invalid(self.minus_sign))

        if self.max_integers is not None and self.max_integers < 1:
            raise InvalidConfigurationError(ErrorTemplate.max_integers_invalid(self.max_integers))

        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise InvalidConfigurationError(
                ErrorTemplate.value_range_invalid(self.min_value, self.max_value)
            )

        if len(self.grouping_sizes) != 2 or min(self.grouping_sizes) < 1:
            raise InvalidConfigurationError(ErrorTemplate.grouping_size_invalid(self.grouping_sizes))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def for_locale(
        cls,
        currency: Currency | str,
        locale: str | None = None,
        **overrides: Any,
    ) -> CurrencyFormatSettings:
        """Build settings from CLDR conventions for a currency and locale.

        Args:
            currency: Currency member or ISO 4217 code
            locale: BCP 47 or POSIX locale; defaults to the system locale
            **overrides: Field values replacing the locale-derived ones

        Returns:
            Validated CurrencyFormatSettings

        Raises:
            InvalidConfigurationError: Unknown currency or locale, or an
                override that violates an invariant
        """
        code = Currency.from_code(str(currency))
        if code is None:
            raise InvalidConfigurationError(ErrorTemplate.currency_code_unknown(str(currency)))

        ctx = LocaleContext.create_or_raise(locale or get_system_locale())
        layout = ctx.currency_layout()
        fields: dict[str, Any] = {
            "currency": code,
            "locale": ctx.normalized_code,
            "decimal_digits": code.decimal_digits,
            "grouping_separator": ctx.group_symbol,
            "decimal_separator": ctx.decimal_symbol,
            "symbol": ctx.currency_symbol(code),
            "symbol_position": layout.symbol_position,
            "symbol_spacing": layout.symbol_spacing,
            "minus_sign": ctx.minus_sign,
            "uses_grouping": layout.uses_grouping,
            "grouping_sizes": layout.grouping_sizes,
        }
        fields.update(overrides)
        logger.debug("Settings for %s in %s: %r", code, ctx.normalized_code, fields)
        return cls(**fields)

    def replace(self, **changes: Any) -> CurrencyFormatSettings:
        """Return a validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def fraction_digits(self) -> int:
        """Digits after the decimal separator actually displayed."""
        return self.decimal_digits if self.has_decimals else 0

    @property
    def allows_negative(self) -> bool:
        """Whether a leading sign marker may make the amount negative."""
        return self.min_value is None or self.min_value < 0

    @property
    def symbol_text(self) -> str:
        """Symbol as rendered: empty when show_currency_symbol is False."""
        return self.symbol if self.show_currency_symbol else ""

    @property
    def sign_markers(self) -> frozenset[str]:
        """Characters the parser treats as negative markers."""
        markers = {"-", "−", self.minus_sign}
        if self.negative_style is NegativeStyle.PARENTHESES:
            markers.add("(")
        return frozenset(markers)
