"""Hypothesis strategies for currency text property-based testing.

Provides strategies for amounts, settings and raw field text used by the
parser, formatter and live edit engine tests.

Usage:
    from tests.strategies.currency import canonical_amounts, format_settings

Event-Emitting Strategies (HypoFuzz-Optimized):
    - canonical_amounts: Amount magnitude bucket
    - format_settings: Locale-derived vs hand-built configuration
    - garbage_text: Which noise class was mixed into the digits

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from currencytext import CanonicalAmount, Currency, CurrencyFormatSettings, NegativeStyle
from currencytext.formatting import SymbolPosition

# Locales with distinct number formatting
FORMATTING_LOCALES: list[str] = [
    "en_US", "de_DE", "fr_FR", "en_IN", "ja_JP", "pt_BR", "lv_LV",
]

# Currencies covering 0, 2 and 3 minor units
COMMON_CURRENCIES: list[Currency] = [
    Currency.USD, Currency.EUR, Currency.GBP, Currency.JPY, Currency.KWD,
    Currency.INR, Currency.BRL, Currency.CHF,
]


@composite
def canonical_amounts(draw: st.DrawFn, *, allow_negative: bool = True) -> CanonicalAmount:
    """Generate amounts across magnitudes.

    Events emitted:
    - amount_magnitude={zero|small|medium|huge}
    """
    category = draw(st.sampled_from(["zero", "small", "medium", "huge"]))
    match category:
        case "zero":
            minor_units = 0
        case "small":
            minor_units = draw(st.integers(min_value=1, max_value=999))
        case "medium":
            minor_units = draw(st.integers(min_value=1_000, max_value=99_999_999))
        case _:  # huge
            minor_units = draw(st.integers(min_value=10**8, max_value=10**20))
    negative = draw(st.booleans()) if allow_negative and minor_units > 0 else False
    event(f"amount_magnitude={category}")
    return CanonicalAmount(minor_units, is_negative=negative)


@composite
def hand_built_settings(draw: st.DrawFn) -> CurrencyFormatSettings:
    """Settings built field by field, independent of CLDR data."""
    grouping, decimal = draw(st.sampled_from([(",", "."), (".", ","), (" ", ","), ("'", ".")]))
    return CurrencyFormatSettings(
        currency=draw(st.sampled_from(COMMON_CURRENCIES)),
        has_decimals=draw(st.booleans()),
        decimal_digits=draw(st.integers(min_value=0, max_value=4)),
        grouping_separator=grouping,
        decimal_separator=decimal,
        symbol=draw(st.sampled_from(["$", "€", "kr", "CHF"])),
        symbol_position=draw(st.sampled_from(list(SymbolPosition))),
        symbol_spacing=draw(st.sampled_from(["", " "])),
        show_currency_symbol=draw(st.booleans()),
        negative_style=draw(st.sampled_from(list(NegativeStyle))),
        uses_grouping=draw(st.booleans()),
        grouping_sizes=draw(st.sampled_from([(3, 3), (3, 2), (4, 4)])),
    )


@composite
def format_settings(draw: st.DrawFn) -> CurrencyFormatSettings:
    """Generate valid settings from CLDR or from explicit fields.

    Events emitted:
    - settings_source={locale|manual}
    """
    if draw(st.booleans()):
        event("settings_source=locale")
        return CurrencyFormatSettings.for_locale(
            draw(st.sampled_from(COMMON_CURRENCIES)),
            draw(st.sampled_from(FORMATTING_LOCALES)),
            negative_style=draw(st.sampled_from(list(NegativeStyle))),
        )
    event("settings_source=manual")
    return draw(hand_built_settings())


@composite
def garbage_text(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (noisy_text, digits) where noisy_text holds digits amid noise.

    Events emitted:
    - garbage_noise={letters|punctuation|none}
    """
    digits = draw(st.text(alphabet="0123456789", min_size=1, max_size=12))
    noise_class = draw(st.sampled_from(["letters", "punctuation", "none"]))
    alphabet = {"letters": "abcxyz", "punctuation": "$€ ,._/*#", "none": ""}[noise_class]
    pieces: list[str] = []
    for digit in digits:
        if alphabet:
            pieces.append(draw(st.text(alphabet=alphabet, max_size=3)))
        pieces.append(digit)
    event(f"garbage_noise={noise_class}")
    return "".join(pieces), digits


decimal_values = st.decimals(
    min_value=Decimal("-99999999.99"),
    max_value=Decimal("99999999.99"),
    allow_nan=False,
    allow_infinity=False,
    places=4,
)
