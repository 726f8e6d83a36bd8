"""Currency amount parsing and formatting.

Exports:
    CurrencyFormatSettings: Immutable, validated configuration
    NegativeStyle, SymbolPosition: Sign and symbol placement options
    CanonicalAmount: Integer minor units plus sign
    AmountParser: Text -> CanonicalAmount, total over all strings
    AmountFormatter, DisplayResult: CanonicalAmount -> display text
    LocaleContext, CurrencyLayout: CLDR numeric conventions via Babel

Python 3.13+. Uses Babel for locale data.
"""

from .amount import CanonicalAmount
from .formatter import AmountFormatter, DisplayResult, group_digits
from .locale_context import CurrencyLayout, LocaleContext, SymbolPosition
from .parser import AmountParser
from .settings import CurrencyFormatSettings, NegativeStyle

__all__ = [
    "AmountFormatter",
    "AmountParser",
    "CanonicalAmount",
    "CurrencyFormatSettings",
    "CurrencyLayout",
    "DisplayResult",
    "LocaleContext",
    "NegativeStyle",
    "SymbolPosition",
    "group_digits",
]
