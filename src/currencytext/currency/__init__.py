"""ISO 4217 currency table.

Exports:
    Currency: String enum of supported ISO 4217 codes
    CurrencyInfo: Immutable code/name/symbol/minor-units record
    get_currency, list_currencies, common_locale_for: Cached lookups
    is_valid_currency_code: Type guard for table membership
    clear_currency_cache: Drop cached lookups

Python 3.13+.
"""

from .codes import Currency
from .info import (
    CurrencyInfo,
    clear_currency_cache,
    common_locale_for,
    get_currency,
    is_valid_currency_code,
    list_currencies,
)

__all__ = [
    "Currency",
    "CurrencyInfo",
    "clear_currency_cache",
    "common_locale_for",
    "get_currency",
    "is_valid_currency_code",
    "list_currencies",
]
