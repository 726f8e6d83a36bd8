"""ISO 4217 currency table with CLDR presentation data via Babel.

The table is keyed by the three-letter codes of ``Currency``. Each entry
pairs static ISO 4217 data (minor units) with the locale where the currency
is most commonly used, and resolves the localized symbol and name from
Unicode CLDR through Babel. Entries are built lazily and cached, so the
table behaves as read-only process-wide state.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from babel import UnknownLocaleError
from babel.numbers import get_currency_name, get_currency_symbol

from currencytext.constants import MAX_LOCALE_CACHE_SIZE
from currencytext.locale_utils import normalize_locale

from .codes import Currency

if TYPE_CHECKING:
    from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "CurrencyInfo",
    # Lookup functions
    "get_currency",
    "list_currencies",
    "common_locale_for",
    # Type guards
    "is_valid_currency_code",
    # Cache management
    "clear_currency_cache",
]

logger = logging.getLogger(__name__)

# Locale where each currency is predominantly used. Drives the default
# symbol and name lookups: CAD resolves to "$" from en_CA rather than "CA$"
# from en.
_COMMON_LOCALES: dict[str, str] = {
    "AED": "ar_AE", "AFN": "fa_AF", "ALL": "sq_AL", "AMD": "hy_AM",
    "ANG": "nl_CW", "AOA": "pt_AO", "ARS": "es_AR", "AUD": "en_AU",
    "AWG": "nl_AW", "AZN": "az_AZ", "BAM": "bs_BA", "BBD": "en_BB",
    "BDT": "bn_BD", "BGN": "bg_BG", "BHD": "ar_BH", "BIF": "fr_BI",
    "BMD": "en_BM", "BND": "ms_BN", "BOB": "es_BO", "BOV": "es_BO",
    "BRL": "pt_BR", "BSD": "en_BS", "BTN": "dz_BT", "BWP": "en_BW",
    "BYN": "be_BY", "BZD": "en_BZ", "CAD": "en_CA", "CDF": "fr_CD",
    "CHE": "de_CH", "CHF": "de_CH", "CHW": "de_CH", "CLF": "es_CL",
    "CLP": "es_CL", "CNY": "zh_CN", "COP": "es_CO", "COU": "es_CO",
    "CRC": "es_CR", "CUC": "es_CU", "CUP": "es_CU", "CVE": "pt_CV",
    "CZK": "cs_CZ", "DJF": "fr_DJ", "DKK": "da_DK", "DOP": "es_DO",
    "DZD": "ar_DZ", "EGP": "ar_EG", "ERN": "ti_ER", "ETB": "am_ET",
    "EUR": "de_DE", "FJD": "en_FJ", "FKP": "en_FK", "GBP": "en_GB",
    "GEL": "ka_GE", "GHS": "en_GH", "GIP": "en_GI", "GMD": "en_GM",
    "GNF": "fr_GN", "GTQ": "es_GT", "GYD": "en_GY", "HKD": "zh_HK",
    "HNL": "es_HN", "HRK": "hr_HR", "HTG": "fr_HT", "HUF": "hu_HU",
    "IDR": "id_ID", "ILS": "he_IL", "INR": "hi_IN", "IQD": "ar_IQ",
    "IRR": "fa_IR", "ISK": "is_IS", "JMD": "en_JM", "JOD": "ar_JO",
    "JPY": "ja_JP", "KES": "sw_KE", "KGS": "ky_KG", "KHR": "km_KH",
    "KMF": "fr_KM", "KPW": "ko_KP", "KRW": "ko_KR", "KWD": "ar_KW",
    "KYD": "en_KY", "KZT": "kk_KZ", "LAK": "lo_LA", "LBP": "ar_LB",
    "LKR": "si_LK", "LRD": "en_LR", "LSL": "en_LS", "LYD": "ar_LY",
    "MAD": "ar_MA", "MDL": "ro_MD", "MGA": "mg_MG", "MKD": "mk_MK",
    "MMK": "my_MM", "MNT": "mn_MN", "MOP": "zh_MO", "MRU": "ar_MR",
    "MUR": "en_MU", "MVR": "en", "MWK": "en_MW", "MXN": "es_MX",
    "MXV": "es_MX", "MYR": "ms_MY", "MZN": "pt_MZ", "NAD": "en_NA",
    "NGN": "en_NG", "NIO": "es_NI", "NOK": "nb_NO", "NPR": "ne_NP",
    "NZD": "en_NZ", "OMR": "ar_OM", "PAB": "es_PA", "PEN": "es_PE",
    "PGK": "en_PG", "PHP": "fil_PH", "PKR": "ur_PK", "PLN": "pl_PL",
    "PYG": "es_PY", "QAR": "ar_QA", "RON": "ro_RO", "RSD": "sr_RS",
    "RUB": "ru_RU", "RWF": "rw_RW", "SAR": "ar_SA", "SBD": "en_SB",
    "SCR": "en_SC", "SDG": "ar_SD", "SEK": "sv_SE", "SGD": "en_SG",
    "SHP": "en_SH", "SLL": "en_SL", "SOS": "so_SO", "SRD": "nl_SR",
    "SSP": "en_SS", "STN": "pt_ST", "SVC": "es_SV", "SYP": "ar_SY",
    "SZL": "en_SZ", "THB": "th_TH", "TJS": "tg_TJ", "TMT": "tk_TM",
    "TND": "ar_TN", "TOP": "to_TO", "TRY": "tr_TR", "TTD": "en_TT",
    "TWD": "zh_TW", "TZS": "sw_TZ", "UAH": "uk_UA", "UGX": "en_UG",
    "USD": "en_US", "UYI": "es_UY", "UYU": "es_UY", "UZS": "uz_UZ",
    "VEF": "es_VE", "VND": "vi_VN", "VUV": "en_VU", "WST": "en_WS",
    "XCD": "en_AG", "YER": "ar_YE", "ZAR": "en_ZA", "ZMW": "en_ZM",
    "ZWL": "en_ZW",
}

# Locale used for symbol and name lookups when the common locale is unknown
# to the installed CLDR data.
_FALLBACK_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """ISO 4217 currency data with localized presentation.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: ISO 4217 currency code (e.g., 'USD', 'EUR').
        name: Localized display name (depends on locale used for lookup).
        symbol: Locale-specific symbol (e.g., '$', '€', 'CA$').
        decimal_digits: ISO 4217 minor units (0, 2, 3, or 4).
        common_locale: Locale where the currency is predominantly used.
    """

    code: Currency
    name: str
    symbol: str
    decimal_digits: int
    common_locale: str


# ============================================================================
# BABEL INTERFACE
# ============================================================================


def _babel_currency_symbol(code: str, locale_str: str) -> str:
    """Get localized currency symbol, or the code itself if CLDR has none."""
    try:
        return get_currency_symbol(code, locale=locale_str)
    except (UnknownLocaleError, ValueError, LookupError):
        # Babel raises UnknownLocaleError/ValueError for locales missing from
        # the installed CLDR data. Logic bugs (TypeError etc.) propagate.
        logger.debug("No CLDR symbol for %s in %s, using code", code, locale_str)
        return code


def _babel_currency_name(code: str, locale_str: str) -> str:
    """Get localized currency name, or the code itself if CLDR has none."""
    try:
        return get_currency_name(code, locale=locale_str)
    except (UnknownLocaleError, ValueError, LookupError):
        logger.debug("No CLDR name for %s in %s, using code", code, locale_str)
        return code


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


def common_locale_for(currency: Currency | str) -> str:
    """Return the locale where a currency is most commonly used.

    Args:
        currency: Currency member or ISO 4217 code. Case-insensitive.

    Returns:
        POSIX locale identifier, "en" for codes outside the table.
    """
    return _COMMON_LOCALES.get(str(currency).upper(), _FALLBACK_LOCALE)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_currency_impl(code: Currency, locale_norm: str | None) -> CurrencyInfo:
    common_locale = common_locale_for(code)
    lookup_locale = locale_norm or common_locale
    return CurrencyInfo(
        code=code,
        name=_babel_currency_name(code, lookup_locale),
        symbol=_babel_currency_symbol(code, lookup_locale),
        decimal_digits=code.decimal_digits,
        common_locale=common_locale,
    )


def get_currency(code: Currency | str, locale: str | None = None) -> CurrencyInfo | None:
    """Look up an ISO 4217 currency by code.

    Args:
        code: Currency member or ISO 4217 code (e.g., 'USD'). Case-insensitive.
        locale: Locale for name and symbol localization. Defaults to the
            currency's common locale, so USD yields '$' and CAD yields '$'
            too (from en_CA). Accepts BCP-47 or POSIX formats.

    Returns:
        CurrencyInfo if the code is in the table, None otherwise.

    Example:
        >>> get_currency("usd").symbol
        '$'
        >>> get_currency("USD", locale="en_CA").symbol
        'US$'

    Thread-safe. Results cached per (code, normalized locale) pair.
    """
    currency = Currency.from_code(str(code))
    if currency is None:
        return None
    locale_norm = normalize_locale(locale) if locale else None
    return _get_currency_impl(currency, locale_norm)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _list_currencies_impl(locale_norm: str | None) -> frozenset[CurrencyInfo]:
    return frozenset(_get_currency_impl(currency, locale_norm) for currency in Currency)


def list_currencies(locale: str | None = None) -> frozenset[CurrencyInfo]:
    """List every currency of the table.

    Args:
        locale: Locale for name/symbol localization. Defaults to each
            currency's common locale.

    Returns:
        Frozen set of CurrencyInfo objects, one per Currency member.

    Thread-safe. Result cached per normalized locale.
    """
    return _list_currencies_impl(normalize_locale(locale) if locale else None)


# ============================================================================
# TYPE GUARDS (PEP 742)
# ============================================================================


def is_valid_currency_code(value: object) -> TypeIs[str]:
    """Check if a value is an ISO 4217 code present in the currency table.

    Strict: only three uppercase letters are accepted.

    Args:
        value: Value to check.

    Returns:
        True if value names a Currency member.
    """
    if not isinstance(value, str) or len(value) != 3 or not value.isupper():
        return False
    return value in Currency.__members__


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_currency_cache() -> None:
    """Clear the currency lookup caches.

    Call this if you need to free memory. Thread-safe.
    """
    _get_currency_impl.cache_clear()
    _list_currencies_impl.cache_clear()
