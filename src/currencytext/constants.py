"""Shared constants for currencytext.

This module provides centralized configuration constants used across the
currency, formatting and editing packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- ISO 4217 data: Minor unit exceptions to the two-digit default
- Input limits: Bounds on digits accepted by live editing
- Cache limits: Memory bounds for locale and currency lookups
- Locale defaults: Fallback locale when none can be determined

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # ISO 4217 data
    "ISO_4217_DECIMAL_DIGITS",
    "ISO_4217_DEFAULT_DECIMALS",
    "ISO_CURRENCY_CODE_LENGTH",
    # Input limits
    "MAX_DECIMAL_DIGITS",
    "MAX_INPUT_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "CURRENCY_SIGN",
]

# ============================================================================
# ISO 4217 DATA
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Minor unit count for currencies that do not use the two-digit default.
# Source: ISO 4217 maintenance agency list (SIX Group).
# Babel's CLDR precision reflects cash usage and differs for some codes
# (e.g. IDR, HUF), so the ISO value is authoritative here.
ISO_4217_DECIMAL_DIGITS: dict[str, int] = {
    # Zero decimals
    "BIF": 0, "CLP": 0, "DJF": 0, "GNF": 0, "ISK": 0, "JPY": 0,
    "KMF": 0, "KRW": 0, "PYG": 0, "RWF": 0, "UGX": 0, "UYI": 0,
    "VND": 0, "VUV": 0, "XAF": 0, "XOF": 0, "XPF": 0,
    # Three decimals
    "BHD": 3, "IQD": 3, "JOD": 3, "KWD": 3, "LYD": 3, "OMR": 3, "TND": 3,
    # Four decimals
    "CLF": 4, "UYW": 4,
}

# Minor unit count for every code not listed above.
ISO_4217_DEFAULT_DECIMALS: int = 2

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Upper bound for a configured decimal digit count. No ISO 4217 currency
# exceeds 4; crypto-style settings may need up to 8.
MAX_DECIMAL_DIGITS: int = 8

# Maximum number of digits the live editor accepts in a single field.
# Edits producing more digits are rejected, keeping the previous text.
# 38 digits matches the precision of common DECIMAL(38, s) storage columns.
MAX_INPUT_DIGITS: int = 38

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances and currency lookups per function.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when the system locale cannot be determined.
DEFAULT_LOCALE: str = "en_US"

# CLDR placeholder for the currency symbol inside number patterns (U+00A4).
CURRENCY_SIGN: str = "\xa4"
