"""Hypothesis strategies for currencytext property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- currency: Amounts, formatting settings and noisy field text

Usage:
    from tests.strategies import canonical_amounts, format_settings
    from tests.strategies.currency import garbage_text
"""

from .currency import (
    COMMON_CURRENCIES,
    FORMATTING_LOCALES,
    canonical_amounts,
    decimal_values,
    format_settings,
    garbage_text,
    hand_built_settings,
)

__all__ = [
    "COMMON_CURRENCIES",
    "FORMATTING_LOCALES",
    "canonical_amounts",
    "decimal_values",
    "format_settings",
    "garbage_text",
    "hand_built_settings",
]
