"""currencytext - Incremental currency text-field formatting.

Locale-aware grouping and decimal handling, sign handling, type-to-fill-cents
parsing and live re-formatting of partially typed input with a stable
cursor. Locale conventions come from Unicode CLDR via Babel.

Public API:
    CurrencyFormatSettings - Immutable, validated formatting configuration
    AmountParser - Text to CanonicalAmount, total over all strings
    AmountFormatter - CanonicalAmount to display text
    LiveEditEngine - Per-field edit loop with cursor stability
    Currency - ISO 4217 currency codes

Exceptions:
    CurrencyTextError - Base exception class
    InvalidConfigurationError - Rejected settings, locale or currency
    EngineReentrancyError - Engine called from its own observer or hook

Submodules:
    currencytext.currency - ISO 4217 table with CLDR names and symbols
    currencytext.formatting - Settings, parser, formatter, LocaleContext
    currencytext.editing - LiveEditEngine, EditState, hooks and observers
    currencytext.diagnostics - Error types, codes and message templates
"""

from .currency import Currency, CurrencyInfo, get_currency, is_valid_currency_code, list_currencies
from .diagnostics import (
    CurrencyTextError,
    EngineReentrancyError,
    InvalidConfiguration,
    InvalidConfigurationError,
)
from .editing import EditingHooks, EditResult, EngineState, EngineUpdate, LiveEditEngine
from .formatting import (
    AmountFormatter,
    AmountParser,
    CanonicalAmount,
    CurrencyFormatSettings,
    DisplayResult,
    NegativeStyle,
    SymbolPosition,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencytext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmountFormatter",
    "AmountParser",
    "CanonicalAmount",
    "Currency",
    "CurrencyFormatSettings",
    "CurrencyInfo",
    "CurrencyTextError",
    "DisplayResult",
    "EditResult",
    "EditingHooks",
    "EngineReentrancyError",
    "EngineState",
    "EngineUpdate",
    "InvalidConfiguration",
    "InvalidConfigurationError",
    "LiveEditEngine",
    "NegativeStyle",
    "SymbolPosition",
    "__version__",
    "get_currency",
    "is_valid_currency_code",
    "list_currencies",
]
