"""Diagnostic system for currencytext errors.

Provides structured error diagnostics with codes, hints and field names.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CurrencyTextError,
    EngineReentrancyError,
    InvalidConfiguration,
    InvalidConfigurationError,
)
from .templates import ErrorTemplate

__all__ = [
    "CurrencyTextError",
    "Diagnostic",
    "DiagnosticCode",
    "EngineReentrancyError",
    "ErrorTemplate",
    "InvalidConfiguration",
    "InvalidConfigurationError",
]
