"""currencytext exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Parsing and formatting of user input never raise; the only failures are
misconfiguration (at settings construction) and engine misuse.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CurrencyTextError",
    "EngineReentrancyError",
    "InvalidConfiguration",
    "InvalidConfigurationError",
]


class CurrencyTextError(Exception):
    """Base exception for all currencytext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyTextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidConfigurationError(CurrencyTextError, ValueError):
    """Malformed CurrencyFormatSettings, unknown locale or currency code.

    Fatal and raised at construction time only, never per keystroke.
    Subclasses ValueError so callers validating user-chosen settings can
    catch it alongside other value errors.

    Attributes:
        field_name: Settings field that failed validation ("" if unknown)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        super().__init__(message)
        field_name = message.field_name if isinstance(message, Diagnostic) else None
        self.field_name: str = field_name or ""


InvalidConfiguration = InvalidConfigurationError


class EngineReentrancyError(CurrencyTextError, RuntimeError):
    """A LiveEditEngine was called while it was already handling a call.

    Typically an observer or hook writing back into the engine that
    notified it. This is a programming error in the caller.
    """
