"""Diagnostic codes and data structures.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (settings construction)
        2000-2999: Locale and currency data errors
        3000-3999: Engine usage errors
    """

    # Configuration errors (1000-1999)
    DECIMAL_DIGITS_INVALID = 1001
    SEPARATOR_EMPTY = 1002
    SEPARATORS_EQUAL = 1003
    SEPARATOR_CONTAINS_DIGIT = 1004
    MINUS_SIGN_INVALID = 1005
    MAX_INTEGERS_INVALID = 1006
    VALUE_RANGE_INVALID = 1007
    GROUPING_SIZE_INVALID = 1008
    VALUE_NOT_NUMERIC = 1009

    # Locale and currency data errors (2000-2999)
    LOCALE_UNKNOWN = 2001
    CURRENCY_CODE_UNKNOWN = 2002

    # Engine usage errors (3000-3999)
    REENTRANT_CALL = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field_name: Settings field the error refers to (configuration errors)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in a compiler-like layout.

        Example output:
            error[SEPARATORS_EQUAL]: Grouping and decimal separators are both ','
              = field: grouping_separator
              = help: Use distinct characters, e.g. ',' and '.'

        Control characters in the message are escaped so that values taken
        from user input cannot forge extra log lines.
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.field_name:
            lines.append(f"  = field: {self.field_name}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return "".join(
        ch if ch.isprintable() or ch == " " else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )
