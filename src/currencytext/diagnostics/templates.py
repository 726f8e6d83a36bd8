"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def decimal_digits_invalid(value: int, maximum: int) -> Diagnostic:
        """Decimal digit count outside 0..maximum.

        Args:
            value: The rejected decimal digit count
            maximum: Largest accepted count

        Returns:
            Diagnostic for DECIMAL_DIGITS_INVALID
        """
        msg = f"decimal_digits must be between 0 and {maximum}, got {value}"
        return Diagnostic(
            code=DiagnosticCode.DECIMAL_DIGITS_INVALID,
            message=msg,
            hint="Most currencies use 2; JPY uses 0, KWD uses 3",
            field_name="decimal_digits",
        )

    @staticmethod
    def separator_empty(field_name: str) -> Diagnostic:
        """Separator configured as an empty string."""
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_EMPTY,
            message=f"{field_name} must not be empty",
            hint="Set uses_grouping=False to disable grouping instead",
            field_name=field_name,
        )

    @staticmethod
    def separators_equal(separator: str) -> Diagnostic:
        """Grouping and decimal separators are the same character.

        Args:
            separator: The shared separator

        Returns:
            Diagnostic for SEPARATORS_EQUAL
        """
        msg = f"Grouping and decimal separators are both {separator!r}"
        return Diagnostic(
            code=DiagnosticCode.SEPARATORS_EQUAL,
            message=msg,
            hint="Use distinct characters, e.g. ',' and '.'",
            field_name="grouping_separator",
        )

    @staticmethod
    def separator_contains_digit(field_name: str, value: str) -> Diagnostic:
        """Separator or symbol text contains a decimal digit."""
        msg = f"{field_name} must not contain digits, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_CONTAINS_DIGIT,
            message=msg,
            hint="Digits in decorations would be read back as part of the amount",
            field_name=field_name,
        )

    @staticmethod
    def minus_sign_invalid(value: str) -> Diagnostic:
        """Minus sign empty, numeric, or clashing with a separator."""
        msg = f"minus_sign {value!r} is empty, numeric, or equal to a separator"
        return Diagnostic(
            code=DiagnosticCode.MINUS_SIGN_INVALID,
            message=msg,
            hint="Use the locale minus sign, usually '-'",
            field_name="minus_sign",
        )

    @staticmethod
    def max_integers_invalid(value: int) -> Diagnostic:
        """Maximum integer digit count below one."""
        return Diagnostic(
            code=DiagnosticCode.MAX_INTEGERS_INVALID,
            message=f"max_integers must be at least 1, got {value}",
            hint="Use None for no limit",
            field_name="max_integers",
        )

    @staticmethod
    def value_range_invalid(min_value: object, max_value: object) -> Diagnostic:
        """min_value greater than max_value."""
        msg = f"min_value ({min_value}) must not exceed max_value ({max_value})"
        return Diagnostic(
            code=DiagnosticCode.VALUE_RANGE_INVALID,
            message=msg,
            field_name="min_value",
        )

    @staticmethod
    def grouping_size_invalid(sizes: tuple[int, int]) -> Diagnostic:
        """Grouping sizes below one."""
        return Diagnostic(
            code=DiagnosticCode.GROUPING_SIZE_INVALID,
            message=f"grouping_sizes must be positive, got {sizes}",
            hint="Western grouping is (3, 3); Indian grouping is (3, 2)",
            field_name="grouping_sizes",
        )

    @staticmethod
    def value_not_numeric(field_name: str, value: object) -> Diagnostic:
        """Limit value that cannot be converted to Decimal."""
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_NUMERIC,
            message=f"{field_name} must be a Decimal, int or numeric string, got {value!r}",
            field_name=field_name,
        )

    @staticmethod
    def locale_unknown(locale_code: str, detail: str) -> Diagnostic:
        """Locale not recognized by CLDR.

        Args:
            locale_code: The locale code that failed to resolve
            detail: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale '{locale_code}': {detail}",
            hint="Use a BCP-47 or POSIX identifier such as 'en-US' or 'de_DE'",
            field_name="locale",
        )

    @staticmethod
    def currency_code_unknown(code: str) -> Diagnostic:
        """Currency code not present in the ISO 4217 table."""
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_UNKNOWN,
            message=f"Unknown ISO 4217 currency code '{code}'",
            hint="Currency codes are three uppercase letters, e.g. 'USD'",
            field_name="currency",
        )

    @staticmethod
    def reentrant_call(operation: str, active: str) -> Diagnostic:
        """Engine entered again while handling another call.

        Args:
            operation: Operation that was attempted
            active: Operation that was already running

        Returns:
            Diagnostic for REENTRANT_CALL
        """
        msg = f"LiveEditEngine.{operation}() called while {active}() is running"
        return Diagnostic(
            code=DiagnosticCode.REENTRANT_CALL,
            message=msg,
            hint="Defer writes from observers and hooks until the call returns",
        )
