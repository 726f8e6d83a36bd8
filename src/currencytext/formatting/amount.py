"""Canonical amount: integer minor units plus an explicit sign.

Keeping the magnitude as a non-negative integer and the sign as a separate
flag lets the editor represent "-" followed by no digits (negative zero),
which a Decimal or float cannot carry through formatting.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from currencytext.constants import MAX_INPUT_DIGITS

__all__ = ["CanonicalAmount", "decimal_from", "fits_input_digits"]


def decimal_from(value: Decimal | int | float | str) -> Decimal:
    """Convert a number to Decimal without binary float artifacts.

    Floats go through repr(), the shortest literal that round-trips, so
    0.29 becomes Decimal("0.29") rather than 0.28999999999999998002...

    Raises:
        decimal.InvalidOperation: If a string is not numeric
        TypeError: If value is not a number or string
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    return Decimal(value)


@dataclass(frozen=True, slots=True)
class CanonicalAmount:
    """Exact monetary amount in minor units.

    Attributes:
        minor_units: Magnitude in the smallest displayed unit (cents for USD)
        is_negative: Sign flag; may be True while minor_units is 0
    """

    minor_units: int
    is_negative: bool = False

    def __post_init__(self) -> None:
        if self.minor_units < 0:
            msg = f"minor_units must be non-negative, got {self.minor_units}"
            raise ValueError(msg)

    @property
    def is_zero(self) -> bool:
        return self.minor_units == 0

    @property
    def is_negative_zero(self) -> bool:
        """Sign typed but no digits yet, e.g. "-" or "-$0.00"."""
        return self.is_negative and self.minor_units == 0

    def normalized(self) -> CanonicalAmount:
        """Drop the sign from a zero amount."""
        if self.is_negative_zero:
            return CanonicalAmount(0)
        return self

    def to_decimal(self, fraction_digits: int) -> Decimal:
        """Exact decimal value with fraction_digits places.

        Negative zero yields Decimal("0") scaled, never Decimal("-0").

        Example:
            >>> CanonicalAmount(123, is_negative=True).to_decimal(2)
            Decimal('-1.23')
        """
        sign = 1 if self.is_negative and self.minor_units > 0 else 0
        digits = tuple(int(d) for d in str(self.minor_units))
        return Decimal((sign, digits, -fraction_digits))

    @classmethod
    def from_decimal(cls, value: Decimal, fraction_digits: int) -> CanonicalAmount:
        """Convert a Decimal, truncating extra fraction digits toward zero.

        Works on the digit tuple, so no context precision limit applies.

        Raises:
            ValueError: If value is NaN or infinite, or needs more than
                MAX_INPUT_DIGITS minor-unit digits
        """
        if not value.is_finite():
            msg = f"Cannot convert non-finite Decimal {value} to an amount"
            raise ValueError(msg)
        if not fits_input_digits(value, fraction_digits):
            msg = f"Decimal {value} exceeds {MAX_INPUT_DIGITS} digits in minor units"
            raise ValueError(msg)
        sign, digits, exponent = value.as_tuple()
        coefficient = 0
        for digit in digits:
            coefficient = coefficient * 10 + digit
        shift = int(exponent) + fraction_digits
        if coefficient == 0 or -shift >= len(digits):
            # Zero, or every digit lies past the kept fraction digits.
            minor_units = 0
        elif shift >= 0:
            minor_units = coefficient * 10**shift
        else:
            minor_units = coefficient // 10**-shift
        return cls(minor_units, is_negative=bool(sign) and minor_units > 0)

    def rescale(self, from_digits: int, to_digits: int) -> CanonicalAmount:
        """Re-express in a different number of fraction digits.

        Adding digits multiplies by powers of ten; removing digits truncates
        toward zero, so $1.99 at two places becomes 1 at zero places.
        """
        if to_digits >= from_digits:
            minor_units = self.minor_units * 10 ** (to_digits - from_digits)
        else:
            minor_units = self.minor_units // 10 ** (from_digits - to_digits)
        return CanonicalAmount(minor_units, self.is_negative)


def fits_input_digits(value: Decimal, fraction_digits: int) -> bool:
    """True if finite value has fewer than MAX_INPUT_DIGITS minor-unit digits.

    Reads the exponent only, so 1E+999999999 is rejected without building
    the integer.
    """
    return not value or value.adjusted() + fraction_digits < MAX_INPUT_DIGITS
