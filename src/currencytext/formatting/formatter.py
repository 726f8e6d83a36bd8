"""CanonicalAmount to display text.

All arithmetic is on integers: the integer and fraction parts come from a
single divmod of the minor units, so no binary float ever touches a value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .amount import CanonicalAmount
from .locale_context import SymbolPosition
from .settings import CurrencyFormatSettings, NegativeStyle

__all__ = ["AmountFormatter", "DisplayResult", "group_digits"]


@dataclass(frozen=True, slots=True)
class DisplayResult:
    """Formatted text and the index of its decimal separator.

    For amounts without a fraction, decimal_mark_index is where the
    separator would go: right after the last integer digit.
    """

    text: str
    decimal_mark_index: int


def group_digits(digits: str, separator: str, primary: int, secondary: int) -> str:
    """Insert separator into an ASCII digit string.

    The rightmost group has `primary` digits, every group to its left has
    `secondary` digits.

    Example:
        >>> group_digits("1234567", ",", 3, 3)
        '1,234,567'
        >>> group_digits("1234567", ",", 3, 2)
        '12,34,567'
    """
    if len(digits) <= primary:
        return digits
    head, tail = digits[:-primary], digits[-primary:]
    groups = [tail]
    while len(head) > secondary:
        groups.append(head[-secondary:])
        head = head[:-secondary]
    groups.append(head)
    return separator.join(reversed(groups))


class AmountFormatter:
    """Formats amounts under one CurrencyFormatSettings.

    Example:
        >>> from currencytext import CurrencyFormatSettings
        >>> fmt = AmountFormatter(CurrencyFormatSettings.for_locale("USD", "en_US"))
        >>> fmt.format(CanonicalAmount(123456789)).text
        '$1,234,567.89'
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: CurrencyFormatSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> CurrencyFormatSettings:
        return self._settings

    def _number_text(self, minor_units: int) -> tuple[str, int]:
        settings = self._settings
        fraction_digits = settings.fraction_digits
        integer_part, fraction_part = divmod(minor_units, 10**fraction_digits)

        integer_text = str(integer_part)
        if settings.uses_grouping:
            primary, secondary = settings.grouping_sizes
            integer_text = group_digits(
                integer_text, settings.grouping_separator, primary, secondary
            )
        if fraction_digits == 0:
            return integer_text, len(integer_text)
        fraction_text = str(fraction_part).zfill(fraction_digits)
        return integer_text + settings.decimal_separator + fraction_text, len(integer_text)

    def format(self, amount: CanonicalAmount, *, show_negative_zero: bool = False) -> DisplayResult:
        """Render amount as display text.

        Args:
            amount: Amount to render
            show_negative_zero: Render the negative marker for a signed zero,
                used while the user is typing after a minus sign

        Returns:
            DisplayResult with text and decimal separator index
        """
        settings = self._settings
        number, decimal_offset = self._number_text(amount.minor_units)

        symbol = settings.symbol_text
        prefix = suffix = ""
        if symbol:
            if settings.symbol_position is SymbolPosition.PREFIX:
                prefix = symbol + settings.symbol_spacing
            else:
                suffix = settings.symbol_spacing + symbol

        negative = amount.is_negative and (amount.minor_units > 0 or show_negative_zero)
        if negative:
            if settings.negative_style is NegativeStyle.PARENTHESES:
                prefix = "(" + prefix
                suffix = suffix + ")"
            else:
                prefix = settings.minus_sign + prefix

        return DisplayResult(
            text=prefix + number + suffix,
            decimal_mark_index=len(prefix) + decimal_offset,
        )

    def format_decimal(self, value: Decimal) -> DisplayResult:
        """Format a Decimal, truncating extra fraction digits toward zero.

        Raises:
            ValueError: If value is not finite or exceeds MAX_INPUT_DIGITS
                digits in minor units
        """
        return self.format(CanonicalAmount.from_decimal(value, self._settings.fraction_digits))
