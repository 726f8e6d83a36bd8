"""Raw text to CanonicalAmount.

The parser is total: any string, including pasted garbage, yields an
amount. Digits are read as minor units, so typing "1", "2", "3" into a USD
field fills the cents first and reads 1.23.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import unicodedata

from .amount import CanonicalAmount
from .settings import CurrencyFormatSettings

__all__ = ["AmountParser", "digit_value", "is_digit"]

_INT_CHUNK = 1000


def digit_value(ch: str) -> int | None:
    """Decimal value of a Unicode digit character, or None.

    Accepts any Nd character, so Arabic-Indic and fullwidth digits count.
    """
    return unicodedata.decimal(ch, None)


def is_digit(ch: str) -> bool:
    return unicodedata.decimal(ch, None) is not None


def _digits_to_int(digits: str) -> int:
    # int() refuses strings longer than sys.get_int_max_str_digits().
    value = 0
    for start in range(0, len(digits), _INT_CHUNK):
        chunk = digits[start : start + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


class AmountParser:
    """Parses field text under one CurrencyFormatSettings.

    Example:
        >>> from currencytext import CurrencyFormatSettings
        >>> parser = AmountParser(CurrencyFormatSettings.for_locale("USD", "en_US"))
        >>> parser.parse("$1,234.56")
        CanonicalAmount(minor_units=123456, is_negative=False)
        >>> parser.parse("ab1c2")
        CanonicalAmount(minor_units=12, is_negative=False)
    """

    __slots__ = ("_settings", "_sign_markers")

    def __init__(self, settings: CurrencyFormatSettings) -> None:
        self._settings = settings
        self._sign_markers = settings.sign_markers

    @property
    def settings(self) -> CurrencyFormatSettings:
        return self._settings

    def _sign_marker_at(self, text: str, index: int) -> str | None:
        # Locale minus signs may span several code points (bidi marks).
        for marker in self._sign_markers:
            if text.startswith(marker, index):
                return marker
        return None

    def digits_of(self, raw_input: str) -> str:
        """Return the ASCII digit string of every digit in raw_input."""
        return "".join(str(v) for v in map(digit_value, raw_input) if v is not None)

    def has_content(self, raw_input: str) -> bool:
        """Whether raw_input holds any digit or sign marker."""
        if any(is_digit(ch) for ch in raw_input):
            return True
        return any(marker in raw_input for marker in self._sign_markers)

    def has_sign(self, raw_input: str) -> bool:
        """Whether a sign marker precedes the first digit."""
        index = 0
        while index < len(raw_input):
            if is_digit(raw_input[index]):
                return False
            marker = self._sign_marker_at(raw_input, index)
            if marker is not None:
                return True
            index += 1
        return False

    def parse(self, raw_input: str) -> CanonicalAmount:
        """Parse raw_input into minor units and a sign flag. Never raises."""
        digits = self.digits_of(raw_input)
        negative = self.has_sign(raw_input)
        return CanonicalAmount(_digits_to_int(digits), is_negative=negative)
