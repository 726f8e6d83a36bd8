"""Locale context exposing CLDR numeric conventions for currency input.

This module provides the locale data the settings layer needs without
global state mutation. Uses Babel for CLDR-compliant symbols and patterns.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - CurrencyLayout: Symbol position, spacing and grouping from the
      locale's standard currency pattern
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import StrEnum
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from currencytext.constants import CURRENCY_SIGN, DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from currencytext.diagnostics import ErrorTemplate, InvalidConfigurationError
from currencytext.locale_utils import get_babel_locale, normalize_locale

__all__ = ["CurrencyLayout", "LocaleContext", "SymbolPosition"]

logger = logging.getLogger(__name__)

# Babel reports (1000, 1000) for patterns without a grouping separator.
_NO_GROUPING_SIZE = 1000


class SymbolPosition(StrEnum):
    """Where the currency symbol sits relative to the number."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True, slots=True)
class CurrencyLayout:
    """Currency pattern facts extracted from CLDR.

    Attributes:
        symbol_position: PREFIX for "$1.00", SUFFIX for "1,00 €"
        symbol_spacing: Whitespace joining symbol and number ("" or NBSP)
        grouping_sizes: (primary, secondary) group widths, e.g. (3, 2) for en_IN
        uses_grouping: False when the pattern has no grouping separator
    """

    symbol_position: SymbolPosition
    symbol_spacing: str
    grouping_sizes: tuple[int, int]
    uses_grouping: bool


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale view for currency formatting operations.

    Use LocaleContext.create() or LocaleContext.create_or_raise() to build
    instances; both normalize the locale code and share an LRU cache.

    Examples:
        >>> ctx = LocaleContext.create_or_raise('de-DE')
        >>> ctx.decimal_symbol, ctx.group_symbol
        (',', '.')
        >>> ctx.currency_layout().symbol_position
        <SymbolPosition.SUFFIX: 'suffix'>

    Thread Safety:
        Immutable and thread-safe. Cache operations are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics: size, max_size, and cached locales in LRU order."""
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def _cached(cls, cache_key: str) -> "LocaleContext | None":
        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]
        return None

    @classmethod
    def _store(cls, cache_key: str, ctx: "LocaleContext") -> "LocaleContext":
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        DEFAULT_LOCALE while preserving the original code for debugging.
        Use create_or_raise() where silent fallback is not acceptable, such as
        building CurrencyFormatSettings.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance (is_fallback=True if fallback was used)
        """
        cache_key = normalize_locale(locale_code)
        cached = cls._cached(cache_key)
        if cached is not None:
            return cached

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)
        return cls._store(cache_key, ctx)

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on unknown locales.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with a valid locale

        Raises:
            InvalidConfigurationError: If locale code is invalid or unknown
        """
        cache_key = normalize_locale(locale_code)
        cached = cls._cached(cache_key)
        if cached is not None and not cached.is_fallback:
            return cached

        try:
            babel_locale = get_babel_locale(cache_key)
        except (UnknownLocaleError, ValueError) as e:
            raise InvalidConfigurationError(
                ErrorTemplate.locale_unknown(locale_code, str(e))
            ) from None

        return cls._store(cache_key, cls(locale_code=locale_code, _babel_locale=babel_locale))

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def normalized_code(self) -> str:
        """POSIX identifier of the locale actually used for formatting."""
        return str(self._babel_locale)

    @property
    def decimal_symbol(self) -> str:
        """Locale decimal separator ("." for en_US, "," for de_DE)."""
        return babel_numbers.get_decimal_symbol(self._babel_locale)

    @property
    def group_symbol(self) -> str:
        """Locale grouping separator ("," for en_US, "." for de_DE)."""
        return babel_numbers.get_group_symbol(self._babel_locale)

    @property
    def minus_sign(self) -> str:
        """Locale minus sign (may include bidi marks, e.g. for Arabic)."""
        return babel_numbers.get_minus_sign_symbol(self._babel_locale)

    def currency_symbol(self, currency_code: str) -> str:
        """Locale symbol for a currency, or the code when CLDR has none."""
        return babel_numbers.get_currency_symbol(currency_code, locale=self._babel_locale)

    def currency_layout(self) -> CurrencyLayout:
        """Extract symbol placement and grouping from the standard currency pattern.

        Reads the positive prefix/suffix of the CLDR pattern: a currency
        sign in the prefix means PREFIX placement, and any whitespace next
        to it (typically U+00A0) becomes the symbol spacing.

        Examples:
            en_US "¤#,##0.00"   -> PREFIX, "",     (3, 3)
            de_DE "#,##0.00 ¤"  -> SUFFIX, NBSP,   (3, 3)
            en_IN "¤#,##,##0.00" -> PREFIX, "",    (3, 2)
        """
        pattern = self._babel_locale.currency_formats.get("standard")
        if pattern is None:
            logger.debug("Locale %s has no standard currency pattern", self.locale_code)
            return CurrencyLayout(SymbolPosition.PREFIX, "", (3, 3), uses_grouping=True)

        positive_prefix = pattern.prefix[0]
        positive_suffix = pattern.suffix[0]
        if CURRENCY_SIGN in positive_prefix:
            position = SymbolPosition.PREFIX
            joiner = positive_prefix.split(CURRENCY_SIGN, 1)[1]
        elif CURRENCY_SIGN in positive_suffix:
            position = SymbolPosition.SUFFIX
            joiner = positive_suffix.split(CURRENCY_SIGN, 1)[0]
        else:
            position = SymbolPosition.PREFIX
            joiner = ""

        primary, secondary = pattern.grouping
        uses_grouping = primary < _NO_GROUPING_SIZE
        return CurrencyLayout(
            symbol_position=position,
            symbol_spacing="".join(ch for ch in joiner if ch.isspace()),
            grouping_sizes=(primary, secondary) if uses_grouping else (3, 3),
            uses_grouping=uses_grouping,
        )
