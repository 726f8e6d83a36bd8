"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase so that
"en-US", "en_US" and "en_us" share cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from currencytext.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

# Pseudo-locales reported by the C runtime that carry no CLDR data.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel expects.

    Hyphens become underscores and the territory subtag is uppercased.
    Encoding suffixes such as ".UTF-8" are dropped.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_br", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt_br")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    code = locale_code.split(".", 1)[0].strip().replace("-", "_")
    parts = code.split("_")
    if len(parts) >= 2 and len(parts[-1]) == 2:
        parts[-1] = parts[-1].upper()
    parts[0] = parts[0].lower()
    return "_".join(parts)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a cached Babel Locale object.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable
    4. LANG environment variable (default locale)

    The "C" and "POSIX" pseudo-locales are skipped.

    Returns:
        Detected locale code in POSIX format, or DEFAULT_LOCALE.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()  # doctest: +SKIP
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    if system_locale and system_locale not in _PSEUDO_LOCALES:
        return normalize_locale(system_locale)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "")
        if value.split(".", 1)[0] not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    return DEFAULT_LOCALE
