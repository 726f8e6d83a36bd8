"""Tests for locale code normalization and system locale detection.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from currencytext.constants import DEFAULT_LOCALE
from currencytext.locale_utils import get_babel_locale, get_system_locale, normalize_locale


class TestNormalizeLocale:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("en_us", "en_US"),
            ("pt_br", "pt_BR"),
            ("EN", "en"),
            ("de_DE.UTF-8", "de_DE"),
            ("zh-Hant-TW", "zh_Hant_TW"),
            (" fr-ca ", "fr_CA"),
        ],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestGetBabelLocale:
    def test_accepts_bcp47(self) -> None:
        assert str(get_babel_locale("en-US")) == "en_US"

    def test_cached(self) -> None:
        assert get_babel_locale("de_DE") is get_babel_locale("de_DE")


class TestGetSystemLocale:
    """Detection order: locale.getlocale(), LC_ALL, LC_MESSAGES, LANG."""

    @pytest.fixture
    def no_env(self, monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        return monkeypatch

    def test_from_getlocale(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setattr("locale.getlocale", lambda: ("fr_FR", "UTF-8"))
        assert get_system_locale() == "fr_FR"

    def test_from_lang(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "de_DE"

    def test_lc_all_wins_over_lang(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("LC_ALL", "pt_BR.UTF-8")
        no_env.setenv("LANG", "de_DE.UTF-8")
        assert get_system_locale() == "pt_BR"

    def test_pseudo_locales_skipped(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setattr("locale.getlocale", lambda: ("C", None))
        no_env.setenv("LANG", "C.UTF-8")
        assert get_system_locale() == DEFAULT_LOCALE

    def test_default(self, no_env: pytest.MonkeyPatch) -> None:
        assert get_system_locale() == DEFAULT_LOCALE
