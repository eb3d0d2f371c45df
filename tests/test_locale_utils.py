"""Tests for locale helpers (locale_utils.py)."""

import logging

import pytest
from babel.core import UnknownLocaleError

from icuformatter.locale_utils import (
    FALLBACK_LOCALE,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    resolve_babel_locale,
)


class TestNormalizeLocale:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("en", "en"),
            ("zh-Hant-TW", "zh_Hant_TW"),
            ("de_DE.UTF-8", "de_DE"),
            ("ca_ES@valencia", "ca_ES"),
            ("", ""),
        ],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestGetBabelLocale:
    def test_parses_bcp47(self) -> None:
        locale = get_babel_locale("en-US")

        assert locale.language == "en"
        assert locale.territory == "US"

    def test_cached(self) -> None:
        assert get_babel_locale("lv_LV") is get_babel_locale("lv_LV")

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz")


class TestResolveBabelLocale:
    def test_known_locale(self) -> None:
        assert resolve_babel_locale("lv-LV") is get_babel_locale("lv-LV")

    def test_unknown_locale_falls_back_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        resolve_babel_locale.cache_clear()

        with caplog.at_level(logging.WARNING, logger="icuformatter.locale_utils"):
            first = resolve_babel_locale("xx_UNKNOWN")
            second = resolve_babel_locale("xx_UNKNOWN")

        assert first is second is get_babel_locale(FALLBACK_LOCALE)
        assert caplog.text.count("Unknown locale 'xx_UNKNOWN'") == 1


class TestGetSystemLocale:
    def test_from_getlocale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("fr_FR", "UTF-8"))

        assert get_system_locale() == "fr_FR"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: ("C", None))
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "lv_LV.UTF-8")

        assert get_system_locale() == "lv_LV"

    def test_posix_pseudo_locale_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        monkeypatch.setenv("LC_ALL", "POSIX")
        monkeypatch.setenv("LC_MESSAGES", "C.UTF-8")
        monkeypatch.setenv("LANG", "et_EE.UTF-8")

        assert get_system_locale() == "et_EE"

    def test_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getlocale", lambda: (None, None))
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)

        assert get_system_locale() == FALLBACK_LOCALE
