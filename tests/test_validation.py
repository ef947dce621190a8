"""Tests for selenium_useragent.validation — input normalisation rules."""

from __future__ import annotations

import pytest

from selenium_useragent import validation
from selenium_useragent.errors import (
    InvalidBrowserFamily,
    InvalidDeviceIdentifier,
    InvalidOrientation,
    UnsupportedBrowserFamily,
)


class TestNormalizeBrowserName:
    @pytest.mark.parametrize("value", ["chrome", "firefox", "Chrome", "FIREFOX"])
    def test_accepts_and_lowercases(self, value: str) -> None:
        assert validation.normalize_browser_name(value) == value.lower()

    def test_substring_match_is_accepted(self) -> None:
        assert validation.normalize_browser_name("GoogleChrome-beta") == "googlechrome-beta"

    @pytest.mark.parametrize("value", ["safari", "", "chromium", "edge"])
    def test_rejects_other_browsers(self, value: str) -> None:
        with pytest.raises(InvalidBrowserFamily) as exc_info:
            validation.normalize_browser_name(value)
        assert exc_info.value.value == value

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidBrowserFamily):
            validation.normalize_browser_name(None)  # type: ignore[arg-type]


class TestBrowserFamily:
    def test_chrome(self) -> None:
        assert validation.browser_family("googlechrome") == "chrome"

    def test_firefox(self) -> None:
        assert validation.browser_family("firefox-esr") == "firefox"

    def test_chrome_checked_first(self) -> None:
        assert validation.browser_family("chrome-or-firefox") == "chrome"

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnsupportedBrowserFamily, match="opera"):
            validation.browser_family("opera")


class TestResolveAgent:
    @pytest.mark.parametrize("agent", sorted(validation.VALID_AGENTS))
    def test_canonical_agents_pass_through(self, agent: str) -> None:
        assert validation.resolve_agent(agent) == agent

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [
            ("iphone", "iphone4"),
            ("ipad_seven", "ipad"),
            ("android_phone", "nexus4"),
            ("android_tablet", "nexus10"),
        ],
    )
    def test_deprecated_aliases_are_converted(self, alias: str, expected: str) -> None:
        assert validation.resolve_agent(alias) == expected

    def test_alias_logs_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        validation.resolve_agent("iphone")
        assert "deprecated" in capsys.readouterr().err

    @pytest.mark.parametrize("agent", ["blackberry", "IPHONE4", "iphone7", "", " ipad"])
    def test_unknown_agent_raises(self, agent: str) -> None:
        with pytest.raises(InvalidDeviceIdentifier):
            validation.resolve_agent(agent)

    def test_error_reports_original_value(self) -> None:
        with pytest.raises(InvalidDeviceIdentifier, match='"palm_pre"') as exc_info:
            validation.resolve_agent("palm_pre")
        assert exc_info.value.value == "palm_pre"


class TestConvertDeprecatedAgent:
    def test_unknown_passes_through(self) -> None:
        assert validation.convert_deprecated_agent("whatever") == "whatever"

    def test_alias_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            validation.DEPRECATED_AGENTS["iphone"] = "iphone6"  # type: ignore[index]

    def test_aliases_target_valid_agents(self) -> None:
        assert set(validation.DEPRECATED_AGENTS.values()) <= validation.VALID_AGENTS


class TestNormalizeOrientation:
    def test_default_is_portrait(self) -> None:
        assert validation.normalize_orientation() == "portrait"
        assert validation.normalize_orientation(None) == "portrait"

    @pytest.mark.parametrize("value", ["portrait", "landscape"])
    def test_exact_values(self, value: str) -> None:
        assert validation.normalize_orientation(value) == value

    def test_substring_match_uses_token(self) -> None:
        assert validation.normalize_orientation("landscape-left") == "landscape"

    def test_leftmost_token_wins(self) -> None:
        assert validation.normalize_orientation("portrait/landscape") == "portrait"

    @pytest.mark.parametrize("value", ["sideways", "", "Portrait", "upside-down"])
    def test_invalid_raises(self, value: str) -> None:
        with pytest.raises(InvalidOrientation) as exc_info:
            validation.normalize_orientation(value)
        assert exc_info.value.value == value
