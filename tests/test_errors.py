"""Tests for selenium_useragent.errors — error taxonomy."""

from __future__ import annotations

import pytest

from selenium_useragent.errors import (
    InvalidBrowserFamily,
    InvalidDeviceIdentifier,
    InvalidOrientation,
    UnsupportedBrowserFamily,
    UserAgentError,
)


@pytest.mark.parametrize(
    "error_cls",
    [InvalidBrowserFamily, InvalidDeviceIdentifier, InvalidOrientation, UnsupportedBrowserFamily],
)
class TestErrors:
    def test_is_value_error(self, error_cls: type[UserAgentError]) -> None:
        assert issubclass(error_cls, UserAgentError)
        assert issubclass(error_cls, ValueError)

    def test_keeps_value(self, error_cls: type[UserAgentError]) -> None:
        err = error_cls("bad-input")  # type: ignore[call-arg]
        assert err.value == "bad-input"
        assert "bad-input" in str(err)
