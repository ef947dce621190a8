"""Shared fixtures for the test suite."""

from __future__ import annotations

import base64
import io
import types
import zipfile
from collections.abc import Callable, Iterator, Mapping

import pytest

from selenium_useragent import config
from selenium_useragent.data.loader import DeviceDataProvider
from selenium_useragent.models.device import DeviceSpec, ViewportSize


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Each test starts without cached settings or dataset."""
    config.reset_settings()
    yield
    config.reset_settings()


# ── Device Data ─────────────────────────────────────────────────


@pytest.fixture()
def tiny_specs() -> Mapping[str, DeviceSpec]:
    """A two-device dataset with easily recognisable numbers."""
    return types.MappingProxyType(
        {
            "iphone4": DeviceSpec(
                user_agent="TestPhone/1.0",
                pixel_ratio=2,
                portrait=ViewportSize(width=100, height=200),
                landscape=ViewportSize(width=200, height=100),
            ),
            "nexus10": DeviceSpec(
                user_agent="TestTablet/1.0",
                pixel_ratio=1.5,
                portrait=ViewportSize(width=300, height=400),
                landscape=ViewportSize(width=400, height=300),
            ),
        }
    )


@pytest.fixture()
def tiny_provider(tiny_specs: Mapping[str, DeviceSpec]) -> DeviceDataProvider:
    return DeviceDataProvider(tiny_specs)


# ── Firefox Profiles ────────────────────────────────────────────


@pytest.fixture()
def read_user_prefs() -> Callable[[str], str]:
    """Return a helper that unpacks an encoded profile and reads its user.js."""

    def _read(encoded: str) -> str:
        with zipfile.ZipFile(io.BytesIO(base64.b64decode(encoded))) as zipped:
            return zipped.read("user.js").decode("utf-8")

    return _read
