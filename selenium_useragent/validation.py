"""
Input validation for browser name, device identifier, and orientation.

Browser name and orientation are matched by substring containment, not
equality: ``"googlechrome"`` is a valid browser name and
``"landscape-left"`` a valid orientation. Older callers rely on this.
"""

from __future__ import annotations

import re
import types
from typing import cast

from selenium_useragent.errors import (
    InvalidBrowserFamily,
    InvalidDeviceIdentifier,
    InvalidOrientation,
    UnsupportedBrowserFamily,
)
from selenium_useragent.models.device import BrowserFamily, Orientation
from selenium_useragent.utils import logger

log = logger.create_logger("Validation")

VALID_AGENTS: frozenset[str] = frozenset(
    {
        "iphone4",
        "iphone5",
        "iphone6",
        "iphone6plus",
        "ipad_mini",
        "ipad",
        "galaxy_s3",
        "galaxy_s4",
        "galaxy_s5",
        "galaxy_note3",
        "nexus4",
        "nexus9",
        "nexus10",
    }
)

# Device names accepted before the per-model identifiers existed.
DEPRECATED_AGENTS: types.MappingProxyType[str, str] = types.MappingProxyType(
    {
        "iphone": "iphone4",
        "ipad_seven": "ipad",
        "android_phone": "nexus4",
        "android_tablet": "nexus10",
    }
)

DEFAULT_ORIENTATION: Orientation = "portrait"

_BROWSER_PATTERN = re.compile(r"chrome|firefox")
_ORIENTATION_PATTERN = re.compile(r"portrait|landscape")


def normalize_browser_name(value: str) -> str:
    """Lowercase *value* and check that it names Chrome or Firefox."""
    if not isinstance(value, str):
        raise InvalidBrowserFamily(value)
    browser_name = value.lower()
    if not _BROWSER_PATTERN.search(browser_name):
        raise InvalidBrowserFamily(value)
    return browser_name


def browser_family(browser_name: str) -> BrowserFamily:
    """Map a stored browser name onto the family whose encoder applies.

    Chrome wins when a name mentions both.
    """
    if "chrome" in browser_name:
        return "chrome"
    if "firefox" in browser_name:
        return "firefox"
    raise UnsupportedBrowserFamily(browser_name)


def convert_deprecated_agent(agent: str) -> str:
    """Rewrite a deprecated device name to its current identifier."""
    return DEPRECATED_AGENTS.get(agent, agent)


def resolve_agent(value: str) -> str:
    """Return the canonical device identifier for *value*.

    Deprecated aliases are converted first. The error carries the value
    as the caller passed it, not the converted one.
    """
    if not isinstance(value, str):
        raise InvalidDeviceIdentifier(value)

    agent = convert_deprecated_agent(value)
    if agent not in VALID_AGENTS:
        raise InvalidDeviceIdentifier(value)

    if agent != value:
        log.warn(f'Device "{value}" is deprecated; use "{agent}" instead')
    return agent


def normalize_orientation(value: str | None = None) -> Orientation:
    """Return ``"portrait"`` or ``"landscape"`` for *value*.

    ``None`` means the default, portrait. Otherwise the leftmost
    orientation token found in *value* is used.
    """
    if value is None:
        return DEFAULT_ORIENTATION
    if not isinstance(value, str):
        raise InvalidOrientation(value)

    match = _ORIENTATION_PATTERN.search(value)
    if match is None:
        raise InvalidOrientation(value)
    return cast(Orientation, match.group(0))
