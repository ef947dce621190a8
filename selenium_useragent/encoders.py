"""
Capability encoders, one pure function per browser family.

Chrome and Firefox take device emulation settings in different,
incompatible shapes. Each encoder turns resolved device metrics into
its family's desired-capabilities model. Nothing is shared between the
two paths.
"""

from __future__ import annotations

import shutil
import types
from collections.abc import Callable, Mapping
from typing import Any

from selenium import webdriver
from selenium.webdriver.firefox.firefox_profile import FirefoxProfile

from selenium_useragent.errors import UnsupportedBrowserFamily
from selenium_useragent.models.capabilities import (
    ChromeCapabilities,
    ChromeDeviceMetrics,
    ChromeOptions,
    FirefoxCapabilities,
    MobileEmulation,
)
from selenium_useragent.models.device import BrowserFamily, DeviceMetrics

USER_AGENT_PREFERENCE = "general.useragent.override"


# ============================================================================
# Chrome
# ============================================================================


def encode_chrome(metrics: DeviceMetrics, unencoded: bool = False) -> ChromeCapabilities:
    """Build ``chromeOptions`` with a user-agent switch and mobile emulation.

    ``unencoded`` has no meaning for Chrome and is ignored.
    """
    return ChromeCapabilities(
        chrome_options=ChromeOptions(
            args=[f"user-agent={metrics.user_agent}"],
            mobile_emulation=MobileEmulation(
                device_metrics=ChromeDeviceMetrics(
                    width=int(metrics.width),
                    height=int(metrics.height),
                    pixel_ratio=metrics.pixel_ratio,
                ),
                user_agent=metrics.user_agent,
            ),
        )
    )


# ============================================================================
# Firefox
# ============================================================================


def build_firefox_profile(metrics: DeviceMetrics) -> FirefoxProfile:
    """Create a fresh Firefox profile that overrides the user agent.

    The profile lives in a new temporary directory (``profile.path``)
    that the caller is responsible for removing.
    """
    profile = FirefoxProfile()
    profile.set_preference(USER_AGENT_PREFERENCE, metrics.user_agent)
    return profile


def encode_firefox(metrics: DeviceMetrics, unencoded: bool = False) -> FirefoxCapabilities:
    """Build the ``firefox_profile`` capability.

    By default the profile is zipped and base64 encoded so it can go
    straight into a capabilities request, and its temporary directory
    is removed. With ``unencoded=True`` the live profile is returned for
    further customisation; the caller then owns it, encodes it, and
    removes ``profile.path`` when done.
    """
    profile = build_firefox_profile(metrics)
    if unencoded:
        return FirefoxCapabilities(firefox_profile=profile)
    try:
        encoded = profile.encoded
    finally:
        shutil.rmtree(profile.path, ignore_errors=True)
    return FirefoxCapabilities(firefox_profile=encoded)


Encoder = Callable[[DeviceMetrics, bool], ChromeCapabilities | FirefoxCapabilities]

ENCODERS: Mapping[str, Encoder] = types.MappingProxyType(
    {
        "chrome": encode_chrome,
        "firefox": encode_firefox,
    }
)


def encode(family: str, metrics: DeviceMetrics, unencoded: bool = False) -> ChromeCapabilities | FirefoxCapabilities:
    """Dispatch to the encoder for *family*."""
    encoder = ENCODERS.get(family)
    if encoder is None:
        raise UnsupportedBrowserFamily(family)
    return encoder(metrics, unencoded)


# ============================================================================
# Selenium 4 options
# ============================================================================


def chrome_selenium_options(metrics: DeviceMetrics) -> webdriver.ChromeOptions:
    """Return ``ChromeOptions`` carrying the same emulation as :func:`encode_chrome`."""
    caps = encode_chrome(metrics)
    options = webdriver.ChromeOptions()
    for arg in caps.chrome_options.args:
        options.add_argument(arg)
    mobile_emulation: dict[str, Any] = caps.chrome_options.mobile_emulation.model_dump(by_alias=True)
    options.add_experimental_option("mobileEmulation", mobile_emulation)
    return options


def firefox_selenium_options(metrics: DeviceMetrics) -> webdriver.FirefoxOptions:
    """Return ``FirefoxOptions`` with the user-agent override preference."""
    options = webdriver.FirefoxOptions()
    options.set_preference(USER_AGENT_PREFERENCE, metrics.user_agent)
    return options


SeleniumOptions = webdriver.ChromeOptions | webdriver.FirefoxOptions

SELENIUM_OPTIONS: Mapping[BrowserFamily, Callable[[DeviceMetrics], SeleniumOptions]] = types.MappingProxyType(
    {
        "chrome": chrome_selenium_options,
        "firefox": firefox_selenium_options,
    }
)
