"""
Pydantic models for the capability objects handed to a WebDriver client.

Field names are snake_case in Python and serialise to the camelCase keys
that the legacy JSON Wire desired-capabilities format expects.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

import pydantic
from selenium.webdriver.firefox.firefox_profile import FirefoxProfile


class ChromeDeviceMetrics(pydantic.BaseModel):
    """Screen metrics block of Chrome's ``mobileEmulation`` option."""

    model_config = pydantic.ConfigDict(frozen=True)

    width: int
    height: int
    pixel_ratio: float = pydantic.Field(serialization_alias="pixelRatio")


class MobileEmulation(pydantic.BaseModel):
    """Chrome ``mobileEmulation`` option."""

    model_config = pydantic.ConfigDict(frozen=True)

    device_metrics: ChromeDeviceMetrics = pydantic.Field(serialization_alias="deviceMetrics")
    user_agent: str = pydantic.Field(serialization_alias="userAgent")


class ChromeOptions(pydantic.BaseModel):
    """Contents of the ``chromeOptions`` capability."""

    model_config = pydantic.ConfigDict(frozen=True)

    args: list[str]
    mobile_emulation: MobileEmulation = pydantic.Field(serialization_alias="mobileEmulation")


class ChromeCapabilities(pydantic.BaseModel):
    """Desired capabilities for a Chrome session."""

    model_config = pydantic.ConfigDict(frozen=True)

    browser_name: Literal["chrome"] = pydantic.Field(default="chrome", serialization_alias="browserName")
    chrome_options: ChromeOptions = pydantic.Field(serialization_alias="chromeOptions")


class FirefoxCapabilities(pydantic.BaseModel):
    """Desired capabilities for a Firefox session.

    ``firefox_profile`` holds either the base64 zipped profile ready for
    the wire, or the live :class:`FirefoxProfile` when the caller asked
    for it unencoded.
    """

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)

    browser_name: Literal["firefox"] = pydantic.Field(default="firefox", serialization_alias="browserName")
    firefox_profile: str | FirefoxProfile

    @property
    def is_encoded(self) -> bool:
        """Whether the profile is already in its transport form."""
        return isinstance(self.firefox_profile, str)


DesiredCapabilities = Annotated[
    ChromeCapabilities | FirefoxCapabilities,
    pydantic.Field(discriminator="browser_name"),
]


class Capabilities(pydantic.BaseModel):
    """Everything needed to start an emulated session.

    ``inner_window_size`` is ordered ``[height, width]``.
    """

    inner_window_size: list[int] = pydantic.Field(
        min_length=2, max_length=2, serialization_alias="innerWindowSize"
    )
    desired_capabilities: DesiredCapabilities = pydantic.Field(serialization_alias="desiredCapabilities")

    @property
    def browser_name(self) -> str:
        """Browser family the capabilities target."""
        return self.desired_capabilities.browser_name

    def as_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping a WebDriver client consumes."""
        return self.model_dump(by_alias=True)
