"""
Mobile device emulation for WebDriver sessions.

``UserAgent`` validates a browser name, device identifier, and
orientation up front, then turns them into the capabilities that make
Chrome or Firefox masquerade as that device::

    ua = UserAgent(browser_name="chrome", agent="iphone6", orientation="landscape")
    caps = ua.caps()
    # caps["innerWindowSize"] -> [375, 667]
    # caps["desiredCapabilities"]["chromeOptions"]["mobileEmulation"] -> {...}

Screen sizes and user agents come from the bundled device dataset.
"""

from __future__ import annotations

from typing import Any, Literal

from selenium_useragent import encoders, validation
from selenium_useragent.data.loader import DeviceDataProvider
from selenium_useragent.errors import UserAgentError
from selenium_useragent.models.capabilities import Capabilities
from selenium_useragent.models.device import BrowserFamily, DeviceMetrics, Orientation
from selenium_useragent.utils import logger

log = logger.create_logger("UserAgent")


class UserAgent:
    """Resolves a device profile and encodes it as browser capabilities.

    All three inputs are validated on construction and again whenever
    they are reassigned, so an instance never holds an invalid value.
    """

    def __init__(
        self,
        browser_name: str,
        agent: str,
        orientation: str | None = None,
        provider: DeviceDataProvider | None = None,
    ) -> None:
        """Validate inputs eagerly.

        Args:
            browser_name: Anything containing ``chrome`` or ``firefox``
                (case-insensitive).
            agent: A device identifier such as ``iphone6`` or ``nexus9``.
                The deprecated names ``iphone``, ``ipad_seven``,
                ``android_phone``, and ``android_tablet`` are converted.
            orientation: ``portrait`` (default) or ``landscape``.
            provider: Device dataset to read from; defaults to the
                bundled one.

        Raises:
            InvalidBrowserFamily: Unsupported browser name.
            InvalidDeviceIdentifier: Unknown device identifier.
            InvalidOrientation: Unknown orientation.
        """
        try:
            self.browser_name = browser_name
            self.agent = agent
            self.orientation = orientation
        except UserAgentError as exc:
            log.error("Invalid emulation settings", {"error": str(exc)})
            raise
        self._provider = provider if provider is not None else DeviceDataProvider()

        log.debug(
            "Resolved device profile",
            {"browser": self._browser_name, "agent": self._agent, "orientation": self._orientation},
        )

    def __repr__(self) -> str:
        return (
            f"UserAgent(browser_name={self._browser_name!r}, agent={self._agent!r}, "
            f"orientation={self._orientation!r})"
        )

    # ==========================================================================
    # Validated attributes
    # ==========================================================================

    @property
    def browser_name(self) -> str:
        """Lowercased browser name as given."""
        return self._browser_name

    @browser_name.setter
    def browser_name(self, value: str) -> None:
        self._browser_name = validation.normalize_browser_name(value)

    @property
    def agent(self) -> str:
        """Canonical device identifier (deprecated aliases already converted)."""
        return self._agent

    @agent.setter
    def agent(self, value: str) -> None:
        self._agent = validation.resolve_agent(value)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @orientation.setter
    def orientation(self, value: str | None) -> None:
        self._orientation = validation.normalize_orientation(value)

    @property
    def browser_family(self) -> BrowserFamily:
        """``chrome`` or ``firefox``; decides which capability shape is built."""
        return validation.browser_family(self._browser_name)

    # ==========================================================================
    # Device lookups
    # ==========================================================================

    @property
    def metrics(self) -> DeviceMetrics:
        """Width, height, pixel ratio, and user agent for the current orientation."""
        return self._provider.get_metrics(self._agent, self._orientation)

    @property
    def user_agent(self) -> str:
        return self._provider.get_user_agent(self._agent)

    def window_size_for(self, fmt: Literal["caps", "chrome"]) -> list[int] | str:
        """Return the device's window size in the requested format.

        ``"caps"`` gives ``[height, width]`` for ``innerWindowSize``;
        ``"chrome"`` gives the ``"width,height"`` string that Chrome's
        ``--window-size`` switch takes.
        """
        metrics = self.metrics
        if fmt == "caps":
            return [metrics.height, metrics.width]
        if fmt == "chrome":
            return f"{metrics.width},{metrics.height}"
        raise ValueError(f"Unknown window size format: {fmt!r}")

    # ==========================================================================
    # Capabilities
    # ==========================================================================

    def build_capabilities(self, unencoded: bool = False) -> Capabilities:
        """Build the capabilities model for this device.

        Args:
            unencoded: Firefox only. Return the live ``FirefoxProfile``
                instead of its encoded form so it can be customised
                further before the session starts.

        Raises:
            UnsupportedBrowserFamily: The browser name maps to no encoder.
        """
        metrics = self.metrics
        desired = encoders.encode(self.browser_family, metrics, unencoded)
        return Capabilities(
            inner_window_size=[metrics.height, metrics.width],
            desired_capabilities=desired,
        )

    def caps(self, unencoded: bool = False) -> dict[str, Any]:
        """Return ``{"innerWindowSize": [...], "desiredCapabilities": {...}}``.

        Pass the result to a WebDriver client that accepts legacy desired
        capabilities, and resize the window to ``innerWindowSize``
        right after the session starts.
        """
        return self.build_capabilities(unencoded=unencoded).as_dict()

    def selenium_options(self) -> encoders.SeleniumOptions:
        """Return a Selenium 4 ``ChromeOptions`` or ``FirefoxOptions`` for this device."""
        return encoders.SELENIUM_OPTIONS[self.browser_family](self.metrics)
