"""
Emulate mobile devices in Chrome and Firefox WebDriver sessions.

Builds capability objects that set the user agent, screen metrics, and
pixel ratio of a known mobile device so a desktop browser masquerades
as that device.
"""

from selenium_useragent.errors import (
    InvalidBrowserFamily as InvalidBrowserFamily,
    InvalidDeviceIdentifier as InvalidDeviceIdentifier,
    InvalidOrientation as InvalidOrientation,
    UnsupportedBrowserFamily as UnsupportedBrowserFamily,
    UserAgentError as UserAgentError,
)
from selenium_useragent.models.capabilities import Capabilities as Capabilities
from selenium_useragent.models.device import DeviceMetrics as DeviceMetrics
from selenium_useragent.user_agent import UserAgent as UserAgent
