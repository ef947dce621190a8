"""
Error types raised while validating inputs and building capabilities.

Every error keeps the offending raw input on ``value`` and repeats it
in the message.
"""

from __future__ import annotations


class UserAgentError(ValueError):
    """Base class for all emulation errors."""

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


class InvalidBrowserFamily(UserAgentError):
    """Browser name does not name Chrome or Firefox."""

    def __init__(self, value: object) -> None:
        super().__init__(f'Only chrome and firefox are supported; got "{value}"', value)


class InvalidDeviceIdentifier(UserAgentError):
    """Device identifier is not in the canonical set, even after alias conversion."""

    def __init__(self, value: object) -> None:
        super().__init__(f'invalid agent: "{value}"', value)


class InvalidOrientation(UserAgentError):
    """Orientation names neither portrait nor landscape."""

    def __init__(self, value: object) -> None:
        super().__init__(f'Invalid orientation "{value}"; please choose "portrait" or "landscape"', value)


class UnsupportedBrowserFamily(UserAgentError):
    """No capability encoder exists for the browser."""

    def __init__(self, value: object) -> None:
        super().__init__(f'No capability encoder for browser "{value}"', value)
