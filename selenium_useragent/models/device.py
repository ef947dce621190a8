"""Pydantic models for device profiles and their resolved metrics."""

from __future__ import annotations

from typing import Literal

import pydantic

BrowserFamily = Literal["chrome", "firefox"]

Orientation = Literal["portrait", "landscape"]


class ViewportSize(pydantic.BaseModel):
    """Screen dimensions for one orientation of a device."""

    model_config = pydantic.ConfigDict(frozen=True)

    width: int = pydantic.Field(gt=0)
    height: int = pydantic.Field(gt=0)


class DeviceSpec(pydantic.BaseModel):
    """Device entry as stored in the dataset JSON."""

    model_config = pydantic.ConfigDict(frozen=True)

    user_agent: str
    pixel_ratio: float = pydantic.Field(gt=0)
    portrait: ViewportSize
    landscape: ViewportSize

    def viewport(self, orientation: Orientation) -> ViewportSize:
        """Return the viewport for *orientation*."""
        return self.portrait if orientation == "portrait" else self.landscape


class DeviceMetrics(pydantic.BaseModel):
    """Resolved metrics for a single (device, orientation) pair."""

    model_config = pydantic.ConfigDict(frozen=True)

    width: int
    height: int
    pixel_ratio: float
    user_agent: str
