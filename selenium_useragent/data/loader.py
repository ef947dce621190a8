"""
Device dataset loader.

Reads the device table (user agent, pixel ratio, and portrait/landscape
viewport per device) from JSON once, freezes it, and serves metric
lookups from the frozen copy. The bundled ``devices.json`` lives next to
this module; ``SELENIUM_UA_DEVICES_FILE`` points at a replacement.
"""

from __future__ import annotations

import json
import pathlib
import types
from collections.abc import Iterator, Mapping
from typing import Any

from selenium_useragent import config
from selenium_useragent.models.device import DeviceMetrics, DeviceSpec, Orientation
from selenium_useragent.utils import logger

log = logger.create_logger("Devices")

# Resolve path to the data directory (same directory as this module)
_DATA_DIR = pathlib.Path(__file__).resolve().parent

DEFAULT_DEVICES_FILE = _DATA_DIR / "devices.json"

# ============================================================================
# JSON File Loading
# ============================================================================


def _load_json(path: pathlib.Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"Device data file not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {path.name}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


def load_device_specs(path: str | pathlib.Path | None = None) -> Mapping[str, DeviceSpec]:
    """Parse a device dataset into a read-only mapping of frozen specs.

    Raises:
        pydantic.ValidationError: If an entry is missing a field or has
            a non-positive dimension.
    """
    full_path = pathlib.Path(path) if path is not None else DEFAULT_DEVICES_FILE
    raw: dict[str, dict[str, Any]] = _load_json(full_path)
    specs = {key: DeviceSpec.model_validate(entry) for key, entry in raw.items()}
    log.info("Loaded device dataset", {"file": full_path.name, "devices": len(specs)})
    return types.MappingProxyType(specs)


# ============================================================================
# Cached Dataset
# ============================================================================

_device_specs: Mapping[str, DeviceSpec] | None = None


def get_device_specs() -> Mapping[str, DeviceSpec]:
    """Get the device dataset (lazy loaded and cached)."""
    global _device_specs
    if _device_specs is None:
        _device_specs = load_device_specs(config.get_settings().devices_file)
    return _device_specs


def clear_cache() -> None:
    """Forget the cached dataset."""
    global _device_specs
    _device_specs = None


# ============================================================================
# Provider
# ============================================================================


class DeviceDataProvider:
    """Read-only view over a device dataset.

    The mapping is taken once at construction and never written to, so
    a single provider can be shared between resolvers and threads.
    """

    def __init__(self, specs: Mapping[str, DeviceSpec] | None = None) -> None:
        self._specs = specs if specs is not None else get_device_specs()

    def agents(self) -> Iterator[str]:
        """Iterate over the device identifiers present in the dataset."""
        return iter(self._specs)

    def get_spec(self, agent: str) -> DeviceSpec:
        """Return the raw dataset entry for *agent*."""
        return self._specs[agent]

    def get_user_agent(self, agent: str) -> str:
        """Return the user-agent string shared by both orientations of *agent*."""
        return self._specs[agent].user_agent

    def get_metrics(self, agent: str, orientation: Orientation) -> DeviceMetrics:
        """Resolve width, height, pixel ratio, and user agent for one orientation."""
        spec = self._specs[agent]
        viewport = spec.viewport(orientation)
        return DeviceMetrics(
            width=viewport.width,
            height=viewport.height,
            pixel_ratio=spec.pixel_ratio,
            user_agent=spec.user_agent,
        )
