"""
Color Picker View - Construction-time configuration

PickerConfig carries the attributes a host sets when it creates the view.
Dimensions are device-independent; the view multiplies them by density.
Values are loaded from keyword arguments, a dict, or a JSON file.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict, fields
from typing import Optional

from constants import (
    DEFAULT_STROKE_WIDTH, DEFAULT_STROKE_COLOR, DEFAULT_CIRCLE_RADIUS,
    DEFAULT_LIVE_RECOLOR, DEFAULT_OUTER_RING_COLOR, DEFAULT_OUTER_RING_WIDTH,
    DEFAULT_SHOW_OUTER_RING, DEFAULT_SAMPLING_POLICY,
    SAMPLING_AT_POINTER, SAMPLING_AT_CENTER
)
from models.color import Color
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)

SAMPLING_POLICIES = (SAMPLING_AT_POINTER, SAMPLING_AT_CENTER)

_COLOR_FIELDS = ('stroke_color', 'outer_ring_color')


@dataclass
class PickerConfig:
    """Attributes applied once when a ColorPickerView is constructed."""
    stroke_width: float = DEFAULT_STROKE_WIDTH
    stroke_color: int = DEFAULT_STROKE_COLOR
    circle_radius: float = DEFAULT_CIRCLE_RADIUS
    live_recolor: bool = DEFAULT_LIVE_RECOLOR
    outer_ring_color: int = DEFAULT_OUTER_RING_COLOR
    outer_ring_width: float = DEFAULT_OUTER_RING_WIDTH
    show_outer_ring: bool = DEFAULT_SHOW_OUTER_RING
    sampling_policy: str = DEFAULT_SAMPLING_POLICY
    density: Optional[float] = None  # None -> view default

    def __post_init__(self):
        self.sampling_policy = str(self.sampling_policy).lower()
        if self.sampling_policy not in SAMPLING_POLICIES:
            raise ValueError(
                f"Unknown sampling policy '{self.sampling_policy}' "
                f"(expected one of {', '.join(SAMPLING_POLICIES)})"
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'PickerConfig':
        """Build a config from a plain dict (e.g. parsed JSON).

        Unknown keys are ignored with a warning. Colors may be integers or
        hex strings ('#RRGGBB' / '#AARRGGBB').
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (data or {}).items():
            if key not in known:
                logger.warning(f"Ignoring unknown picker config key '{key}'")
                continue
            if key in _COLOR_FIELDS:
                value = _parse_color(value)
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict (colors as #AARRGGBB)."""
        data = asdict(self)
        for key in _COLOR_FIELDS:
            data[key] = "#%08X" % (int(data[key]) & 0xFFFFFFFF)
        return data


def _parse_color(value) -> int:
    """Convert a config color value to a packed integer."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid color value: {value!r}")
    if isinstance(value, int):
        return value & 0xFFFFFFFF
    color = Color.from_hex(value) if isinstance(value, str) else None
    if color is None:
        raise ValueError(f"Invalid color value: {value!r}")
    return color.to_argb()


def load_picker_config(path) -> PickerConfig:
    """Load a PickerConfig from a JSON file.

    A missing file yields the defaults. Malformed files are reported
    through loggerRaise.
    """
    if not path or not os.path.exists(path):
        logger.debug(f"No picker config at {path}, using defaults")
        return PickerConfig()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("Picker config must be a JSON object")
        return PickerConfig.from_dict(data)
    except Exception as e:
        loggerRaise(e, f"Error loading picker config: {path}")


def save_picker_config(config: PickerConfig, path):
    """Write a PickerConfig as JSON, creating the directory if needed."""
    try:
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
    except Exception as e:
        loggerRaise(e, f"Error saving picker config: {path}")
