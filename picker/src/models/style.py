"""Stroke style state for the picker handle."""
from dataclasses import dataclass

from constants import (
    DEFAULT_STROKE_COLOR, DEFAULT_OUTER_RING_COLOR, DEFAULT_LIVE_RECOLOR,
    DEFAULT_SHOW_OUTER_RING, STROKE_WIDTH_MIN, DEFAULT_OUTER_RING_WIDTH
)


@dataclass
class PickerStyle:
    """Runtime style in surface pixels.

    Colors are packed 0xAARRGGBB integers and are never validated;
    widths are clamped by the view setters before they land here.
    """
    stroke_color: int = DEFAULT_STROKE_COLOR
    stroke_width: float = STROKE_WIDTH_MIN
    outer_ring_color: int = DEFAULT_OUTER_RING_COLOR
    outer_ring_width: float = DEFAULT_OUTER_RING_WIDTH
    show_outer_ring: bool = DEFAULT_SHOW_OUTER_RING
    live_recolor: bool = DEFAULT_LIVE_RECOLOR
