"""Color Sampler Service.

Reads pixel colors from a SurfaceSnapshot. Missing snapshots and points
outside the raster are not errors: they simply produce no sample.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from services.surface_snapshot import SurfaceSnapshot
from utils.color_utils import to_hex_string, color_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleResult:
    """One successful pixel read."""
    x: float
    y: float
    color: int  # packed 0xAARRGGBB

    @property
    def hex_color(self) -> str:
        """#RRGGBB form, alpha discarded."""
        return to_hex_string(self.color)

    @property
    def name(self) -> str:
        """Named color for the hex value (or the unknown sentinel)."""
        return color_name(self.hex_color)


class ColorSampler:
    """Bounds-checked sampling against an optional snapshot."""

    def __init__(self, snapshot: Optional[SurfaceSnapshot] = None):
        self.snapshot = snapshot

    @property
    def has_snapshot(self) -> bool:
        return self.snapshot is not None

    def sample(self, x: float, y: float) -> Optional[SampleResult]:
        """Read the pixel at (x, y).

        Returns:
            SampleResult, or None when there is no snapshot or the point
            is outside it
        """
        if self.snapshot is None:
            logger.debug(f"No snapshot, skipping sample at ({x}, {y})")
            return None

        if not self.snapshot.contains(x, y):
            logger.debug(f"Sample point ({x}, {y}) outside {self.snapshot!r}")
            return None

        return SampleResult(x, y, self.snapshot.pixel(x, y))
