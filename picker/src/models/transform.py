"""Transform data structures for the draggable handle."""
import math
from dataclasses import dataclass

from constants import INITIAL_HANDLE_BOX_SIZE


@dataclass
class Vec2:
    """2D vector for coordinate pairs (surface pixels)."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


class HandleTransform:
    """Translation state of the square box that bounds the circular handle.

    The box's top-left corner sits at `offset`; the circle is inscribed in it,
    so its center is offset + radius on both axes. Only drag deltas and
    recentering move the offset; nothing keeps the box inside the surface.
    """

    def __init__(self, radius: float = INITIAL_HANDLE_BOX_SIZE / 2.0):
        self.offset = Vec2(0.0, 0.0)
        self.set_radius(radius)

    def set_radius(self, radius: float):
        """Store the radius and resize the bounding box to fit it.

        Callers clamp the radius and recenter afterwards.
        """
        self.radius = float(radius)
        self.box_size = self.radius * 2.0

    def center(self) -> Vec2:
        """Handle center in surface coordinates."""
        return Vec2(self.offset.x + self.radius, self.offset.y + self.radius)

    def hit_test(self, px: float, py: float) -> bool:
        """True if (px, py) lies inside the circle, boundary included."""
        center = self.center()
        return math.hypot(px - center.x, py - center.y) <= self.radius

    def translate(self, dx: float, dy: float):
        """Accumulate a drag delta into the offset."""
        self.offset = Vec2(self.offset.x + dx, self.offset.y + dy)

    def recenter(self, width: float, height: float):
        """Place the handle in the geometric center of a width x height surface."""
        self.offset = Vec2(width / 2.0 - self.box_size / 2.0, height / 2.0 - self.box_size / 2.0)

    def __repr__(self):
        return f"HandleTransform(offset=({self.offset.x}, {self.offset.y}), radius={self.radius})"
