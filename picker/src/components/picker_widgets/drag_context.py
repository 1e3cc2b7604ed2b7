"""Gesture state for the picker handle."""

from dataclasses import dataclass
from enum import Enum


class GestureState(Enum):
	IDLE = 'idle'
	DRAGGING = 'dragging'


@dataclass
class DragContext:
	"""Active drag: last pointer position, so moves translate by per-event deltas."""
	last_x: float
	last_y: float
	move_count: int = 0

	def step(self, x, y):
		"""Record a new pointer position and return the delta since the last one."""
		dx = x - self.last_x
		dy = y - self.last_y
		self.last_x = x
		self.last_y = y
		self.move_count += 1
		return dx, dy
