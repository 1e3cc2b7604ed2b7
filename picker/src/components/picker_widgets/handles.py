"""Picker handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to draw itself
- How to test if a pointer position hits it
"""

from abc import ABC, abstractmethod
from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtGui import QPen, QColor


def _stroke_pen(color, width):
	"""Pen for a stroked, unfilled circle from a packed ARGB color."""
	pen = QPen(QColor.fromRgba(int(color) & 0xFFFFFFFF))
	pen.setWidthF(float(width))
	return pen


class Handle(ABC):
	"""Abstract base class for picker handles."""

	@abstractmethod
	def hit_test(self, mouse_x, mouse_y, transform) -> bool:
		"""Test if a pointer position hits this handle.

		Args:
			mouse_x, mouse_y: Pointer position in widget pixel coordinates
			transform: HandleTransform with the handle's current geometry

		Returns:
			bool: True if the pointer hits this handle
		"""
		pass

	@abstractmethod
	def draw(self, painter, transform, style):
		"""Draw this handle.

		Args:
			painter: QPainter instance
			transform: HandleTransform with the handle's current geometry
			style: PickerStyle with colors and widths
		"""
		pass


class CircleHandle(Handle):
	"""The draggable inner circle. Its interior is the only hit area."""

	def hit_test(self, mouse_x, mouse_y, transform):
		return transform.hit_test(mouse_x, mouse_y)

	def draw(self, painter, transform, style):
		center = transform.center()
		painter.setPen(_stroke_pen(style.stroke_color, style.stroke_width))
		painter.setBrush(Qt.NoBrush)
		painter.drawEllipse(QPointF(center.x, center.y), transform.radius, transform.radius)


class OuterRingHandle(Handle):
	"""Decorative ring hugging the outside of the inner circle."""

	def hit_test(self, mouse_x, mouse_y, transform):
		# Drawn only; dragging starts from the inner circle
		return False

	def ring_radius(self, transform, style):
		return transform.radius + style.outer_ring_width / 2.0

	def draw(self, painter, transform, style):
		center = transform.center()
		radius = self.ring_radius(transform, style)
		painter.setPen(_stroke_pen(style.outer_ring_color, style.outer_ring_width))
		painter.setBrush(Qt.NoBrush)
		painter.drawEllipse(QPointF(center.x, center.y), radius, radius)
