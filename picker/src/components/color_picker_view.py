"""
Color Picker View - Draggable color-sampling handle

Provides a transparent overlay widget that covers its parent surface with:
- A circular handle that can be dragged by pointer/touch
- An optional outer ring around the handle
- Pixel sampling from a one-time snapshot of the parent
- Color reporting to a single listener (packed ARGB int and #RRGGBB)
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QEvent, QTimer, pyqtSignal
from PyQt5.QtGui import QPainter

from constants import (
	DEFAULT_DENSITY, INITIAL_HANDLE_BOX_SIZE,
	CIRCLE_RADIUS_MIN, CIRCLE_RADIUS_MAX,
	STROKE_WIDTH_MIN, STROKE_WIDTH_MAX
)
from models.color import Color
from models.transform import HandleTransform
from models.style import PickerStyle
from models.picker_config import PickerConfig
from services.color_sampler import ColorSampler
from services.surface_snapshot import SurfaceSnapshot
from utils.color_utils import color_name
from components.picker_widgets import (
	CircleHandle, OuterRingHandle, GestureState, DragContext, create_sampling_mode
)


class OnColorChangeListener:
	"""Receives sampled colors from a ColorPickerView.

	on_color_changed must be overridden; on_hex_color_changed is optional.
	"""

	def on_color_changed(self, color):
		"""Called with the packed 0xAARRGGBB color of each successful sample"""
		raise NotImplementedError

	def on_hex_color_changed(self, hex_color):
		"""Called with the '#RRGGBB' form of each successful sample"""
		pass


class ColorPickerView(QWidget):
	"""Overlay widget with a draggable color-sampling handle"""

	# Signals (emitted after the listener is notified)
	colorChanged = pyqtSignal(object)  # packed color, may exceed 32-bit signed range
	hexColorChanged = pyqtSignal(str)

	def __init__(self, parent=None, config=None, density=None, snapshot_source=None):
		"""
		Args:
			parent: Surface widget to overlay and sample from
			config: PickerConfig with construction-time attributes (defaults if None)
			density: Display-scale factor; overrides config.density
			snapshot_source: Optional callable returning a SurfaceSnapshot (or None);
				defaults to rendering the parent widget
		"""
		super().__init__(parent)
		self.setAttribute(Qt.WA_TranslucentBackground)
		self._logger = logging.getLogger('ColorPickerView')

		config = config or PickerConfig()
		if density is None:
			density = config.density if config.density is not None else DEFAULT_DENSITY
		self._density = float(density)

		# Clamp ranges in surface pixels
		self._min_radius = self.dp_to_px(CIRCLE_RADIUS_MIN)
		self._max_radius = self.dp_to_px(CIRCLE_RADIUS_MAX)
		self._min_stroke_width = self.dp_to_px(STROKE_WIDTH_MIN)
		self._max_stroke_width = self.dp_to_px(STROKE_WIDTH_MAX)

		# Geometry and style state
		self.transform = HandleTransform(radius=self.dp_to_px(INITIAL_HANDLE_BOX_SIZE) / 2.0)
		self.style = PickerStyle(
			stroke_width=self._min_stroke_width,
			outer_ring_width=self._min_stroke_width,
		)
		self._inner_handle = CircleHandle()
		self._outer_handle = OuterRingHandle()
		self._sampling_mode = create_sampling_mode(config.sampling_policy)

		# Snapshot state
		self.sampler = ColorSampler()
		self._snapshot_source = snapshot_source
		self._capture_attempted = False
		self._capturing = False

		# Interaction state
		self._listener = None
		self._gesture = GestureState.IDLE
		self._drag = None

		# Apply configuration attributes
		self.set_stroke_width(self.dp_to_px(config.stroke_width))
		self.set_stroke_color(config.stroke_color)
		self.set_circle_radius(self.dp_to_px(config.circle_radius))
		self.set_live_recolor(config.live_recolor)
		self.set_outer_stroke_color(config.outer_ring_color)
		self.set_outer_stroke_width(self.dp_to_px(config.outer_ring_width))
		self.set_outer_ring_visible(config.show_outer_ring)

		# Cover the parent and follow its size
		if parent:
			self.setGeometry(0, 0, parent.width(), parent.height())
			parent.installEventFilter(self)

		self.recenter()

	def eventFilter(self, obj, event):
		"""Handle parent resize to keep widget covering parent"""
		if event.type() == QEvent.Resize and obj == self.parent():
			self.setGeometry(0, 0, obj.width(), obj.height())
		return super().eventFilter(obj, event)

	def resizeEvent(self, event):
		super().resizeEvent(event)
		self.recenter()

	def dp_to_px(self, dp):
		"""Convert device-independent units to surface pixels"""
		return float(dp) * self._density

	def recenter(self):
		"""Move the handle to the center of the widget"""
		self.transform.recenter(self.width(), self.height())
		self.update()

	# ========================================
	# Read-only state
	# ========================================

	@property
	def density(self):
		return self._density

	@property
	def circle_radius(self):
		return self.transform.radius

	@property
	def stroke_width(self):
		return self.style.stroke_width

	@property
	def stroke_color(self):
		return self.style.stroke_color

	@property
	def outer_stroke_color(self):
		return self.style.outer_ring_color

	@property
	def outer_stroke_width(self):
		return self.style.outer_ring_width

	@property
	def outer_ring_visible(self):
		return self.style.show_outer_ring

	@property
	def live_recolor(self):
		return self.style.live_recolor

	@property
	def sampling_policy(self):
		return self._sampling_mode.policy

	@property
	def offset(self):
		return self.transform.offset

	@property
	def center(self):
		return self.transform.center()

	@property
	def snapshot(self):
		return self.sampler.snapshot

	@property
	def gesture_state(self):
		return self._gesture

	@property
	def dragging(self):
		return self._gesture == GestureState.DRAGGING

	# ========================================
	# Style setters
	# ========================================

	def set_stroke_width(self, stroke_width):
		"""Set the inner circle stroke width (pixels), clamped to the allowed range"""
		self.style.stroke_width = max(self._min_stroke_width, min(self._max_stroke_width, float(stroke_width)))
		self.update()

	def set_stroke_color(self, color):
		"""Set the inner circle stroke color (packed ARGB int or Color)"""
		self.style.stroke_color = _packed(color)
		self.update()

	def set_circle_radius(self, radius):
		"""Set the handle radius (pixels), clamped, and re-center the handle"""
		radius = max(self._min_radius, min(self._max_radius, float(radius)))
		self.transform.set_radius(radius)
		self.recenter()

	def set_outer_stroke_color(self, color):
		"""Set the outer ring color (packed ARGB int or Color)"""
		self.style.outer_ring_color = _packed(color)
		self.update()

	def set_outer_stroke_width(self, stroke_width):
		"""Set the outer ring width (pixels), clamped like the inner stroke"""
		self.style.outer_ring_width = max(self._min_stroke_width, min(self._max_stroke_width, float(stroke_width)))
		self.update()

	def set_outer_ring_visible(self, visible):
		self.style.show_outer_ring = bool(visible)
		self.update()

	def set_live_recolor(self, enabled):
		"""When enabled the inner stroke adopts every sampled color"""
		self.style.live_recolor = bool(enabled)
		self.update()

	def set_sampling_policy(self, policy):
		"""Switch between sampling at the pointer and at the handle center"""
		self._sampling_mode = create_sampling_mode(policy)
		self.update()

	def set_on_color_change_listener(self, listener):
		"""Register the listener (replaces any previous one; None clears it)"""
		self._listener = listener

	def get_color_name(self, hex_color):
		"""Display name for a hex color, or the unknown sentinel"""
		return color_name(hex_color)

	# ========================================
	# Snapshot
	# ========================================

	def capture_snapshot(self):
		"""Capture the parent surface into the sampler.

		Returns:
			SurfaceSnapshot, or None when there is nothing to capture
		"""
		self._capture_attempted = True
		self._capturing = True
		try:
			if self._snapshot_source is not None:
				snapshot = self._snapshot_source()
			else:
				snapshot = self._capture_parent()
		finally:
			self._capturing = False

		if snapshot is None:
			self._logger.debug("No parent surface to capture; sampling disabled")
			return None

		self.sampler.snapshot = snapshot
		self._logger.debug(f"Captured {snapshot!r}")
		return snapshot

	def _capture_parent(self):
		parent = self.parentWidget()
		if parent is None:
			return None
		return SurfaceSnapshot.from_widget(parent)

	def ensure_snapshot(self):
		"""Capture once; later calls return the existing (possibly stale) snapshot"""
		if not self._capture_attempted:
			self.capture_snapshot()
		return self.sampler.snapshot

	def invalidate_snapshot(self):
		"""Drop the snapshot so the next paint captures the parent again"""
		self.sampler.snapshot = None
		self._capture_attempted = False
		self.update()

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		"""Draw the outer ring (if enabled) and the draggable circle"""
		# Rendering the parent repaints this widget too; keep it out of the snapshot
		if self._capturing:
			return

		if not self._capture_attempted:
			self._capture_attempted = True
			QTimer.singleShot(0, self.capture_snapshot)

		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		if self.style.show_outer_ring:
			self._outer_handle.draw(painter, self.transform, self.style)
		self._inner_handle.draw(painter, self.transform, self.style)
		painter.end()

	# ========================================
	# Gesture state machine
	# ========================================

	def pointer_down(self, x, y):
		"""Start a drag if (x, y) hits the handle.

		Returns:
			True if the event was consumed
		"""
		if not self._inner_handle.hit_test(x, y, self.transform):
			self._gesture = GestureState.IDLE
			self._drag = None
			return False

		self._gesture = GestureState.DRAGGING
		self._drag = DragContext(x, y)
		self._sample(x, y)
		return True

	def pointer_move(self, x, y):
		"""Move the handle by the delta since the previous event and resample"""
		if self._gesture != GestureState.DRAGGING:
			return False

		dx, dy = self._drag.step(x, y)
		self.transform.translate(dx, dy)
		self._sample(x, y)
		self.update()
		return True

	def pointer_up(self, x, y):
		"""Finish the drag"""
		if self._gesture != GestureState.DRAGGING:
			return False

		self._logger.debug(f"Drag finished after {self._drag.move_count} moves at {self.center}")
		self._gesture = GestureState.IDLE
		self._drag = None
		return True

	def _sample(self, pointer_x, pointer_y):
		"""Sample according to the active mode and notify the listener"""
		x, y = self._sampling_mode.sample_point(pointer_x, pointer_y, self.transform)
		result = self.sampler.sample(x, y)
		if result is None:
			return None

		if self.style.live_recolor:
			self.style.stroke_color = result.color

		if self._listener is not None:
			self._listener.on_color_changed(result.color)
			self._listener.on_hex_color_changed(result.hex_color)

		self.colorChanged.emit(result.color)
		self.hexColorChanged.emit(result.hex_color)
		return result

	# ========================================
	# Qt events
	# ========================================

	def mousePressEvent(self, event):
		"""Handle mouse press (touch arrives as synthesized mouse events)"""
		if event.button() == Qt.LeftButton:
			pos = event.localPos()
			if self.pointer_down(pos.x(), pos.y()):
				event.accept()
				return
		# Not on the handle - let the parent have it
		event.ignore()

	def mouseMoveEvent(self, event):
		"""Handle mouse move"""
		pos = event.localPos()
		if self.pointer_move(pos.x(), pos.y()):
			event.accept()
			return
		event.ignore()

	def mouseReleaseEvent(self, event):
		"""Handle mouse release"""
		if event.button() == Qt.LeftButton:
			pos = event.localPos()
			if self.pointer_up(pos.x(), pos.y()):
				event.accept()
				return
		event.ignore()


def _packed(color):
	"""Packed int from an int or Color; ints pass through unvalidated"""
	if isinstance(color, Color):
		return color.to_argb()
	return int(color)
