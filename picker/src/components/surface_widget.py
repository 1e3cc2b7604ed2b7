"""
Surface Widget - Image surface the picker samples from

Paints a QImage stretched over the whole widget. Images come from files or
from PIL images (e.g. the generated spectrum), converted at this boundary.
"""

import numpy as np
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtGui import QPainter, QImage, QColor
from PyQt5.QtCore import QSize

from constants import DEMO_SURFACE_MIN_HEIGHT


def pil_to_qimage(image):
	"""Convert a PIL image to a detached QImage (RGBA8888)"""
	rgba = np.ascontiguousarray(np.asarray(image.convert('RGBA')), dtype=np.uint8)
	height, width = rgba.shape[:2]
	data = rgba.tobytes()
	qimage = QImage(data, width, height, width * 4, QImage.Format_RGBA8888)
	# copy() detaches from the byte buffer
	return qimage.copy()


class SurfaceWidget(QWidget):
	"""Widget that paints a single image scaled to its size"""

	def __init__(self, parent=None, image=None):
		super().__init__(parent)
		self._image = QImage()
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumHeight(DEMO_SURFACE_MIN_HEIGHT)
		if image is not None:
			self.set_image(image)

	def set_image(self, image):
		"""Set the surface image from a QImage or a PIL image"""
		if not isinstance(image, QImage):
			image = pil_to_qimage(image)
		self._image = image
		self.update()

	def image(self):
		return self._image

	def sizeHint(self):
		if self._image.isNull():
			return super().sizeHint()
		return QSize(self._image.width(), self._image.height())

	def paintEvent(self, event):
		painter = QPainter(self)
		if self._image.isNull():
			painter.fillRect(self.rect(), QColor(0, 0, 0))
		else:
			painter.drawImage(self.rect(), self._image)
		painter.end()
