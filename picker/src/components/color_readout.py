"""
Color Readout - Displays the latest sampled color

Shows a swatch, the packed integer, the hex string and the color name.
Acts as the picker's listener in the demo window.
"""

import logging

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt

from constants import READOUT_SWATCH_SIZE
from components.color_picker_view import OnColorChangeListener
from utils.color_utils import color_name


class ColorReadout(QWidget, OnColorChangeListener):
	"""Swatch + labels updated from picker callbacks"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('ColorReadout')
		self.current_color = None
		self.current_hex = None
		self._setup_ui()

	def _setup_ui(self):
		layout = QHBoxLayout(self)
		layout.setContentsMargins(10, 10, 10, 10)
		layout.setSpacing(12)

		self.swatch = QLabel()
		self.swatch.setFixedSize(READOUT_SWATCH_SIZE, READOUT_SWATCH_SIZE)
		self._set_swatch("#000000")
		layout.addWidget(self.swatch)

		text_column = QVBoxLayout()
		text_column.setSpacing(2)
		self.int_label = QLabel("-")
		self.hex_label = QLabel("-")
		self.name_label = QLabel("-")
		self.hex_label.setStyleSheet("font-size: 14px; font-weight: bold;")
		for label in (self.hex_label, self.name_label, self.int_label):
			label.setTextInteractionFlags(Qt.TextSelectableByMouse)
			text_column.addWidget(label)
		layout.addLayout(text_column)
		layout.addStretch()

	def _set_swatch(self, hex_color):
		self.swatch.setStyleSheet(f"""
			QLabel {{
				background-color: {hex_color};
				border-radius: 4px;
				border: 1px solid rgba(255, 255, 255, 30);
			}}
		""")

	def on_color_changed(self, color):
		self._logger.info(f"onColorChanged: {color}")
		self.current_color = color
		self.int_label.setText(f"{color} (0x{color & 0xFFFFFFFF:08X})")

	def on_hex_color_changed(self, hex_color):
		self._logger.info(f"onHexColorChanged: {hex_color}")
		self.current_hex = hex_color
		self.hex_label.setText(hex_color)
		self.name_label.setText(color_name(hex_color))
		self._set_swatch(hex_color)
