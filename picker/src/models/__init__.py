"""
Color Picker View - Data Models

Plain data and geometry classes with no widget dependencies
(Color only touches PyQt5 inside to_qcolor / from_qcolor).
"""

from .color import Color
from .transform import Vec2, HandleTransform
from .style import PickerStyle
from .picker_config import PickerConfig, load_picker_config, save_picker_config

__all__ = [
    'Color', 'Vec2', 'HandleTransform', 'PickerStyle',
    'PickerConfig', 'load_picker_config', 'save_picker_config',
]
