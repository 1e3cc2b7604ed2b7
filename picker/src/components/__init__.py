"""UI components for the Color Picker View

This package contains the widgets:
- color_picker_view: the draggable sampling overlay and its listener interface
- picker_widgets: handles, sampling modes and drag state used by the overlay
- surface_widget: image surface for the demo
- color_readout: swatch/labels panel that listens to the picker
"""

from .color_picker_view import ColorPickerView, OnColorChangeListener
from .surface_widget import SurfaceWidget, pil_to_qimage
from .color_readout import ColorReadout

__all__ = [
    'ColorPickerView',
    'OnColorChangeListener',
    'SurfaceWidget',
    'pil_to_qimage',
    'ColorReadout',
]
