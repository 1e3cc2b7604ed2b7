"""
Color Picker View - Picker Widget Components

This package contains the pieces the ColorPickerView is assembled from:
- handles.py: ABC-based handle classes (CircleHandle, OuterRingHandle)
- modes.py: Sampling modes (at pointer / at handle center)
- drag_context.py: Gesture state and per-event drag deltas
"""

from .handles import Handle, CircleHandle, OuterRingHandle
from .modes import (
	SamplingPolicy, SamplingMode, PointerSamplingMode, CenterSamplingMode,
	create_sampling_mode
)
from .drag_context import GestureState, DragContext

__all__ = [
	'Handle', 'CircleHandle', 'OuterRingHandle',
	'SamplingPolicy', 'SamplingMode', 'PointerSamplingMode', 'CenterSamplingMode',
	'create_sampling_mode',
	'GestureState', 'DragContext',
]
