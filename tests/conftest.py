"""
Shared fixtures for Color Picker View tests.

Provides surfaces, snapshots, a recording listener and picker widgets.
"""
import sys
import os
import pytest

# Ensure picker/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'picker', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


SURFACE_SIZE = 400

RED = 0xFFFF0000
BLUE = 0xFF0000FF


class RecordingListener:
    """Listener that remembers every callback in order"""

    def __init__(self):
        self.colors = []
        self.hex_colors = []

    def on_color_changed(self, color):
        self.colors.append(color)

    def on_hex_color_changed(self, hex_color):
        self.hex_colors.append(hex_color)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def solid_snapshot():
    """400x400 opaque red snapshot"""
    from PIL import Image
    from services.surface_snapshot import SurfaceSnapshot
    return SurfaceSnapshot.from_pil(Image.new('RGBA', (SURFACE_SIZE, SURFACE_SIZE), (255, 0, 0, 255)))


@pytest.fixture
def split_snapshot():
    """400x400 snapshot: left half red, right half blue"""
    from PIL import Image, ImageDraw
    from services.surface_snapshot import SurfaceSnapshot
    image = Image.new('RGBA', (SURFACE_SIZE, SURFACE_SIZE), (255, 0, 0, 255))
    ImageDraw.Draw(image).rectangle([SURFACE_SIZE // 2, 0, SURFACE_SIZE, SURFACE_SIZE], fill=(0, 0, 255, 255))
    return SurfaceSnapshot.from_pil(image)


@pytest.fixture
def surface(qtbot):
    """Plain 400x400 parent widget"""
    from PyQt5.QtWidgets import QWidget
    widget = QWidget()
    widget.resize(SURFACE_SIZE, SURFACE_SIZE)
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def make_picker(surface):
    """Factory for a picker over the 400x400 surface at density 1.0"""
    from components.color_picker_view import ColorPickerView

    def _make(snapshot=None, config=None, density=1.0):
        source = (lambda: snapshot) if snapshot is not None else None
        return ColorPickerView(surface, config=config, density=density, snapshot_source=source)

    return _make


@pytest.fixture
def picker(make_picker, solid_snapshot):
    """Default picker with the red snapshot already captured"""
    view = make_picker(snapshot=solid_snapshot)
    view.ensure_snapshot()
    return view
