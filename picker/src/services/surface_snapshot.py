"""Surface Snapshot Service.

Immutable raster copy of a parent surface, stored as a numpy array of
packed 0xAARRGGBB pixels (uint32, row-major, shape = (height, width)).

Snapshots come from Qt (QImage / QWidget.grab) for the live widget and from
Pillow images for headless sampling and tests.
"""

import logging
import numpy as np

logger = logging.getLogger(__name__)


class SurfaceSnapshot:
    """Read-only ARGB raster with bounds-checked pixel access."""

    def __init__(self, pixels):
        pixels = np.asarray(pixels, dtype=np.uint32)
        if pixels.ndim != 2:
            raise ValueError(f"Snapshot pixels must be 2-D, got shape {pixels.shape}")
        self._pixels = pixels.copy()
        self._pixels.setflags(write=False)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self):
        """Read-only view of the packed pixel array."""
        return self._pixels

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) falls inside [0, width) x [0, height)."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: float, y: float) -> int:
        """Packed color at (x, y), coordinates truncated toward zero.

        Raises:
            IndexError: if the point is outside the snapshot
        """
        if not self.contains(x, y):
            raise IndexError(f"Point ({x}, {y}) outside {self.width}x{self.height} snapshot")
        return int(self._pixels[int(y), int(x)])

    # ========================================
    # Factories
    # ========================================

    @classmethod
    def from_rgba_array(cls, rgba) -> 'SurfaceSnapshot':
        """Pack an (H, W, 4) uint8 RGBA array into a snapshot."""
        rgba = np.asarray(rgba, dtype=np.uint8)
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) RGBA array, got shape {rgba.shape}")
        channels = rgba.astype(np.uint32)
        packed = (
            (channels[..., 3] << 24)
            | (channels[..., 0] << 16)
            | (channels[..., 1] << 8)
            | channels[..., 2]
        )
        return cls(packed)

    @classmethod
    def from_pil(cls, image) -> 'SurfaceSnapshot':
        """Build a snapshot from a PIL image (any mode)."""
        return cls.from_rgba_array(np.asarray(image.convert('RGBA')))

    @classmethod
    def from_file(cls, path) -> 'SurfaceSnapshot':
        """Load an image file with Pillow and snapshot it."""
        from PIL import Image
        with Image.open(path) as image:
            return cls.from_pil(image)

    @classmethod
    def from_qimage(cls, image) -> 'SurfaceSnapshot':
        """Build a snapshot from a QImage.

        High-DPI images (devicePixelRatio > 1) are scaled down to logical
        size so snapshot coordinates match widget coordinates.
        """
        from PyQt5.QtCore import Qt
        from PyQt5.QtGui import QImage

        ratio = image.devicePixelRatio()
        if ratio and ratio != 1.0:
            logical_w = max(1, int(round(image.width() / ratio)))
            logical_h = max(1, int(round(image.height() / ratio)))
            image = image.scaled(logical_w, logical_h, Qt.IgnoreAspectRatio, Qt.FastTransformation)

        # Format_ARGB32 stores each pixel as a native-endian 0xAARRGGBB uint32
        image = image.convertToFormat(QImage.Format_ARGB32)
        width, height = image.width(), image.height()
        if width == 0 or height == 0:
            return cls(np.zeros((height, width), dtype=np.uint32))

        ptr = image.constBits()
        ptr.setsize(image.sizeInBytes())
        rows = np.frombuffer(ptr, dtype=np.uint32).reshape(height, image.bytesPerLine() // 4)
        return cls(rows[:, :width])

    @classmethod
    def from_widget(cls, widget) -> 'SurfaceSnapshot':
        """Render a widget (and its children) offscreen at its current size."""
        pixmap = widget.grab()
        logger.debug(f"Captured {pixmap.width()}x{pixmap.height()} snapshot of {type(widget).__name__}")
        return cls.from_qimage(pixmap.toImage())

    def __repr__(self):
        return f"SurfaceSnapshot({self.width}x{self.height})"
