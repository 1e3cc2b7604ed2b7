"""
Color Picker View - Color Utilities

This module provides color conversion helpers shared by the widget,
the demo window and the headless sampler:
- Packed 0xAARRGGBB integer <-> channel conversion
- Hex string output (alpha discarded)
- Hex -> display name lookup against the named color table
- Spectrum image generation for demo/test surfaces
"""

import numpy as np
from PIL import Image

from constants import NAMED_COLORS, UNKNOWN_COLOR_NAME, RGB_MASK

# Lookup keys without the leading '#'
_NAMES_BY_HEX = {hex_code.lstrip('#'): name for hex_code, name in NAMED_COLORS.items()}


def pack_argb(r, g, b, a=255):
    """Pack 0-255 channels into an unsigned 0xAARRGGBB integer"""
    return ((int(a) & 0xFF) << 24) | ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)


def unpack_argb(color):
    """Split a packed color into (r, g, b, a) channels

    Negative values (signed 32-bit colors) are accepted and wrapped.
    """
    color = int(color) & 0xFFFFFFFF
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, (color >> 24) & 0xFF


def to_hex_string(color):
    """Format a packed color as #RRGGBB (uppercase, alpha discarded)"""
    return "#%06X" % (RGB_MASK & int(color))


def color_name(hex_color):
    """Look up the display name of a hex color.

    The input is uppercased and any '#' is stripped, so '#ffffff',
    'FFFFFF' and '#FFFFFF' all resolve to 'White'.

    Args:
        hex_color: Hex color string (with or without '#')

    Returns:
        Color name, or UNKNOWN_COLOR_NAME when the hex is not in the table
    """
    normalized = str(hex_color).upper().replace('#', '')
    return _NAMES_BY_HEX.get(normalized, UNKNOWN_COLOR_NAME)


def build_spectrum_image(width, height):
    """Build an RGB spectrum: hue runs left to right, brightness top to bottom.

    Args:
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        PIL.Image in RGB mode
    """
    width = max(1, int(width))
    height = max(1, int(height))

    hue = np.linspace(0.0, 1.0, width, endpoint=False)[np.newaxis, :].repeat(height, axis=0)
    value = np.linspace(1.0, 0.2, height)[:, np.newaxis].repeat(width, axis=1)

    # HSV -> RGB at full saturation
    h6 = hue * 6.0
    sector = np.floor(h6).astype(np.int32) % 6
    f = h6 - np.floor(h6)
    p = np.zeros_like(value)
    q = value * (1.0 - f)
    t = value * f

    r = np.choose(sector, [value, q, p, p, t, value])
    g = np.choose(sector, [t, value, value, q, p, p])
    b = np.choose(sector, [p, p, t, value, value, q])

    rgb = np.stack([r, g, b], axis=-1)
    pixels = np.clip(np.round(rgb * 255.0), 0, 255).astype(np.uint8)
    return Image.fromarray(pixels, 'RGB')
