"""
Color Picker View - Color Domain Model

Canonical color representation for sampled and configured colors.
Qt and packed-integer forms are produced only at the boundaries.
"""

from typing import Optional
from constants import NAMED_COLORS, UNKNOWN_COLOR_NAME
from utils.color_utils import pack_argb, unpack_argb, to_hex_string, color_name


class Color:
    """Mutable color with uint8 ARGB storage and optional name tag.

    Internal storage: _r, _g, _b, _a (uint8 0-255), _name (string)

    Modifications go through the setter methods so the name tag stays
    consistent:
    - set_argb(), set_hex() - clear name to empty string
    - set_name() - tag with a named color
    """

    def __init__(self, r: int, g: int, b: int, a: int = 255, name: str = ""):
        """Direct construction from uint8 channel values (0-255).

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
            a: Alpha component (0-255), opaque by default
            name: Optional display name (for named colors)
        """
        # Clamp to valid uint8 range
        self._r = max(0, min(255, int(r)))
        self._g = max(0, min(255, int(g)))
        self._b = max(0, min(255, int(b)))
        self._a = max(0, min(255, int(a)))
        self._name = name

    @property
    def r(self) -> int:
        """Red component (0-255) - READ ONLY"""
        return self._r

    @property
    def g(self) -> int:
        """Green component (0-255) - READ ONLY"""
        return self._g

    @property
    def b(self) -> int:
        """Blue component (0-255) - READ ONLY"""
        return self._b

    @property
    def a(self) -> int:
        """Alpha component (0-255) - READ ONLY"""
        return self._a

    @property
    def name(self) -> str:
        """Name tag (empty string for custom colors) - READ ONLY"""
        return self._name

    # ========================================
    # Setter Methods
    # ========================================

    def set_argb(self, packed: int) -> None:
        """Set color from a packed 0xAARRGGBB integer. Clears name tag."""
        self._r, self._g, self._b, self._a = unpack_argb(packed)
        self._name = ""

    def set_hex(self, hex_string: str) -> bool:
        """Set color from hex string RRGGBB or #RRGGBB. Clears name tag.

        Alpha becomes opaque.

        Returns:
            True if parse succeeded, False otherwise
        """
        parsed = Color.from_hex(hex_string)
        if parsed is None:
            return False
        self._r, self._g, self._b, self._a = parsed.r, parsed.g, parsed.b, 255
        self._name = ""
        return True

    def set_name(self, display_name: str) -> bool:
        """Set color from a named color ('White', 'Steel Blue', ...).

        Returns:
            True if the name is known, False otherwise
        """
        for hex_code, name in NAMED_COLORS.items():
            if name.lower() == str(display_name).lower():
                self.set_hex(hex_code)
                self._name = name
                return True
        return False

    # ========================================
    # Output Methods
    # ========================================

    def to_argb(self) -> int:
        """Convert to packed unsigned 0xAARRGGBB integer."""
        return pack_argb(self._r, self._g, self._b, self._a)

    def to_hex(self) -> str:
        """Convert to hex color string: #RRGGBB (alpha discarded)."""
        return to_hex_string(self.to_argb())

    def to_qcolor(self):
        """Convert to PyQt5 QColor object (alpha preserved)."""
        from PyQt5.QtGui import QColor
        return QColor(self._r, self._g, self._b, self._a)

    def color_name(self) -> str:
        """Display name of this color's hex value, or the unknown sentinel."""
        return color_name(self.to_hex())

    def is_named(self) -> bool:
        """True when the hex value appears in the named color table."""
        return self.color_name() != UNKNOWN_COLOR_NAME

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def from_argb(packed: int) -> 'Color':
        """Create Color from a packed 0xAARRGGBB integer (signed values wrap)."""
        r, g, b, a = unpack_argb(packed)
        return Color(r, g, b, a)

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB, RRGGBB, #AARRGGBB or AARRGGBB.

        Returns:
            Color object if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.strip().lstrip('#')
        if len(hex_string) not in (6, 8):
            return None

        try:
            value = int(hex_string, 16)
        except ValueError:
            return None

        if len(hex_string) == 6:
            value |= 0xFF000000
        return Color.from_argb(value)

    @staticmethod
    def from_name(display_name: str) -> Optional['Color']:
        """Create Color from a named color, None if the name is unknown."""
        color = Color(0, 0, 0)
        if color.set_name(display_name):
            return color
        return None

    @staticmethod
    def from_qcolor(qcolor) -> 'Color':
        """Create Color from a PyQt5 QColor."""
        return Color(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())

    # ========================================
    # Equality and Hashing
    # ========================================

    def __eq__(self, other) -> bool:
        """Equality on ARGB values (name tag ignored)."""
        if not isinstance(other, Color):
            return False
        return self.to_argb() == other.to_argb()

    def __hash__(self) -> int:
        return hash(self.to_argb())

    def __repr__(self) -> str:
        return f"Color({self._r}, {self._g}, {self._b}, {self._a})"

    def __str__(self) -> str:
        """String representation - uses hex format."""
        return self.to_hex()
