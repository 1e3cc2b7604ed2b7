"""
Color Picker View - Constants and Configuration

This module contains all constant values used throughout the application:
- Handle geometry defaults and clamp ranges (device-independent units)
- Stroke and outer ring style defaults
- Snapshot and sampling settings
- Named web colors used for hex -> name lookup

All dimensions are device-independent and get multiplied by the display
density before use.
"""

# ======================================================================
# DISPLAY DENSITY
# ======================================================================

# Qt widget coordinates are already device independent, so 1.0 is the
# natural density. Hosts may override it (e.g. to mimic a dp grid).
DEFAULT_DENSITY = 1.0

# ======================================================================
# HANDLE GEOMETRY
# ======================================================================

# Bounding box of the handle before any radius has been applied
INITIAL_HANDLE_BOX_SIZE = 100.0

# Circle radius limits
CIRCLE_RADIUS_MIN = 30.0
CIRCLE_RADIUS_MAX = 200.0
DEFAULT_CIRCLE_RADIUS = 50.0

# ======================================================================
# STROKE STYLE
# ======================================================================

# Stroke width limits (inner circle and outer ring share the same range)
STROKE_WIDTH_MIN = 10.0
STROKE_WIDTH_MAX = 50.0

# Requested default is below the minimum, so the effective default is the minimum
DEFAULT_STROKE_WIDTH = 5.0
DEFAULT_OUTER_RING_WIDTH = 10.0

# Packed 0xAARRGGBB colors
COLOR_BLACK = 0xFF000000
COLOR_WHITE = 0xFFFFFFFF
COLOR_RED = 0xFFFF0000

DEFAULT_STROKE_COLOR = COLOR_BLACK
DEFAULT_OUTER_RING_COLOR = COLOR_BLACK

# Inner stroke adopts the sampled color while dragging
DEFAULT_LIVE_RECOLOR = True

# Outer ring is only drawn when enabled
DEFAULT_SHOW_OUTER_RING = False

# ======================================================================
# SAMPLING
# ======================================================================

SAMPLING_AT_POINTER = 'at_pointer'
SAMPLING_AT_CENTER = 'at_center'
DEFAULT_SAMPLING_POLICY = SAMPLING_AT_POINTER

# Mask that drops the alpha channel for hex output
RGB_MASK = 0xFFFFFF

# ======================================================================
# DEMO WINDOW
# ======================================================================

DEMO_WINDOW_WIDTH = 480
DEMO_WINDOW_HEIGHT = 640
DEMO_SURFACE_MIN_HEIGHT = 400
READOUT_SWATCH_SIZE = 40

# Config file location for the demo (JSON)
CONFIG_DIR_NAME = '.colorpickerview'
CONFIG_FILE_NAME = 'picker.json'

# ======================================================================
# NAMED COLORS
# ======================================================================

UNKNOWN_COLOR_NAME = 'Unknown Color'

# Canonical hex -> display name pairs (uppercase keys, one entry per hex)
NAMED_COLORS = {
    '#FF0000': 'Red',
    '#00FF00': 'Green',
    '#0000FF': 'Blue',
    '#FFFF00': 'Yellow',
    '#FFA500': 'Orange',
    '#800080': 'Purple',
    '#FFFFFF': 'White',
    '#000000': 'Black',
    '#FFC0CB': 'Pink',
    '#808080': 'Gray',
    '#A52A2A': 'Brown',
    '#FFD700': 'Gold',
    '#C0C0C0': 'Silver',
    '#008080': 'Teal',
    '#000080': 'Navy',
    '#FF4500': 'Orange Red',
    '#DA70D6': 'Orchid',
    '#B22222': 'Firebrick',
    '#5F9EA0': 'Cadet Blue',
    '#D2691E': 'Chocolate',
    '#7FFF00': 'Chartreuse',
    '#DDA0DD': 'Plum',
    '#FF1493': 'Deep Pink',
    '#00CED1': 'Dark Turquoise',
    '#FF6347': 'Tomato',
    '#4682B4': 'Steel Blue',
    '#B8860B': 'Dark Golden Rod',
    '#F08080': 'Light Coral',
    '#FF69B4': 'Hot Pink',
    '#00BFFF': 'Deep Sky Blue',
    '#7CFC00': 'Lawn Green',
    '#ADFF2F': 'Green Yellow',
    '#C71585': 'Medium Violet Red',
    '#F0E68C': 'Khaki',
    '#FFB6C1': 'Light Pink',
    '#FFE4E1': 'Misty Rose',
    '#E6E6FA': 'Lavender',
    '#FFF0F5': 'Lavender Blush',
    '#F5F5DC': 'Beige',
    '#DCDCDC': 'Gainsboro',
    '#F5FFFA': 'Mint Cream',
    '#FFEFD5': 'Papaya Whip',
    '#FFF5EE': 'Seashell',
    '#FFDEAD': 'Navajo White',
    '#FF8C00': 'Dark Orange',
    '#FFDAB9': 'Peach Puff',
    '#FFE4B5': 'Moccasin',
    '#FFE4C4': 'Bisque',
    '#7B68EE': 'Medium Slate Blue',
    '#4169E1': 'Royal Blue',
    '#8A2BE2': 'Blue Violet',
    '#4B0082': 'Indigo',
    '#8B008B': 'Dark Magenta',
    '#9932CC': 'Dark Orchid',
    '#9400D3': 'Dark Violet',
    '#6A5ACD': 'Slate Blue',
    '#FF00FF': 'Magenta',
    '#FF7F50': 'Coral',
    '#CD5C5C': 'Indian Red',
    '#FFFFE0': 'Light Yellow',
    '#E0FFFF': 'Light Cyan',
    '#AFEEEE': 'Pale Turquoise',
    '#7FFFD4': 'Aquamarine',
    '#40E0D0': 'Turquoise',
    '#48D1CC': 'Medium Turquoise',
    '#20B2AA': 'Light Sea Green',
    '#3CB371': 'Medium Sea Green',
    '#2E8B57': 'Sea Green',
    '#228B22': 'Forest Green',
    '#008000': 'Green',
    '#006400': 'Dark Green',
    '#66CDAA': 'Medium Aquamarine',
    '#B0E0E6': 'Powder Blue',
    '#ADD8E6': 'Light Blue',
    '#B0C4DE': 'Light Steel Blue',
    '#6495ED': 'Cornflower Blue',
    '#1E90FF': 'Dodger Blue',
    '#87CEFA': 'Light Sky Blue',
    '#87CEEB': 'Sky Blue',
    '#00FFFF': 'Cyan',
    '#0000CD': 'Medium Blue',
    '#00008B': 'Dark Blue',
    '#8B4513': 'Saddle Brown',
    '#A0522D': 'Sienna',
    '#CD853F': 'Peru',
    '#BC8F8F': 'Rosy Brown',
    '#F4A460': 'Sandy Brown',
    '#FFFFF0': 'Ivory',
    '#F5DEB3': 'Wheat',
    '#F5F5F5': 'White Smoke',
    '#D3D3D3': 'Light Gray',
    '#A9A9A9': 'Dark Gray',
    '#696969': 'Dim Gray',
    '#778899': 'Light Slate Gray',
    '#708090': 'Slate Gray',
    '#2F4F4F': 'Dark Slate Gray',
    '#F0FFFF': 'Azure',
    '#FFEBCD': 'Blanched Almond',
    '#DC143C': 'Crimson',
    '#FFA07A': 'Light Salmon',
    '#EE82EE': 'Violet',
    '#F0F8FF': 'Alice Blue',
    '#F5F5FF': 'Ghost White',
}
