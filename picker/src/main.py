"""Color Picker View - demo application.

Shows an image (or a generated spectrum) with a draggable picker on top and
a readout of the sampled color.

Usage:
    python picker/src/main.py [--image PATH] [--config PATH]
                              [--policy {at_pointer,at_center}] [--outer-ring] [-v]
"""

import sys
import os
import argparse
import logging
from dataclasses import replace

# Add picker/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

from PyQt5.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout
from PIL import Image

from components.color_picker_view import ColorPickerView
from components.surface_widget import SurfaceWidget
from components.color_readout import ColorReadout
from models.picker_config import load_picker_config, SAMPLING_POLICIES
from utils.color_utils import build_spectrum_image
from utils.logger import configure_logging, set_main_window
from constants import (
    DEMO_WINDOW_WIDTH, DEMO_WINDOW_HEIGHT, DEMO_SURFACE_MIN_HEIGHT,
    CONFIG_DIR_NAME, CONFIG_FILE_NAME
)
from version import get_version

logger = logging.getLogger(__name__)


class ColorPickerWindow(QMainWindow):
    """Surface + picker overlay + readout"""

    def __init__(self, config=None, image=None):
        super().__init__()
        self.setWindowTitle(f"Color Picker {get_version()}")
        self.resize(DEMO_WINDOW_WIDTH, DEMO_WINDOW_HEIGHT)

        if image is None:
            image = build_spectrum_image(DEMO_WINDOW_WIDTH, DEMO_SURFACE_MIN_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.surface = SurfaceWidget(image=image)
        self.picker = ColorPickerView(self.surface, config=config)
        self.readout = ColorReadout()
        self.picker.set_on_color_change_listener(self.readout)

        layout.addWidget(self.surface, 1)
        layout.addWidget(self.readout)
        self.setCentralWidget(central)

        self.statusBar().showMessage("Drag the circle to sample colors")


def default_config_path():
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_image(path):
    """Read an image file fully into memory as RGBA and close the file"""
    with Image.open(path) as img:
        return img.convert('RGBA')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Drag a circle over an image and read the color under it.',
    )
    parser.add_argument(
        '-i', '--image',
        help='Image file to sample from (default: generated spectrum).',
    )
    parser.add_argument(
        '-c', '--config',
        default=default_config_path(),
        help='Picker config JSON file (default: ~/%s/%s).' % (CONFIG_DIR_NAME, CONFIG_FILE_NAME),
    )
    parser.add_argument(
        '-p', '--policy',
        choices=SAMPLING_POLICIES,
        help='Sample under the pointer or at the handle center.',
    )
    parser.add_argument(
        '--outer-ring',
        action='store_true',
        help='Draw the outer ring around the handle.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    # Options were parsed above; Qt only gets the program name
    app = QApplication([sys.argv[0]])

    config = load_picker_config(args.config)
    if args.policy:
        config = replace(config, sampling_policy=args.policy)
    if args.outer_ring:
        config = replace(config, show_outer_ring=True)

    image = None
    if args.image:
        if not os.path.isfile(args.image):
            print(f"Error: Image not found: {args.image}")
            return 1
        image = load_image(args.image)

    window = ColorPickerWindow(config=config, image=image)
    set_main_window(window)
    window.show()
    logger.debug(f"Picker config: {config}")
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
