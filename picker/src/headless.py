"""Headless color sampler CLI entry point.

Samples pixels from an image file without opening a window, using the same
snapshot/sampler/name lookup as the interactive picker.

Usage:
    python picker/src/headless.py <image_file> -p X,Y [-p X,Y ...] [-v]
    python picker/src/headless.py --name HEX

Examples:
    python picker/src/headless.py photo.png -p 10,20 -p 100,40
    python picker/src/headless.py --name "#ff6347"
"""

import sys
import os
import argparse
import logging

# Add picker/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from services.surface_snapshot import SurfaceSnapshot
from services.color_sampler import ColorSampler
from utils.color_utils import color_name
from utils.logger import configure_logging

logger = logging.getLogger(__name__)


def parse_point(text: str):
    """Parse 'X,Y' into a float pair.

    Raises:
        argparse.ArgumentTypeError: on malformed input
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected numeric X,Y but got '{text}'")


def sample_points(snapshot: SurfaceSnapshot, points) -> list:
    """Sample each point; out-of-bounds points pair with None.

    Returns:
        List of ((x, y), SampleResult or None)
    """
    sampler = ColorSampler(snapshot)
    return [((x, y), sampler.sample(x, y)) for x, y in points]


def format_sample(point, result) -> str:
    """One output line: 'X,Y  #RRGGBB  0xAARRGGBB  Name' or 'X,Y  out of bounds'."""
    x, y = point
    label = f"{x:g},{y:g}"
    if result is None:
        return f"{label}  out of bounds"
    return f"{label}  {result.hex_color}  0x{result.color:08X}  {result.name}"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Sample pixel colors from an image file (headless).',
    )
    parser.add_argument(
        'image_file',
        nargs='?',
        help='Image to sample (any format Pillow can read).',
    )
    parser.add_argument(
        '-p', '--point',
        action='append',
        type=parse_point,
        default=[],
        help='Point to sample as X,Y (repeatable).',
    )
    parser.add_argument(
        '-n', '--name',
        help='Print the color name for a hex code and exit.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.name:
        print(color_name(args.name))
        return 0

    if not args.image_file:
        parser.error('image_file is required unless --name is given')

    input_path = os.path.abspath(args.image_file)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}")
        return 1

    snapshot = SurfaceSnapshot.from_file(input_path)
    logger.debug(f"Loaded {snapshot!r} from {input_path}")

    points = args.point or [(snapshot.width / 2.0, snapshot.height / 2.0)]
    for point, result in sample_points(snapshot, points):
        print(format_sample(point, result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
