#!/usr/bin/env python3
"""
ASCII Tracer - Command Line Interface
=====================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from PIL import Image

from ascii_tracer.config import TraceConfig
from ascii_tracer.constants import DEFAULT_EDGE_CHARACTER, ResponseField, ShadingRamp
from ascii_tracer.errors import TraceConfigError, TracerError
from ascii_tracer.formatting import AnsiColorFormatter
from ascii_tracer.imaging import trace_image

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 100.0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='ascii-tracer',
        description='Trace images into ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Shade by lightness at source size
  %(prog)s image.png -w 80                    # Resize to 80 characters wide
  %(prog)s image.png -w 80 -e -t 150          # Trace edges above gradient 150
  %(prog)s image.png -w 80 -c                 # 24-bit colour terminal output
  %(prog)s image.png --ramp blocks -o out.txt # Block ramp, saved to a file
        """
    )

    # Input/Output
    parser.add_argument('input', help='Input image file')
    parser.add_argument('-o', '--output', help='Output file')

    # Size options
    parser.add_argument('-w', '--width', type=int, help='Output width in characters')
    parser.add_argument('--char-ratio', type=float, default=0.5,
                        help='Character aspect ratio (width/height)')

    # Shading options
    parser.add_argument('--ramp', default='default', choices=sorted(ShadingRamp.presets()),
                        help='Shading ramp preset')
    parser.add_argument('--custom-ramp', help='Custom ramp string (dark to light)')

    # Edge options
    parser.add_argument('-e', '--edges', action='store_true', help='Trace edges')
    parser.add_argument('-t', '--threshold', type=float,
                        help=f'Edge gradient threshold (default {DEFAULT_THRESHOLD:g})')
    parser.add_argument('--edge-char', default=DEFAULT_EDGE_CHARACTER,
                        help='Character drawn on edges')

    # Color options
    parser.add_argument('-c', '--colorize', action='store_true', help='Enable color output')
    parser.add_argument('--color-mode', choices=['24bit', '256'], default='24bit',
                        help='Terminal color mode')

    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    return parser


def build_config(args: argparse.Namespace) -> TraceConfig:
    """Map parsed arguments onto a TraceConfig."""
    ramp = args.custom_ramp if args.custom_ramp else ShadingRamp.get_preset(args.ramp)

    fields = {ResponseField.ASCII_STRING}
    if args.colorize:
        fields.add(ResponseField.COLOR_PIXEL_MATRIX)

    threshold = args.threshold
    if args.edges and threshold is None:
        threshold = DEFAULT_THRESHOLD

    return TraceConfig(
        edge_character=args.edge_char,
        shading_ramp=ramp,
        should_trace_edges=args.edges,
        edge_detection_threshold=threshold,
        response_fields=frozenset(fields),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )

    if args.width is not None and args.width <= 0:
        parser.error('--width must be positive')

    try:
        config = build_config(args)
    except TraceConfigError as e:
        parser.error(str(e))

    # Load image
    try:
        image = Image.open(args.input)
        image.load()
    except OSError as e:
        logger.error("Error loading image %s: %s", args.input, e)
        return 1
    logger.debug("Loaded image %s: size=%s mode=%s", args.input, image.size, image.mode)

    try:
        result = trace_image(image, config, width=args.width, char_aspect_ratio=args.char_ratio)
    except TracerError as e:
        logger.error("Trace failed: %s", e)
        return 1
    logger.debug("Output size: %dx%d", result.width, result.height)

    if args.colorize:
        output = AnsiColorFormatter.format_result(result, color_mode=args.color_mode)
    else:
        output = result.ascii_string

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"Saved to {args.output}")
    else:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
