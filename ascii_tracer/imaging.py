#!/usr/bin/env python3
"""
ASCII Tracer - Pillow Adapter
=============================
Decoding and resizing are left to Pillow; this module only hands the tracer a
flat RGBA buffer.
"""

import logging
from typing import Optional, Tuple

from PIL import Image

from ascii_tracer.config import TraceConfig
from ascii_tracer.tracer import TraceResult, Tracer

logger = logging.getLogger(__name__)


def target_size(image: Image.Image, width: Optional[int] = None,
                char_aspect_ratio: float = 0.5) -> Tuple[int, int]:
    """
    Calculate the output size in characters.

    Args:
        image: Source image
        width: Output width; keeps the source size if None
        char_aspect_ratio: Width/height of a monospace character cell

    Returns:
        (width, height), each at least 1
    """
    if width is None:
        return image.size
    aspect_ratio = image.height / image.width
    height = int(width * aspect_ratio * char_aspect_ratio)
    return max(1, width), max(1, height)


def image_to_buffer(image: Image.Image, width: Optional[int] = None,
                    char_aspect_ratio: float = 0.5) -> Tuple[bytes, int, int]:
    """Convert an image to (RGBA bytes, width, height), resizing if width is given."""
    size = target_size(image, width, char_aspect_ratio)
    img = image if image.mode == 'RGBA' else image.convert('RGBA')
    if size != img.size:
        img = img.resize(size, Image.Resampling.LANCZOS)
        logger.debug("Resized %dx%d image to %dx%d", image.width, image.height, *size)
    return img.tobytes(), img.width, img.height


def trace_image(image: Image.Image,
                config: Optional[TraceConfig] = None,
                width: Optional[int] = None,
                char_aspect_ratio: float = 0.5) -> TraceResult:
    """
    Convenience function to trace a PIL image.

    Args:
        image: PIL Image
        config: Trace options (defaults to TraceConfig())
        width: Output width in characters (source width if None)
        char_aspect_ratio: Character aspect ratio used when resizing

    Returns:
        TraceResult
    """
    data, w, h = image_to_buffer(image, width, char_aspect_ratio)
    return Tracer(config).trace(data, w, h)
