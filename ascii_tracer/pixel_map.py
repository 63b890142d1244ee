#!/usr/bin/env python3
"""
ASCII Tracer - Pixel Map
========================
Builds the per-pixel record set from a flat, interleaved RGBA byte buffer.

Records live in one contiguous numpy structured array, addressed by linear
pixel index in row-major order. The builder fills the colour metrics; the
edge detector later fills the gradient fields in place.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from ascii_tracer.colorimetry import perceived_lightness, rgb_average, weighted_luminosity
from ascii_tracer.errors import MalformedBufferError

logger = logging.getLogger(__name__)

CHANNELS = 4

PIXEL_DTYPE = np.dtype([
    ('rgb', np.uint8, (3,)),
    ('rgb_average', np.float64),
    ('luminosity', np.float64),
    ('perceived_lightness', np.float64),
    ('gradient_magnitude', np.float64),
    ('gradient_angle', np.float64),
])


@dataclass(frozen=True)
class PixelSample:
    """Snapshot of one pixel record."""
    rgb: Tuple[int, int, int]
    rgb_average: float
    luminosity: float
    perceived_lightness: float
    gradient_magnitude: float = 0.0
    gradient_angle: float = 0.0

    @classmethod
    def from_record(cls, record) -> 'PixelSample':
        r, g, b = (int(c) for c in record['rgb'])
        return cls(
            rgb=(r, g, b),
            rgb_average=float(record['rgb_average']),
            luminosity=float(record['luminosity']),
            perceived_lightness=float(record['perceived_lightness']),
            gradient_magnitude=float(record['gradient_magnitude']),
            gradient_angle=float(record['gradient_angle']),
        )


class PixelMap:
    """Row-major arena of pixel records for one image."""

    __slots__ = ['records', 'width', 'height']

    def __init__(self, records: np.ndarray, width: int, height: int):
        self.records = records
        self.width = width
        self.height = height

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> PixelSample:
        return PixelSample.from_record(self.records[index])

    def __iter__(self) -> Iterator[PixelSample]:
        for record in self.records:
            yield PixelSample.from_record(record)

    def row(self, y: int) -> np.ndarray:
        """Records of row y as a view into the arena."""
        if y < 0 or y >= self.height:
            raise IndexError(f"row {y} out of range for height {self.height}")
        start = y * self.width
        return self.records[start:start + self.width]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


def _as_byte_array(data) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    values = np.asarray(data)
    if values.dtype == np.uint8:
        return values.ravel()
    if values.size:
        if values.dtype.kind not in 'iu':
            raise MalformedBufferError(f"pixel values must be integers, got dtype {values.dtype}")
        if values.min() < 0 or values.max() > 255:
            raise MalformedBufferError("pixel values must lie in 0-255")
    return values.astype(np.uint8).ravel()


def build_pixel_map(data, width: int, height: Optional[int] = None) -> PixelMap:
    """
    Create the pixel record set for an RGBA buffer.

    Args:
        data: Interleaved RGBA bytes, row-major, top to bottom. Alpha is ignored.
        width: Image width in pixels
        height: Image height in pixels. Derived from the buffer length if None.

    Returns:
        PixelMap with rgb, rgb_average, luminosity and perceived_lightness set

    Raises:
        MalformedBufferError: If the buffer cannot be split into whole pixels
            and rows of the given width, or disagrees with the given height.
    """
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width <= 0:
        raise MalformedBufferError(f"width must be a positive integer, got {width!r}")

    buffer = _as_byte_array(data)
    length = len(buffer)

    if length % CHANNELS:
        raise MalformedBufferError(
            f"buffer length {length} is not a multiple of {CHANNELS} (RGBA)")

    pixel_count = length // CHANNELS
    if height is None:
        if pixel_count % width:
            raise MalformedBufferError(
                f"{pixel_count} pixels do not fill whole rows of width {width}")
        height = pixel_count // width
    elif pixel_count != width * height:
        raise MalformedBufferError(
            f"buffer length {length} does not match {width}x{height} RGBA "
            f"({CHANNELS * width * height} bytes expected)")

    pixels = buffer.reshape(pixel_count, CHANNELS)
    r = pixels[:, 0].astype(np.float64)
    g = pixels[:, 1].astype(np.float64)
    b = pixels[:, 2].astype(np.float64)

    records = np.zeros(pixel_count, dtype=PIXEL_DTYPE)
    records['rgb'] = pixels[:, :3]
    records['rgb_average'] = rgb_average(r, g, b)
    records['luminosity'] = weighted_luminosity(r, g, b)
    records['perceived_lightness'] = perceived_lightness(r, g, b)

    logger.debug("Built pixel map: %dx%d (%d pixels)", width, height, pixel_count)
    return PixelMap(records, int(width), int(height))
