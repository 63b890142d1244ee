#!/usr/bin/env python3
"""
ASCII Tracer - Edge Detection
=============================
This module contains the EdgeProcessor class for computing Sobel gradients
over a pixel map.
"""

import logging
import math
import time
from typing import Optional, Tuple

import numpy as np

from ascii_tracer.constants import SOBEL_HORIZONTAL, SOBEL_VERTICAL
from ascii_tracer.pixel_map import PixelMap

logger = logging.getLogger(__name__)


class EdgeProcessor:
    """Fill gradient magnitude and angle on the records of a pixel map."""

    KERNEL_SIZE = 3

    @staticmethod
    def _row_range(pixel_map: PixelMap, rows: Optional[Tuple[int, int]]) -> Tuple[int, int]:
        if rows is None:
            return 0, pixel_map.height
        start, stop = rows
        if start < 0 or stop > pixel_map.height or start > stop:
            raise IndexError(f"row range {rows} out of bounds for height {pixel_map.height}")
        return start, stop

    @classmethod
    def kernel_sums(cls, pixel_map: PixelMap,
                    rows: Optional[Tuple[int, int]] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Accumulate the two kernel sums that feed gx and gy.

        The window for pixel i covers i + width * y + x for y, x in 0..2, so it
        extends right and down from the pixel and runs on into the next row at
        the right edge. Indices past the end of the map contribute 0. Kernel
        weights are looked up at x * 3 + y, and h_sum takes the
        [-1, -2, -1] kernel while v_sum takes [-1, 0, 1].

        Args:
            pixel_map: Map with luminosity filled in
            rows: Optional (start, stop) row range; defaults to every row

        Returns:
            Tuple of (h_sum, v_sum) arrays for the pixels in range
        """
        start, stop = cls._row_range(pixel_map, rows)
        width = pixel_map.width
        luminosity = pixel_map.records['luminosity']
        size = cls.KERNEL_SIZE

        # Zero tail so every window offset stays in bounds
        padded = np.zeros(len(luminosity) + width * (size - 1) + size - 1)
        padded[:len(luminosity)] = luminosity

        lo, hi = start * width, stop * width
        h_sum = np.zeros(hi - lo)
        v_sum = np.zeros(hi - lo)
        for y in range(size):
            for x in range(size):
                offset = width * y + x
                neighbours = padded[lo + offset:hi + offset]
                kernel_index = x * size + y
                # h_sum pairs with the vertical kernel, v_sum with the horizontal one
                h_sum += neighbours * SOBEL_VERTICAL[kernel_index]
                v_sum += neighbours * SOBEL_HORIZONTAL[kernel_index]

        return h_sum, v_sum

    @classmethod
    def detect(cls, pixel_map: PixelMap, rows: Optional[Tuple[int, int]] = None) -> PixelMap:
        """
        Compute gradient magnitude and angle in place.

        Both sums are squared before combining, so the angle is always
        within 0-90 degrees.

        Args:
            pixel_map: Map produced by build_pixel_map
            rows: Optional (start, stop) row range. Disjoint ranges may be
                processed independently; each pixel writes only its own record.

        Returns:
            The same pixel map
        """
        t0 = time.perf_counter()
        start, stop = cls._row_range(pixel_map, rows)
        h_sum, v_sum = cls.kernel_sums(pixel_map, (start, stop))

        gx = h_sum * h_sum
        gy = v_sum * v_sum

        target = pixel_map.records[start * pixel_map.width:stop * pixel_map.width]
        target['gradient_magnitude'] = np.sqrt(gx + gy)
        target['gradient_angle'] = np.arctan2(gy, gx) * 180 / math.pi

        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("Edge pass over rows %d-%d completed in %.1fms", start, stop, elapsed)
        return pixel_map


def detect_edges(pixel_map: PixelMap, rows: Optional[Tuple[int, int]] = None) -> PixelMap:
    """Fill gradient fields of pixel_map in place. See EdgeProcessor.detect."""
    return EdgeProcessor.detect(pixel_map, rows)
