#!/usr/bin/env python3
"""
ASCII Tracer - Tracer
=====================
Drives the pipeline end to end:

    RGBA buffer -> pixel map -> Sobel gradients -> glyphs -> TraceResult
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ascii_tracer.config import TraceConfig
from ascii_tracer.constants import MATRIX_PLACEHOLDER, ResponseField
from ascii_tracer.edge_detection import detect_edges
from ascii_tracer.glyphs import glyph_for
from ascii_tracer.pixel_map import PixelMap, build_pixel_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorCell:
    """One cell of the colour pixel matrix."""
    character: str
    rgb: Tuple[int, int, int]


@dataclass(frozen=True)
class TraceCell:
    """A traced pixel as produced by Tracer.iter_cells."""
    row: int
    column: int
    character: str
    rgb: Tuple[int, int, int]


@dataclass
class TraceResult:
    """Result of tracing an image."""
    width: int                                                   # Source width in pixels
    height: int                                                  # Source height in pixels
    ascii_string: Optional[str] = None                           # Rows joined by '\n'
    color_pixel_matrix: Optional[List[List[ColorCell]]] = None   # height x width cells

    @property
    def lines(self) -> List[str]:
        if self.ascii_string is None or self.height == 0:
            return []
        return self.ascii_string.split('\n')


class Tracer:
    """Trace RGBA buffers into ASCII art."""

    def __init__(self, config: Optional[TraceConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or TraceConfig()

    def prepare(self, data, width: int, height: Optional[int] = None) -> PixelMap:
        """Build the pixel map and run the edge pass."""
        pixel_map = build_pixel_map(data, width, height)
        return detect_edges(pixel_map)

    def iter_cells(self, pixel_map: PixelMap) -> Iterator[TraceCell]:
        """Yield one TraceCell per pixel in row-major order."""
        width = pixel_map.width
        for index, sample in enumerate(pixel_map):
            row, column = divmod(index, width)
            yield TraceCell(row, column, glyph_for(sample, self.config), sample.rgb)

    def trace(self, data, width: int, height: Optional[int] = None) -> TraceResult:
        """
        Trace an RGBA buffer.

        Args:
            data: Interleaved RGBA bytes, row-major, top to bottom
            width: Image width in pixels
            height: Image height in pixels (derived from the buffer if None)

        Returns:
            TraceResult with the fields named in config.response_fields

        Raises:
            MalformedBufferError: If the buffer does not fit width x height
        """
        pixel_map = self.prepare(data, width, height)

        want_string = self.config.wants(ResponseField.ASCII_STRING)
        want_matrix = self.config.wants(ResponseField.COLOR_PIXEL_MATRIX)

        lines: List[str] = []
        matrix: List[List[ColorCell]] = []
        line: List[str] = []

        for cell in self.iter_cells(pixel_map):
            if cell.column == 0:
                if cell.row:
                    lines.append(''.join(line))
                    line = []
                if want_matrix:
                    matrix.append([])
            if want_string:
                line.append(cell.character)
            if want_matrix:
                matrix[-1].append(ColorCell(MATRIX_PLACEHOLDER, cell.rgb))

        if pixel_map.height:
            lines.append(''.join(line))

        result = TraceResult(width=pixel_map.width, height=pixel_map.height)
        if want_string:
            result.ascii_string = '\n'.join(lines)
        if want_matrix:
            result.color_pixel_matrix = matrix

        logger.debug("Traced %dx%d image (edges=%s)",
                     pixel_map.width, pixel_map.height, self.config.should_trace_edges)
        return result


def trace(data, width: int, height: Optional[int] = None,
          config: Optional[TraceConfig] = None) -> TraceResult:
    """Convenience function to trace a buffer with the given configuration."""
    return Tracer(config).trace(data, width, height)
