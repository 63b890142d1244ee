#!/usr/bin/env python3
"""
ASCII Tracer - Glyph Mapping
============================
Turns a finished pixel record into one output character.
"""

import math
from typing import Sequence

from ascii_tracer.constants import LIGHTNESS_CUTOFF
from ascii_tracer.errors import InvalidRangeError


def remap(n: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """
    Remap a number from one range to another.

    Args:
        n: Number to remap
        start1: Lower bound of the original range
        stop1: Upper bound of the original range
        start2: Lower bound of the new range
        stop2: Upper bound of the new range

    Returns:
        The remapped number

    Raises:
        InvalidRangeError: If either start is not lower than its stop
    """
    if start1 >= stop1 or start2 >= stop2:
        raise InvalidRangeError(
            f"ranges must be increasing, got [{start1}, {stop1}] -> [{start2}, {stop2}]")
    return (n - start1) / (stop1 - start1) * (stop2 - start2) + start2


def shade(lightness: float, ramp: Sequence[str]) -> str:
    """Pick the ramp glyph for a perceived lightness value (0-100)."""
    if lightness > LIGHTNESS_CUTOFF:
        return ' '
    if len(ramp) == 1:
        return ramp[0]
    index = math.floor(remap(lightness, 0, 100, 0, len(ramp) - 1))
    return ramp[max(0, min(len(ramp) - 1, index))]


def glyph_for(sample, config) -> str:
    """
    Get the output character for one pixel.

    Args:
        sample: PixelSample with gradient fields filled in
        config: Active TraceConfig

    Returns:
        The edge character for pixels above the edge threshold when tracing
        edges, otherwise the shading glyph
    """
    if config.should_trace_edges and sample.gradient_magnitude > config.edge_detection_threshold:
        return config.edge_character
    return shade(sample.perceived_lightness, config.shading_ramp)
