#!/usr/bin/env python3
"""
ASCII Tracer - Colorimetry
==========================
Brightness metrics derived from an RGB triple.

Every function works element-wise, so channels may be plain numbers or numpy
arrays of equal shape. Scalar input gives a scalar result.
"""

import numpy as np


def srgb_to_linear(c):
    """Linearize a normalized (0-1) sRGB channel value."""
    c = np.asarray(c, dtype=np.float64)
    return np.where(c <= 0.04045, c / 12.92, np.power((c + 0.055) / 1.055, 2.4))[()]


def y_to_lstar(y):
    """Convert CIE relative luminance Y (0-1) to perceived lightness L* (0-100)."""
    y = np.asarray(y, dtype=np.float64)
    return np.where(y <= 216 / 24389, y * (24389 / 27), np.power(y, 1 / 3) * 116 - 16)[()]


def weighted_luminosity(r, g, b):
    """Weighted luminosity on raw 0-255 channels. This feeds the edge detector."""
    return 0.3 * r + 0.59 * g + 0.11 * b


def rgb_average(r, g, b):
    return (r + b + g) / 3


def relative_luminance(r, g, b):
    """
    Relative luminance Y of an sRGB colour.

    Args:
        r, g, b: Channel values in 0-255

    Returns:
        Y in 0-1, using BT.709 weights on linearized channels
    """
    return (0.2126 * srgb_to_linear(r / 255)
            + 0.7152 * srgb_to_linear(g / 255)
            + 0.0722 * srgb_to_linear(b / 255))


def perceived_lightness(r, g, b):
    """CIE L* of an sRGB colour, roughly 0 (black) to 100 (white)."""
    return y_to_lstar(relative_luminance(r, g, b))
