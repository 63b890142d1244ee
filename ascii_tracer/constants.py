#!/usr/bin/env python3
"""
ASCII Tracer - Constants
========================
Kernels, shading ramps and response field names shared across the pipeline.
"""

from enum import Enum
from typing import Dict, Tuple

import numpy as np


# =============================================================================
# SOBEL KERNELS
# =============================================================================

# Flattened row-major, indexed by the edge detector as x * 3 + y
SOBEL_HORIZONTAL = np.array([
    -1.0, 0.0, 1.0,
    -2.0, 0.0, 2.0,
    -1.0, 0.0, 1.0,
])
SOBEL_VERTICAL = np.array([
    -1.0, -2.0, -1.0,
    0.0, 0.0, 0.0,
    1.0, 2.0, 1.0,
])


# =============================================================================
# SHADING RAMPS
# =============================================================================

DEFAULT_EDGE_CHARACTER = '#'
DEFAULT_SHADING_RAMP: Tuple[str, ...] = ('*', '+', ';', '.', '`', ',', ' ')

# Lightness above which a pixel is always rendered as a space
LIGHTNESS_CUTOFF = 80.0

# Glyph stored in every colour matrix cell
MATRIX_PLACEHOLDER = '*'


class ShadingRamp:
    """Predefined shading ramps, darkest glyph first."""

    DEFAULT: Tuple[str, ...] = DEFAULT_SHADING_RAMP
    STANDARD: Tuple[str, ...] = tuple("@%#*+=-:. ")
    BLOCKS: Tuple[str, ...] = tuple("█▓▒░ ")
    SIMPLE: Tuple[str, ...] = tuple("@Oo. ")
    BINARY: Tuple[str, ...] = tuple("█ ")

    @classmethod
    def presets(cls) -> Dict[str, Tuple[str, ...]]:
        return {
            'default': cls.DEFAULT,
            'standard': cls.STANDARD,
            'blocks': cls.BLOCKS,
            'simple': cls.SIMPLE,
            'binary': cls.BINARY,
        }

    @classmethod
    def get_preset(cls, name: str) -> Tuple[str, ...]:
        """Get a ramp by name, raising KeyError for unknown names."""
        return cls.presets()[name.lower()]


# =============================================================================
# RESPONSE FIELDS
# =============================================================================

class ResponseField(Enum):
    """Outputs a trace can populate."""
    ASCII_STRING = 'asciiString'
    COLOR_PIXEL_MATRIX = 'colorPixelMatrix'
