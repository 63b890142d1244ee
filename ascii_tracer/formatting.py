#!/usr/bin/env python3
"""
ASCII Tracer - ANSI Output
==========================
Colours traced text with the rgb values carried in the colour pixel matrix.
"""

from typing import Literal, Tuple

from ascii_tracer.tracer import TraceResult


class AnsiColorFormatter:
    """Format traced ASCII art with ANSI color codes for terminal output."""

    RESET = "\033[0m"

    # Channel levels of the xterm 6x6x6 colour cube (indices 16-231)
    CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int) -> str:
        """Convert RGB to a 24-bit (true color) foreground code."""
        return f"\033[38;2;{r};{g};{b}m"

    @classmethod
    def nearest_xterm_index(cls, r: int, g: int, b: int) -> int:
        """
        Find the closest xterm-256 palette entry for an RGB triple.

        The nearest colour-cube entry and the nearest step of the 24-shade
        gray ramp (indices 232-255) are compared by squared RGB distance.
        """
        rgb = (r, g, b)
        levels = cls.CUBE_LEVELS
        axes = [min(range(6), key=lambda i: abs(c - levels[i])) for c in rgb]
        cube_rgb = [levels[i] for i in axes]
        cube_index = 16 + 36 * axes[0] + 6 * axes[1] + axes[2]

        gray_step = max(0, min(23, ((r + g + b) // 3 - 3) // 10))
        gray_value = 8 + 10 * gray_step

        cube_dist = sum((c - t) ** 2 for c, t in zip(rgb, cube_rgb))
        gray_dist = sum((c - gray_value) ** 2 for c in rgb)
        return 232 + gray_step if gray_dist < cube_dist else cube_index

    @classmethod
    def rgb_to_ansi_256(cls, r: int, g: int, b: int) -> str:
        """Convert RGB to a 256-color foreground code."""
        return f"\033[38;5;{cls.nearest_xterm_index(r, g, b)}m"

    @classmethod
    def color_code(cls, rgb: Tuple[int, int, int], color_mode: str) -> str:
        if color_mode == '256':
            return cls.rgb_to_ansi_256(*rgb)
        return cls.rgb_to_ansi_24bit(*rgb)

    @classmethod
    def format_result(cls, result: TraceResult,
                      color_mode: Literal['24bit', '256'] = '24bit') -> str:
        """
        Format a trace result with ANSI colors.

        Args:
            result: TraceResult with both ascii_string and color_pixel_matrix
            color_mode: '24bit' or '256'

        Returns:
            String with ANSI color codes, or the plain text when no colour
            matrix is available
        """
        if result.color_pixel_matrix is None:
            return result.ascii_string or ''

        output_lines = []
        for line, cells in zip(result.lines, result.color_pixel_matrix):
            output = ""
            prev_rgb = None
            for char, cell in zip(line, cells):
                # Only add a code when the colour changes
                if cell.rgb != prev_rgb:
                    output += cls.color_code(cell.rgb, color_mode)
                    prev_rgb = cell.rgb
                output += char
            output += cls.RESET
            output_lines.append(output)

        return '\n'.join(output_lines)
