"""
ASCII Tracer
============
Converts RGBA pixel buffers into ASCII art, shading by perceived lightness or
tracing Sobel edges.
"""

from ascii_tracer.config import TraceConfig
from ascii_tracer.constants import DEFAULT_SHADING_RAMP, ResponseField, ShadingRamp
from ascii_tracer.edge_detection import EdgeProcessor, detect_edges
from ascii_tracer.errors import InvalidRangeError, MalformedBufferError, TraceConfigError, TracerError
from ascii_tracer.glyphs import glyph_for, remap, shade
from ascii_tracer.imaging import image_to_buffer, trace_image
from ascii_tracer.pixel_map import PixelMap, PixelSample, build_pixel_map
from ascii_tracer.tracer import ColorCell, TraceCell, TraceResult, Tracer, trace

__version__ = "0.1.0"
