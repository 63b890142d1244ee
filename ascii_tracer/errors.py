"""Exceptions raised by the tracing pipeline."""


class TracerError(Exception):
    """Base class for all tracer errors."""


class InvalidRangeError(TracerError, ValueError):
    """A remap range was given with start >= stop."""


class MalformedBufferError(TracerError, ValueError):
    """A pixel buffer does not describe a whole width x height RGBA grid."""


class TraceConfigError(TracerError, ValueError):
    """A TraceConfig option is missing or invalid."""
