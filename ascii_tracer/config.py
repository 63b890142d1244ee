#!/usr/bin/env python3
"""
ASCII Tracer - Configuration
============================
Options recognised by the tracer, validated on construction.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Sequence, Union

from ascii_tracer.constants import DEFAULT_EDGE_CHARACTER, DEFAULT_SHADING_RAMP, ResponseField
from ascii_tracer.errors import TraceConfigError


def _coerce_fields(fields: Iterable[Union[str, ResponseField]]) -> FrozenSet[ResponseField]:
    if isinstance(fields, (str, ResponseField)):
        fields = [fields]
    coerced = set()
    for item in fields:
        if isinstance(item, ResponseField):
            coerced.add(item)
            continue
        try:
            coerced.add(ResponseField(item))
        except ValueError:
            valid = ', '.join(f.value for f in ResponseField)
            raise TraceConfigError(f"unknown response field {item!r} (expected one of: {valid})") from None
    return frozenset(coerced)


@dataclass
class TraceConfig:
    """Options for one trace."""

    edge_character: str = DEFAULT_EDGE_CHARACTER
    shading_ramp: Sequence[str] = DEFAULT_SHADING_RAMP      # Darkest glyph first
    should_trace_edges: bool = False
    edge_detection_threshold: Optional[float] = None         # Required when tracing edges
    response_fields: FrozenSet[ResponseField] = field(
        default_factory=lambda: frozenset({ResponseField.ASCII_STRING}))

    def __post_init__(self):
        if not isinstance(self.edge_character, str) or len(self.edge_character) != 1:
            raise TraceConfigError(
                f"edge_character must be a single character, got {self.edge_character!r}")
        if not self.edge_character.isprintable():
            raise TraceConfigError(
                f"edge_character must be printable, got {self.edge_character!r}")

        self.shading_ramp = tuple(self.shading_ramp)
        if not self.shading_ramp:
            raise TraceConfigError("shading_ramp must contain at least one glyph")
        if not all(isinstance(g, str) and len(g) == 1 for g in self.shading_ramp):
            raise TraceConfigError("shading_ramp entries must be single characters")
        if not all(g.isprintable() for g in self.shading_ramp):
            raise TraceConfigError("shading_ramp entries must be printable (no line breaks or control characters)")

        if self.should_trace_edges and self.edge_detection_threshold is None:
            raise TraceConfigError("edge_detection_threshold is required when should_trace_edges is set")

        self.response_fields = _coerce_fields(self.response_fields)

    def wants(self, response_field: ResponseField) -> bool:
        return response_field in self.response_fields
