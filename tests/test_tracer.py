"""End-to-end tests for the tracer."""

import pytest

from ascii_tracer import (
    ColorCell,
    MalformedBufferError,
    ResponseField,
    ShadingRamp,
    TraceConfig,
    TraceConfigError,
    Tracer,
    trace,
)


def test_mid_gray_pixel_shades_by_lightness(make_solid):
    # L* of (128, 128, 128) is about 53.6, bucket 3 of the default ramp
    result = trace(make_solid(1, 1, (128, 128, 128)), 1)
    assert result.ascii_string == '.'
    assert (result.width, result.height) == (1, 1)


def test_black_and_white_pixels(make_solid):
    assert trace(make_solid(1, 1, (0, 0, 0)), 1).ascii_string == '*'
    assert trace(make_solid(1, 1, (255, 255, 255)), 1).ascii_string == ' '


def test_rows_joined_with_newlines(make_solid):
    result = trace(make_solid(3, 2, (0, 0, 0)), 3)
    assert result.ascii_string == '***\n***'
    assert result.lines == ['***', '***']


def test_explicit_height(make_solid):
    result = trace(make_solid(2, 3, (0, 0, 0)), 2, 3)
    assert result.lines == ['**', '**', '**']


def test_zero_threshold_marks_every_gradient(make_random):
    config = TraceConfig(should_trace_edges=True, edge_detection_threshold=0)
    tracer = Tracer(config)
    data = make_random(6, 4, seed=11)

    result = tracer.trace(data, 6)
    pixel_map = tracer.prepare(data, 6)
    glyphs = result.ascii_string.replace('\n', '')

    assert len(glyphs) == 24
    for sample, glyph in zip(pixel_map, glyphs):
        if sample.gradient_magnitude > 0:
            assert glyph == '#'
        else:
            assert glyph != '#'


def test_edges_on_boundary(split_buffer):
    config = TraceConfig(edge_character='|', should_trace_edges=True, edge_detection_threshold=0)
    lines = trace(split_buffer, 6, config=config).lines
    assert lines[0][0] == '*'
    assert lines[0][1] == '|'


def test_custom_ramp(make_solid):
    config = TraceConfig(shading_ramp='AB')
    assert trace(make_solid(1, 1, (0, 0, 0)), 1, config=config).ascii_string == 'A'


def test_color_pixel_matrix():
    data = bytes([255, 0, 0, 255, 0, 255, 0, 255,
                  0, 0, 255, 255, 9, 9, 9, 255])
    config = TraceConfig(response_fields={ResponseField.COLOR_PIXEL_MATRIX})
    result = trace(data, 2, config=config)

    assert result.ascii_string is None
    assert result.color_pixel_matrix == [
        [ColorCell('*', (255, 0, 0)), ColorCell('*', (0, 255, 0))],
        [ColorCell('*', (0, 0, 255)), ColorCell('*', (9, 9, 9))],
    ]


def test_response_fields_accept_names(make_solid):
    config = TraceConfig(response_fields=['asciiString', 'colorPixelMatrix'])
    result = trace(make_solid(2, 2, (0, 0, 0)), 2, config=config)
    assert result.ascii_string == '**\n**'
    assert len(result.color_pixel_matrix) == 2
    assert all(len(row) == 2 for row in result.color_pixel_matrix)


def test_no_response_fields(make_solid):
    result = trace(make_solid(2, 2, (0, 0, 0)), 2, config=TraceConfig(response_fields=()))
    assert result.ascii_string is None
    assert result.color_pixel_matrix is None
    assert result.lines == []


def test_iter_cells_row_major(make_solid):
    tracer = Tracer()
    cells = list(tracer.iter_cells(tracer.prepare(make_solid(3, 2, (0, 0, 0)), 3)))
    assert [(c.row, c.column) for c in cells] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert all(c.character == '*' and c.rgb == (0, 0, 0) for c in cells)


def test_empty_buffer():
    result = trace(b"", 3)
    assert result.ascii_string == ''
    assert result.height == 0


def test_malformed_buffer_aborts():
    with pytest.raises(MalformedBufferError):
        trace(bytes(10), 1)


@pytest.mark.parametrize("kwargs", [
    {'should_trace_edges': True},
    {'edge_character': '##'},
    {'edge_character': ''},
    {'shading_ramp': ()},
    {'shading_ramp': ('ab', 'c')},
    {'response_fields': ['pixels']},
    {'edge_character': '\n'},
    {'edge_character': '\r'},
    {'shading_ramp': ('*', '\n', ' ')},
    {'shading_ramp': '*\t '},
])
def test_invalid_config(kwargs):
    with pytest.raises(TraceConfigError):
        TraceConfig(**kwargs)


def test_preset_ramps_are_accepted():
    for ramp in ShadingRamp.presets().values():
        assert TraceConfig(shading_ramp=ramp).shading_ramp == ramp
