"""Tests for the Sobel edge pass."""

import math

import numpy as np
import pytest

from ascii_tracer.edge_detection import EdgeProcessor, detect_edges
from ascii_tracer.pixel_map import build_pixel_map

# Kernel arrays as paired in the reference loop: h_sum reads SUM_H, v_sum reads SUM_V
SUM_H = [-1.0, -2.0, -1.0, 0.0, 0.0, 0.0, 1.0, 2.0, 1.0]
SUM_V = [-1.0, 0.0, 1.0, -2.0, 0.0, 2.0, -1.0, 0.0, 1.0]


def reference_gradients(luminosity, width):
    """Plain loop over the forward window with transposed kernel lookup."""
    magnitudes, angles = [], []
    for i in range(len(luminosity)):
        h_sum = 0.0
        v_sum = 0.0
        for y in range(3):
            for x in range(3):
                j = i + width * y + x
                lum = luminosity[j] if j < len(luminosity) and luminosity[j] else 0
                h_sum += lum * SUM_H[x * 3 + y]
                v_sum += lum * SUM_V[x * 3 + y]
        gx = h_sum * h_sum
        gy = v_sum * v_sum
        magnitudes.append(math.sqrt(gx + gy))
        angles.append(math.atan2(gy, gx) * 180 / math.pi)
    return magnitudes, angles


def test_matches_reference_loop_exactly(make_random):
    pixel_map = build_pixel_map(make_random(7, 5), 7)
    expected_mag, expected_angle = reference_gradients(
        [float(v) for v in pixel_map.records['luminosity']], 7)

    detect_edges(pixel_map)

    assert list(pixel_map.records['gradient_magnitude']) == expected_mag
    assert list(pixel_map.records['gradient_angle']) == pytest.approx(expected_angle, rel=1e-12)


def test_uniform_image_has_no_gradient_inside(make_solid):
    width, height = 5, 5
    pixel_map = detect_edges(build_pixel_map(make_solid(width, height, (120, 120, 120)), width))
    magnitudes = pixel_map.records['gradient_magnitude']
    for i in range(len(pixel_map)):
        if i + 2 * width + 2 < len(pixel_map):
            assert magnitudes[i] == pytest.approx(0, abs=1e-9)


def test_window_past_end_reads_zero():
    # A lone pixel only sees itself at kernel index 0 of both kernels
    pixel_map = detect_edges(build_pixel_map(bytes([100, 100, 100, 255]), 1))
    lum = pixel_map.records['luminosity'][0]
    assert pixel_map[0].gradient_magnitude == pytest.approx(math.sqrt(2) * lum)
    assert pixel_map[0].gradient_angle == pytest.approx(45.0)


def test_vertical_boundary(split_buffer):
    pixel_map = detect_edges(build_pixel_map(split_buffer, 6))
    assert pixel_map[0].gradient_magnitude == 0
    assert pixel_map[1].gradient_magnitude > 0


def test_vertical_boundary_angle(split_buffer):
    # Only the white column at window x == 2 contributes: h_sum is 4 * lum, v_sum is 0
    pixel_map = detect_edges(build_pixel_map(split_buffer, 6))
    lum = pixel_map.records['luminosity'][3]
    assert pixel_map[1].gradient_magnitude == pytest.approx(4 * lum)
    assert pixel_map[1].gradient_angle == 0


def test_angle_within_quarter_turn(make_random):
    pixel_map = detect_edges(build_pixel_map(make_random(9, 9, seed=3), 9))
    angles = pixel_map.records['gradient_angle']
    assert angles.min() >= 0
    assert angles.max() <= 90


def test_row_ranges_match_single_pass(make_random):
    data = make_random(8, 6, seed=7)
    whole = detect_edges(build_pixel_map(data, 8))

    split = build_pixel_map(data, 8)
    detect_edges(split, rows=(0, 2))
    detect_edges(split, rows=(2, 6))

    np.testing.assert_array_equal(whole.records, split.records)


def test_row_range_only_touches_its_rows(make_random):
    pixel_map = build_pixel_map(make_random(4, 4, seed=1), 4)
    EdgeProcessor.detect(pixel_map, rows=(1, 2))
    magnitudes = pixel_map.records['gradient_magnitude']
    assert not magnitudes[:4].any()
    assert not magnitudes[8:].any()


@pytest.mark.parametrize("rows", [(-1, 2), (0, 5), (3, 1)])
def test_bad_row_range(rows):
    pixel_map = build_pixel_map(bytes(64), 4)
    with pytest.raises(IndexError):
        detect_edges(pixel_map, rows=rows)
