"""Shared fixtures for tracer tests."""

import numpy as np
import pytest


def solid_buffer(width, height, rgb, alpha=255):
    """RGBA bytes for a single-colour image."""
    return bytes(list(rgb) + [alpha]) * (width * height)


def random_buffer(width, height, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=width * height * 4, dtype=np.uint8).tobytes()


@pytest.fixture
def make_solid():
    return solid_buffer


@pytest.fixture
def make_random():
    return random_buffer


@pytest.fixture
def split_buffer():
    """6x3 image: left three columns black, right three white."""
    row = bytes([0, 0, 0, 255]) * 3 + bytes([255, 255, 255, 255]) * 3
    return row * 3
