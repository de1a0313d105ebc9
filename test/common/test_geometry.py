import math

import pytest

from drive_common.geometry import (
    clamp,
    euclidean,
    heading_to_radians,
    heading_vector,
    is_near_zero,
    left_normal,
    transform_2d,
    wrap_to_180,
)

def test_zero_heading_points_up():
    assert heading_to_radians(0) == pytest.approx(math.pi / 2)
    hx, hy = heading_vector(0)
    assert hx == pytest.approx(0.0, abs=1e-12)
    assert hy == pytest.approx(1.0)

def test_headings_increase_counter_clockwise():
    hx, hy = heading_vector(90)
    assert (hx, hy) == (pytest.approx(-1.0), pytest.approx(0.0, abs=1e-12))
    nx, ny = left_normal(0)
    assert (nx, ny) == (pytest.approx(-1.0), pytest.approx(0.0, abs=1e-12))

def test_transform_2d():
    x, y = transform_2d(1.0, 2.0, math.pi / 2, 3.0, 0.0)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(5.0)

def test_wrap_to_180():
    assert wrap_to_180(270) == -90
    assert wrap_to_180(-190) == 170
    assert wrap_to_180(180) == -180
    assert wrap_to_180(45) == 45

def test_small_helpers():
    assert euclidean((0, 0), (3, 4)) == 5
    assert clamp(7, 0, 5) == 5
    assert clamp(-2, 0, 5) == 0
    assert is_near_zero(0.005, 0.01)
    assert not is_near_zero(-0.02, 0.01)
