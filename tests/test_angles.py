import math

import pytest

from geometric import angles


def test_degrees_to_radians():
    assert angles.degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert angles.degrees_to_radians(-90.0) == pytest.approx(-math.pi / 2)


def test_radians_to_degrees():
    assert angles.radians_to_degrees(math.pi / 2) == pytest.approx(90.0)
    assert angles.radians_to_degrees(0.0) == 0.0


def test_conversion_inverse():
    assert angles.radians_to_degrees(angles.degrees_to_radians(37.5)) == pytest.approx(37.5)


def test_angle_reflect_in_range():
    assert angles.angle_reflect(45.0, 90.0) == pytest.approx(135.0)


def test_angle_reflect_wraps_negative():
    assert angles.angle_reflect(10.0, 0.0) == pytest.approx(350.0)


def test_angle_reflect_wraps_at_360():
    assert angles.angle_reflect(0.0, 180.0) == 0.0
    assert angles.angle_reflect(30.0, 200.0) == pytest.approx(10.0)


def test_angle_reflect_wraps_only_once():
    # 2 * 400 - 0 = 800, one wrap leaves 440
    assert angles.angle_reflect(0.0, 400.0) == pytest.approx(440.0)
