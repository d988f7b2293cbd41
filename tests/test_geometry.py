import math

import pytest

from wasteland_racers.geometry import Vector, lerp


def test_length_of_pythagorean_vector():
    assert Vector(3, 4, 0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vector(2.0, -7.0, 1.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.x * v.length() == pytest.approx(v.x)


def test_normalized_of_zero_is_zero():
    assert Vector().normalized() == Vector()
    assert Vector().normalized().is_zero()


def test_distance_is_symmetric():
    a = Vector(1, 2, 3)
    b = Vector(-4, 0, 9)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_is_zero():
    assert Vector(0, 0, 0).is_zero()
    assert not Vector(0, 0, 1e-6).is_zero()


def test_arithmetic_operators():
    a = Vector(1, 2, 3)
    b = Vector(4, 5, 6)
    assert a + b - b == a
    assert 2 * a == a * 2
    assert -a + a == Vector()
    assert (a * 4) / 4 == a


def test_lerp_endpoints_and_middle():
    start = Vector(0, 0, 0)
    end = Vector(10, 20, -30)
    assert lerp(start, end, 0.0) == start
    assert lerp(start, end, 1.0) == end
    mid = lerp(start, end, 0.5)
    assert mid.distance(start) == pytest.approx(mid.distance(end))


def test_lerp_on_floats():
    assert lerp(2.0, 6.0, 0.25) == pytest.approx(3.0)
    assert math.isclose(lerp(-1.0, 1.0, 0.5), 0.0, abs_tol=1e-12)