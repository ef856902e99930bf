import dataclasses
import math

import pytest

from attractorlab.vertex import Vertex


def test_uniform_sets_all_coordinates():
    v = Vertex.uniform(0.001)
    assert tuple(v) == (0.001, 0.001, 0.001)


def test_default_is_origin():
    assert Vertex() == Vertex.uniform(0.0)


def test_vertex_is_immutable():
    v = Vertex(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0
    assert tuple(v) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "vertex, expected",
    [
        (Vertex(0.0, 0.0, 0.0), False),
        (Vertex(1e10, -1e10, 1e10), False),
        (Vertex(1e11, 0.0, 0.0), True),
        (Vertex(0.0, -1e11, 0.0), True),
        (Vertex(0.0, 0.0, 2e10), True),
    ],
)
def test_is_infinite(vertex, expected):
    assert vertex.is_infinite() is expected


def test_distance_is_symmetric_and_zero_to_self():
    a = Vertex(1.0, -2.0, 0.5)
    b = Vertex(-3.0, 4.0, 2.0)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(a) == 0.0


def test_distance_matches_difference_length():
    a = Vertex(1.0, -2.0, 0.5)
    b = Vertex(-3.0, 4.0, 2.0)
    d = a - b
    assert a.distance_to(b) == pytest.approx(d.distance_to(Vertex()))


def test_subtraction_and_addition_round_trip():
    a = Vertex(1.5, -2.25, 3.0)
    b = Vertex(0.5, 4.0, -1.0)
    assert (a - b) + b == a


def test_right_angle():
    origin = Vertex()
    angle = origin.angle(Vertex(1.0, 0.0, 0.0), Vertex(0.0, 1.0, 0.0))
    assert math.isclose(angle, math.pi / 2)


def test_straight_angle_when_between_neighbours():
    middle = Vertex(1.0, 1.0, 1.0)
    angle = middle.angle(Vertex(0.0, 0.0, 0.0), Vertex(2.0, 2.0, 2.0))
    assert math.isclose(angle, math.pi)


def test_angle_degenerate_returns_zero():
    v = Vertex(1.0, 2.0, 3.0)
    assert v.angle(v, Vertex(4.0, 5.0, 6.0)) == 0.0
    assert v.angle(Vertex(4.0, 5.0, 6.0), v) == 0.0


def test_angle_is_symmetric_in_neighbours():
    v = Vertex(0.3, -0.2, 1.0)
    a = Vertex(1.0, 2.0, 0.0)
    c = Vertex(-1.0, 0.5, 2.0)
    assert v.angle(a, c) == pytest.approx(v.angle(c, a))


def test_maximum_and_minimum_are_componentwise():
    a = Vertex(1.0, -5.0, 3.0)
    b = Vertex(-2.0, 4.0, 3.5)
    hi = a.maximum(b)
    lo = a.minimum(b)
    assert hi == Vertex(1.0, 4.0, 3.5)
    assert lo == Vertex(-2.0, -5.0, 3.0)
    assert all(h >= l for h, l in zip(hi, lo))


def test_maximum_and_minimum_leave_operands_unchanged():
    a = Vertex(1.0, 2.0, 3.0)
    b = Vertex(3.0, 2.0, 1.0)
    a.maximum(b)
    a.minimum(b)
    assert a == Vertex(1.0, 2.0, 3.0)