import math

import pytest

from hexapode.geometry import Vector2, Vector3, to_deg, to_rad


def test_to_rad_half_turn():
    assert to_rad(180.0) == pytest.approx(math.pi)


def test_to_deg_quarter_turn():
    assert to_deg(math.pi / 2) == pytest.approx(90.0)


@pytest.mark.parametrize("value", [-720.0, -45.5, 0.0, 12.25, 359.0])
def test_round_trip(value):
    assert to_deg(to_rad(value)) == pytest.approx(value)


def test_vector3_unpacks():
    x, y, z = Vector3(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_vector2_defaults_and_equality():
    assert Vector2() == Vector2(0.0, 0.0)
    assert list(Vector2(4.0, -5.0)) == [4.0, -5.0]


def test_vector_is_frozen():
    vector = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        vector.x = 5.0
    assert vector == Vector3(1.0, 2.0, 3.0)
    assert vector.x == 1.0