from math import isclose, pi

import pytest

from bubbles.math.vector import Vector2D, rotation_matrix


def test_arithmetic_returns_new_vectors() -> None:
    a = Vector2D(1.0, 2.0)
    b = Vector2D(0.5, -1.0)
    assert a + b == Vector2D(1.5, 1.0)
    assert a - b == Vector2D(0.5, 3.0)
    assert a * 2 == Vector2D(2.0, 4.0)
    assert 2 * a == a.scale(2)
    assert a.add(b) == a + b
    assert a.sub(b) == a - b
    assert a == Vector2D(1.0, 2.0)


def test_vector_is_immutable() -> None:
    vector = Vector2D(1.0, 2.0)
    with pytest.raises(AttributeError):
        vector.x = 5.0


def test_length_and_normalization() -> None:
    vector = Vector2D(3.0, 4.0)
    assert vector.length() == 5.0
    unit = vector.normalized()
    assert isclose(unit.x, 0.6)
    assert isclose(unit.y, 0.8)
    assert isclose(unit.length(), 1.0)
    assert isclose(Vector2D(0.0, 0.0).distance_to(vector), 5.0)


def test_zero_vector_cannot_be_normalized_or_divided() -> None:
    with pytest.raises(ValueError):
        Vector2D(0.0, 0.0).normalized()
    with pytest.raises(ValueError):
        Vector2D(1.0, 1.0) / 0


def test_rotation_matrix_turns_counter_clockwise() -> None:
    rotated = Vector2D(1.0, 0.0).rotate(rotation_matrix(pi / 2))
    assert rotated.x == pytest.approx(0.0, abs=1e-12)
    assert rotated.y == pytest.approx(1.0)

    back = rotated.rotate(rotation_matrix(-pi / 2))
    assert back.x == pytest.approx(1.0)
    assert back.y == pytest.approx(0.0, abs=1e-12)
