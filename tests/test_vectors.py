import math

import pytest

from enginecore.vectors import Vector2, Vector3, Vertex


def test_vector3_default_is_zero():
    assert tuple(Vector3()) == (0.0, 0.0, 0.0)


def test_vector3_single_value_fills_all_components():
    assert Vector3(2.5) == Vector3(2.5, 2.5, 2.5)


def test_vector3_two_components_rejected():
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0)


def test_vector2_single_value_fills_both_components():
    assert Vector2(7) == Vector2(7, 7)


def test_vector3_add_then_subtract_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(0.5, 4.0, -1.0)
    assert a + b - b == a


def test_vector2_add_then_subtract_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 8.0)
    assert a + b - b == a


def test_vector3_scalar_multiplication_matches_addition():
    a = Vector3(1.0, -3.0, 0.5)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_vector2_scalar_multiplication_matches_addition():
    a = Vector2(-1.0, 6.0)
    assert a * 2 == a + a


def test_componentwise_multiplication_by_ones_is_identity():
    a = Vector3(4.0, -5.0, 6.0)
    assert a * Vector3(1.0) == a
    b = Vector2(4.0, -5.0)
    assert b * Vector2(1.0) == b


def test_componentwise_multiplication_selects_components():
    a = Vector3(4.0, -5.0, 6.0)
    assert a * Vector3(1.0, 0.0, 0.0) == Vector3(a.x, 0.0, 0.0)


def test_operations_do_not_mutate_operands():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    _ = a + b
    _ = a * 3
    assert tuple(a) == (1.0, 2.0, 3.0)


def test_vector3_length_pythagorean():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize(
    "vec",
    [Vector3(3.0, -4.0, 12.0), Vector3(0.1, 0.2, 0.3), Vector3(-7.0, 0.0, 0.0)],
)
def test_vector3_normalized_has_unit_length(vec):
    unit = vec.normalized()
    assert unit.length() == pytest.approx(1.0)
    rebuilt = unit * vec.length()
    assert tuple(rebuilt) == pytest.approx(tuple(vec))


@pytest.mark.parametrize("vec", [Vector2(3.0, -4.0), Vector2(0.5, 0.25)])
def test_vector2_normalized_has_unit_length(vec):
    unit = vec.normalized()
    assert unit.length() == pytest.approx(1.0)
    assert math.atan2(unit.y, unit.x) == pytest.approx(math.atan2(vec.y, vec.x))


def test_zero_vectors_normalize_to_zero():
    assert Vector3().normalized() == Vector3(0.0, 0.0, 0.0)
    assert Vector2().normalized() == Vector2(0.0, 0.0)


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vector3())


def test_vertex_defaults():
    vertex = Vertex()
    assert vertex.position == Vector3(0.0)
    assert vertex.tex_coord == Vector2(0.0)
    assert vertex.color == Vector3(1.0)


def test_vertex_defaults_are_independent():
    first = Vertex()
    second = Vertex()
    first.color.x = 0.0
    assert second.color == Vector3(1.0)


def test_vertex_explicit_fields():
    vertex = Vertex(Vector3(1, 2, 3), Vector2(0.5), Vector3(0.2))
    assert vertex.position == Vector3(1, 2, 3)
    assert vertex.tex_coord == Vector2(0.5, 0.5)