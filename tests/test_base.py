import logging
import warnings

import numpy as np
import pytest

import VECtools
from VECtools import Vector2, Vector3, Vector4, VectorBase


@pytest.mark.parametrize("cls, dim", [(Vector2, 2), (Vector3, 3), (Vector4, 4)])
def test_buffer_is_float32_of_fixed_length(cls, dim):
    v = cls(*range(1, dim + 1))
    assert len(v) == dim
    assert v.to_array().dtype == np.float32
    assert v.to_array().shape == (dim,)
    assert list(v) == [float(i) for i in range(1, dim + 1)]


def test_default_construction_is_zero():
    assert Vector4() == Vector4(0, 0, 0, 0)
    assert Vector2().magnitude == 0.0


def test_components_are_rounded_to_single_precision():
    v = Vector2(0.1, 1.0 / 3.0)
    assert v.x == float(np.float32(0.1))
    assert v.y == float(np.float32(1.0 / 3.0))
    assert v.x != 0.1


def test_named_setters_mutate_in_place():
    v = Vector4(1, 2, 3, 4)
    v.x = 10
    v.w = 0.1
    assert v.x == 10.0
    assert v.w == float(np.float32(0.1))
    assert v.to_array().tolist() == [10.0, 2.0, 3.0, float(np.float32(0.1))]


def test_positional_access():
    v = Vector3(1, 2, 3)
    assert v[2] == 3.0
    v[1] = -7
    assert v.y == -7.0
    with pytest.raises(IndexError):
        v[3]


def test_accessors_follow_the_type():
    with pytest.raises(AttributeError):
        Vector2(1, 2).z
    with pytest.raises(AttributeError):
        Vector3(1, 2, 3).w


def test_setter_does_not_touch_other_vectors():
    a = Vector3(1, 2, 3)
    b = a.clone()
    c = a.add(Vector3())
    b.x = 100
    c.y = 100
    assert a == Vector3(1, 2, 3)


def test_str_and_repr():
    assert str(Vector2(3, 4)) == "Vector2(3.0, 4.0)"
    assert repr(Vector3(0.1, 0, -1.5)) == "Vector3(0.1, 0.0, -1.5)"
    assert str(Vector4(1, 2, 3, 4)) == "Vector4(1.0, 2.0, 3.0, 4.0)"


def test_from_array():
    source = np.array([1.5, 2.5, 3.5])
    v = Vector3.from_array(source)
    assert v == Vector3(1.5, 2.5, 3.5)
    source[0] = 99.0
    assert v.x == 1.5
    assert Vector2.from_array([1, 2]) == Vector2(1, 2)


def test_from_array_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Vector3.from_array([1, 2])
    with pytest.raises(ValueError):
        Vector2.from_array([[1, 2]])


def test_to_array_is_a_copy():
    v = Vector2(1, 2)
    arr = v.to_array()
    arr[0] = 50
    assert v.x == 1.0


def test_exact_equality_and_hashing():
    assert Vector2(1, 2) == Vector2(1, 2)
    assert Vector2(1, 2) != Vector2(1, 2.5)
    assert Vector2(1, 2) != Vector3(1, 2, 0)
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))


def test_operators():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 5, 6)
    assert a + b == Vector3(5, 7, 9)
    assert b - a == Vector3(3, 3, 3)
    assert a * 2 == Vector3(2, 4, 6)
    assert 2 * a == Vector3(2, 4, 6)
    assert b / 2 == Vector3(2, 2.5, 3)
    assert -a == Vector3(-1, -2, -3)
    with pytest.raises(TypeError):
        a + 1
    with pytest.raises(TypeError):
        a + Vector2(1, 2)
    with pytest.raises(TypeError):
        a * b


def test_division_by_zero_propagates_floats():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v = Vector2(1, 0).div(0)
    assert v.x == float("inf")
    assert np.isnan(v.y)


def test_overflow_rounds_to_infinity():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v = Vector2(3e38, 1).mult(10)
    assert v.x == float("inf")
    assert v.y == 10.0


def test_normalize_zero_logs_and_returns_copy(caplog):
    caplog.set_level(logging.DEBUG, logger="VECtools.vector.base")
    v = Vector3()
    n = v.normalize()
    assert n == v
    assert n is not v
    assert "zero-length" in caplog.text


def test_set_use_numba(caplog):
    caplog.set_level(logging.INFO, logger="VECtools")
    VECtools.set_use_numba(False)
    assert VectorBase.use_numba is False
    assert Vector2.use_numba is False
    assert Vector2(3, 4).magnitude == 5.0
    VECtools.set_use_numba(True)
    assert Vector4.use_numba is True
    assert "numba" in caplog.text


def test_equals_rejects_other_vector_types():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3).equals(Vector2(1, 2))
    with pytest.raises(TypeError):
        Vector2(1, 2).equals(Vector4(1, 2, 0, 0))


def test_str_uses_shortest_float32_decimal():
    assert str(Vector2(0.1, 3)) == "Vector2(0.1, 3.0)"
