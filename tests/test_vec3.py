"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from raycaster.vec3 import Vec3, Point3, Color, ZeroLengthVectorError, dot, cross, unit_vector


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array(self):
        arr = np.array([1.0, 2.0, 3.0])
        v = Vec3.from_array(arr)
        arr[0] = 10.0
        assert v.x == 1.0

    def test_color_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_aliases_are_vec3(self):
        assert Point3 is Vec3
        assert Color is Vec3


class TestVec3Immutability:
    """Vec3 values cannot be changed after construction."""

    def test_cannot_set_component(self):
        v = Vec3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_underlying_array_is_read_only(self):
        v = Vec3(1, 2, 3)
        with pytest.raises(ValueError):
            v._data[0] = 5

    def test_to_array_returns_copy(self):
        v = Vec3(1, 2, 3)
        arr = v.to_array()
        arr[0] = 5
        assert v.x == 1


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        assert -Vec3(1, 2, 3) == Vec3(-1, -2, -3)

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_scalar_multiplication_both_orders(self):
        v = Vec3(1, 2, 3)
        assert v * 2 == Vec3(2, 4, 6)
        assert 2 * v == Vec3(2, 4, 6)

    def test_numpy_scalar_on_left(self):
        result = np.float64(0.5) * Vec3(2, 4, 6)
        assert isinstance(result, Vec3)
        assert result == Vec3(1, 2, 3)

    def test_componentwise_multiplication(self):
        assert Vec3(1, 2, 3) * Vec3(2, 3, 4) == Vec3(2, 6, 12)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vec3(1, 2, 3) / 0

    def test_indexing_and_iteration(self):
        v = Vec3(1, 2, 3)
        assert v[2] == 3.0
        assert list(v) == [1.0, 2.0, 3.0]


class TestVec3VectorOps:
    """Test Vec3 vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_length_squared(self):
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_dot_product(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0.0
        assert dot(Vec3(1, 2, 3), Vec3(4, 5, 6)) == 32.0

    def test_cross_product(self):
        assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)

    @pytest.mark.parametrize("a, b", [
        (Vec3(1, 2, 3), Vec3(4, 5, 6)),
        (Vec3(-2.5, 0.1, 7), Vec3(3, -8, 0.25)),
        (Vec3(1e3, -1e-3, 5), Vec3(0.5, 0.5, -0.5)),
    ])
    def test_cross_is_orthogonal(self, a, b):
        c = cross(a, b)
        scale = a.length() * b.length() * c.length()
        assert abs(dot(c, a)) <= 1e-12 * scale
        assert abs(dot(c, b)) <= 1e-12 * scale

    @pytest.mark.parametrize("v", [
        Vec3(3, 4, 0),
        Vec3(-1, -1, -1),
        Vec3(1e-6, 2e-6, 0),
        Vec3(1e6, -3e5, 7),
    ])
    def test_unit_vector_has_unit_length(self, v):
        assert abs(unit_vector(v).length() - 1.0) < 1e-10

    def test_unit_vector_keeps_direction(self):
        n = Vec3(0, 0, -5).normalize()
        assert n == Vec3(0, 0, -1)

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroLengthVectorError):
            Vec3(0, 0, 0).normalize()

    def test_zero_length_error_is_value_error(self):
        with pytest.raises(ValueError):
            unit_vector(Vec3())


class TestVec3Comparison:
    """Test equality and hashing."""

    def test_equal_within_tolerance(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3 + 1e-12)

    def test_not_equal(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_comparison_with_other_type(self):
        assert Vec3(1, 2, 3) != (1, 2, 3)

    def test_repr(self):
        assert repr(Vec3(1, 2, 3)) == "Vec3(1.0000, 2.0000, 3.0000)"
