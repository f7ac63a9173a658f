"""
Tests for the Vector point type.
"""

import numpy as np
import pytest

from colonization import Vector


class TestVectorArithmetic:

    def test_add_and_subtract(self):
        a = Vector(1.0, 2.0)
        b = Vector(3.0, -1.0)
        assert (a + b).to_tuple() == (4.0, 1.0)
        assert (a - b).to_tuple() == (-2.0, 3.0)

    def test_scalar_scaling_both_sides(self):
        v = Vector(1.0, -2.0, 0.5)
        assert (v * 2).to_tuple() == (2.0, -4.0, 1.0)
        assert (2 * v).to_tuple() == (2.0, -4.0, 1.0)

    def test_dimension_mismatch_raises(self):
        with pytest.raises(ValueError):
            Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)

    def test_zero_has_same_dimension(self):
        z = Vector(4.0, 5.0, 6.0).zero()
        assert z.dimension == 3
        assert z.magnitude_squared == 0.0


class TestVectorGeometry:

    def test_normalize_gives_unit_length(self):
        v = Vector(3.0, 4.0).normalize()
        assert v.magnitude == pytest.approx(1.0)
        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)

    def test_normalize_zero_vector_is_zero(self):
        v = Vector(0.0, 0.0).normalize()
        assert v.to_tuple() == (0.0, 0.0)

    def test_squared_distance_in_3d(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(2.0, 4.0, 6.0)
        assert a.distance_squared_to(b) == pytest.approx(14.0)
        assert a.distance_to(b) == pytest.approx(np.sqrt(14.0))

    def test_tolerant_equality(self):
        assert Vector(0.1 + 0.2, 1.0) == Vector(0.3, 1.0)
        assert Vector(1.0, 2.0) != Vector(1.0, 2.1)

    def test_array_conversion(self):
        v = Vector.from_array(np.array([1.5, 2.5]))
        assert v == Vector(1.5, 2.5)
        np.testing.assert_allclose(v.to_array(), [1.5, 2.5])
        assert Vector.from_tuple((1, 2, 3)).z == 3.0

    def test_copy_is_equal(self):
        v = Vector(1.0, 2.0)
        assert v.copy() == v
