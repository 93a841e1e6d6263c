"""Tests for vector math, quaternions, rays, bounding boxes and the ONB."""

import math
import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.core.quaternion import Quaternion
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.onb import ONB
from pathtracer.core.utils import (
    random_cosine_direction,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    reflectance,
    safe_inverse,
)


def assert_vec_close(a, b, tol=1e-9):
    assert abs(a.x - b.x) < tol and abs(a.y - b.y) < tol and abs(a.z - b.z) < tol, f"{a} != {b}"


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_dot_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)

    def test_normalize_zero_vector(self):
        """The zero vector stays zero instead of dividing by zero."""
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)
        assert Vector3(3, 0, 4).normalize() == Vector3(0.6, 0, 0.8)

    def test_indexing_and_iteration(self):
        v = Vector3(1, 2, 3)
        assert [v[0], v[1], v[2]] == [1, 2, 3]
        assert list(v) == [1, 2, 3]
        with pytest.raises(IndexError):
            v[3]


class TestQuaternion:
    """Tests for quaternion rotations."""

    def test_quarter_turn_about_z(self):
        q = Quaternion.from_axis_angle(Vector3(0, 0, 1), math.pi / 2)
        assert_vec_close(q.rotate(Vector3(1, 0, 0)), Vector3(0, 1, 0))

    def test_zero_angle_is_identity(self):
        q = Quaternion.from_axis_angle(Vector3(1, 2, 3), 0.0)
        v = Vector3(0.3, -2.0, 5.5)
        assert_vec_close(q.rotate(v), v)

    def test_rotations_compose(self):
        """Rotating twice by theta equals rotating once by 2 theta."""
        rng = random.Random(11)
        for _ in range(50):
            axis = random_unit_vector(rng)
            theta = rng.uniform(-math.pi, math.pi)
            v = Vector3.random(rng, -5, 5)
            q = Quaternion.from_axis_angle(axis, theta)
            q2 = Quaternion.from_axis_angle(axis, 2 * theta)
            assert_vec_close(q.rotate(q.rotate(v)), q2.rotate(v))
            assert_vec_close((q * q).rotate(v), q2.rotate(v))

    def test_conjugate_undoes_rotation(self):
        q = Quaternion.from_axis_angle(Vector3(1, 1, 0), 0.7)
        v = Vector3(1, 2, 3)
        assert_vec_close(q.conjugate().rotate(q.rotate(v)), v)

    def test_rotation_preserves_length(self):
        q = Quaternion.from_axis_angle(Vector3(0.2, -1, 0.4), 2.1)
        v = Vector3(3, -4, 12)
        assert abs(q.rotate(v).length() - 13.0) < 1e-9


class TestRay:
    """Tests for Ray."""

    def test_at(self):
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 2, 0), time=0.5)
        assert ray.at(1.5) == Vector3(1, 3, 0)
        assert ray.time == 0.5

    def test_default_time(self):
        assert Ray(Vector3(), Vector3(1, 0, 0)).time == 0.0


class TestAABB:
    """Tests for axis-aligned bounding boxes."""

    def _random_box(self, rng):
        a = Vector3.random(rng, -10, 10)
        b = Vector3.random(rng, -10, 10)
        return AABB(Vector3.minimum(a, b), Vector3.maximum(a, b))

    def test_union_commutative_and_associative(self):
        rng = random.Random(3)
        for _ in range(20):
            a, b, c = (self._random_box(rng) for _ in range(3))
            assert AABB.surrounding_box(a, b) == AABB.surrounding_box(b, a)
            assert (AABB.surrounding_box(AABB.surrounding_box(a, b), c)
                    == AABB.surrounding_box(a, AABB.surrounding_box(b, c)))

    def test_union_with_itself(self):
        box = AABB(Vector3(-1, 0, 2), Vector3(3, 4, 5))
        assert AABB.surrounding_box(box, box) == box

    def test_surrounding_skips_missing_boxes(self):
        box = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert AABB.surrounding([None, box, None]) == box
        assert AABB.surrounding([None, None]) is None
        assert AABB.surrounding([]) is None

    def test_hit_and_miss(self):
        box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        assert box.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf)
        assert not box.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert not box.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, 3.0)

    def test_zero_direction_components(self):
        """Axis-parallel rays rely on infinite slab bounds rather than raising."""
        box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        assert box.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf)
        assert not box.hit(Ray(Vector3(2, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf)
        # Origin exactly on a slab plane produces 0 * inf = NaN; must not raise.
        box.hit(Ray(Vector3(1, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf)

    def test_corners(self):
        box = AABB(Vector3(0, 0, 0), Vector3(1, 2, 3))
        corners = box.corners()
        assert len(corners) == 8
        assert AABB.from_points(corners) == box


class TestONB:
    """Tests for the orthonormal basis."""

    @pytest.mark.parametrize("n", [Vector3(0, 0, 1), Vector3(1, 0, 0), Vector3(0.3, -0.5, 2.0)])
    def test_orthonormal(self, n):
        uvw = ONB.from_w(n)
        for a in (uvw.u, uvw.v, uvw.w):
            assert abs(a.length() - 1.0) < 1e-9
        assert abs(uvw.u.dot(uvw.v)) < 1e-9
        assert abs(uvw.u.dot(uvw.w)) < 1e-9
        assert abs(uvw.v.dot(uvw.w)) < 1e-9
        assert_vec_close(uvw.w, n.normalize())

    def test_local_maps_z_to_w(self):
        uvw = ONB.from_w(Vector3(1, 1, 0))
        assert_vec_close(uvw.local(Vector3(0, 0, 1)), Vector3(1, 1, 0).normalize())


class TestSampling:
    """Tests for the random sampling helpers."""

    def test_unit_sphere_and_vector(self):
        rng = random.Random(1)
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0
            assert abs(random_unit_vector(rng).length() - 1.0) < 1e-9

    def test_cosine_direction_upper_hemisphere(self):
        rng = random.Random(2)
        for _ in range(200):
            d = random_cosine_direction(rng)
            assert d.z >= 0
            assert abs(d.length() - 1.0) < 1e-9

    def test_reflect(self):
        assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_refract_straight_through(self):
        d = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert_vec_close(d, Vector3(0, -1, 0))

    def test_reflectance_grazing_is_total(self):
        assert reflectance(0.0, 1.5) == pytest.approx(1.0)
        assert reflectance(1.0, 1.5) == pytest.approx(0.04)

    def test_safe_inverse(self):
        assert safe_inverse(2.0) == 0.5
        assert safe_inverse(0.0) == math.inf
        assert safe_inverse(-0.0) == -math.inf
