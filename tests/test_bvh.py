"""Tests for the bounding volume hierarchy."""

import math
import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.bvh import BVHNode, build_bvh
from pathtracer.geometry.cube import Cube
from pathtracer.geometry.hittable import EmptyHittable
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian

T_MIN = 0.001


def random_objects(rng, count):
    objects = []
    for _ in range(count):
        material = Lambertian(Vector3.random(rng))
        center = Vector3.random(rng, -10, 10)
        kind = rng.random()
        if kind < 0.6:
            objects.append(Sphere(center, rng.uniform(0.2, 1.5), material))
        elif kind < 0.8:
            objects.append(MovingSphere(center, center + Vector3(0, rng.uniform(0, 1), 0),
                                        0.0, 1.0, rng.uniform(0.2, 1.0), material))
        else:
            objects.append(Cube(center, center + Vector3.random(rng, 0.2, 2.0), material))
    return objects


class TestBuild:
    """Tests for building the hierarchy."""

    def test_empty_gives_empty_hittable(self):
        assert isinstance(build_bvh([], 0, 1, random.Random(1)), EmptyHittable)

    def test_single_object_is_returned(self):
        sphere = Sphere(Vector3(), 1.0, Lambertian(Vector3(1, 1, 1)))
        assert build_bvh([sphere], 0, 1, random.Random(1)) is sphere

    def test_two_objects_make_one_node(self):
        mat = Lambertian(Vector3(1, 1, 1))
        a = Sphere(Vector3(0, 0, 0), 1.0, mat)
        b = Sphere(Vector3(5, 0, 0), 1.0, mat)
        node = build_bvh([a, b], 0, 1, random.Random(1))
        assert isinstance(node, BVHNode)
        assert {id(node.left), id(node.right)} == {id(a), id(b)}
        assert node.depth() == 1
        assert node.count_nodes() == 1

    def test_caller_list_untouched(self):
        rng = random.Random(2)
        objects = random_objects(rng, 20)
        before = list(objects)
        build_bvh(objects, 0, 1, rng)
        assert objects == before

    def test_node_box_contains_children(self):
        rng = random.Random(3)
        root = build_bvh(random_objects(rng, 40), 0.0, 1.0, rng)

        def check(node):
            if not isinstance(node, BVHNode):
                return
            for child in (node.left, node.right):
                box = child.bounding_box(0.0, 1.0)
                assert AABB.surrounding_box(node.box, box) == node.box
                check(child)

        check(root)

    def test_node_count(self):
        rng = random.Random(4)
        root = build_bvh(random_objects(rng, 33), 0.0, 1.0, rng)
        # A binary tree with n leaves has n - 1 interior nodes.
        assert root.count_nodes() == 32
        assert root.depth() <= 7


class TestTraversal:
    """The hierarchy must report exactly the hit a linear scan reports."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_matches_linear_search(self, seed):
        rng = random.Random(seed)
        objects = random_objects(rng, 60)
        linear = HittableList(objects)
        bvh = HittableList(objects).build_bvh(0.0, 1.0, rng)

        for _ in range(300):
            origin = Vector3.random(rng, -15, 15)
            ray = Ray(origin, random_unit_vector(rng), time=rng.random())
            expected = linear.hit(ray, T_MIN, math.inf)
            actual = bvh.hit(ray, T_MIN, math.inf)
            if expected is None:
                assert actual is None
            else:
                assert actual is not None
                assert actual.t == pytest.approx(expected.t, abs=1e-12)
                assert actual.material is expected.material

    def test_respects_t_max(self):
        rng = random.Random(7)
        objects = random_objects(rng, 30)
        bvh = build_bvh(objects, 0.0, 1.0, rng)
        for _ in range(100):
            ray = Ray(Vector3.random(rng, -15, 15), random_unit_vector(rng), time=0.5)
            rec = bvh.hit(ray, T_MIN, 3.0)
            assert rec is None or T_MIN <= rec.t <= 3.0

    def test_unbounded_children_are_harmless(self):
        mat = Lambertian(Vector3(1, 1, 1))
        sphere = Sphere(Vector3(0, 0, 0), 1.0, mat)
        node = BVHNode(EmptyHittable(), sphere, 0, 0)
        assert node.box == sphere.bounding_box()
        rec = node.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(4.0)
