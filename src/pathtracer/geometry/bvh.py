# src/geometry/bvh.py
import math
from typing import Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord, EmptyHittable

class BVHNode(Hittable):
    """
    Interior node of a bounding volume hierarchy. The cached box is the
    union of the children's boxes over the build time range and is computed
    once the children are final; the tree is never modified afterwards.
    """
    def __init__(self, left: Hittable, right: Hittable, time0: float, time1: float):
        self.left = left
        self.right = right
        self.box = AABB.surrounding([left.bounding_box(time0, time1),
                                     right.bounding_box(time0, time1)])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if self.box is None or not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)

        # Only a hit closer than the left one can matter on the right.
        if hit_left is not None:
            hit_right = self.right.hit(ray, t_min, hit_left.t, rng)
            if hit_right is not None and hit_right.t < hit_left.t:
                return hit_right
            return hit_left
        return self.right.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box

    def depth(self) -> int:
        return 1 + max(_depth(self.left), _depth(self.right))

    def count_nodes(self) -> int:
        return 1 + _count_nodes(self.left) + _count_nodes(self.right)

def _depth(node: Hittable) -> int:
    return node.depth() if isinstance(node, BVHNode) else 0

def _count_nodes(node: Hittable) -> int:
    return node.count_nodes() if isinstance(node, BVHNode) else 0

def _box_key(axis: int, time0: float, time1: float):
    def key(obj: Hittable) -> float:
        box = obj.bounding_box(time0, time1)
        # Unbounded objects (empty) sort first; they never hit anyway.
        return box.minimum[axis] if box is not None else -math.inf
    return key

def build_bvh(objects: Sequence[Hittable], time0: float, time1: float, rng) -> Hittable:
    """
    Top-down build: sort along a random axis by box minimum, split at the
    middle, recurse. Zero objects give an EmptyHittable, one object is
    returned as is, two become the children of a single node.
    The caller's sequence is left untouched.
    """
    objects = list(objects)
    if len(objects) >= 2:
        axis = rng.randrange(3)
        objects.sort(key=_box_key(axis, time0, time1))

    if not objects:
        return EmptyHittable()
    if len(objects) == 1:
        return objects[0]
    if len(objects) == 2:
        return BVHNode(objects[0], objects[1], time0, time1)

    mid = len(objects) // 2
    left = build_bvh(objects[:mid], time0, time1, rng)
    right = build_bvh(objects[mid:], time0, time1, rng)
    return BVHNode(left, right, time0, time1)
