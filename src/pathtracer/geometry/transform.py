# geometry/transform.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.quaternion import Quaternion
from pathtracer.geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Instance of a child hittable moved by `offset`. Rays are moved into the
    child's frame instead of moving the geometry.
    """
    def __init__(self, child: Hittable, offset: Vector3):
        self.child = child
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.child.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        # Translation keeps directions, so normal and face stay valid.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return box.translated(self.offset)

    def is_samplable(self) -> bool:
        return self.child.is_samplable()

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.child.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.child.random(origin - self.offset, rng)

class Rotate(Hittable):
    """
    Instance of a child hittable rotated by `angle` radians about `axis`
    through the origin.
    """
    def __init__(self, child: Hittable, angle: float, axis: Vector3):
        self.child = child
        self.rotation = Quaternion.from_axis_angle(axis, angle)
        self.inverse = self.rotation.conjugate()

    def _to_local(self, ray: Ray) -> Ray:
        return Ray(self.inverse.rotate(ray.origin), self.inverse.rotate(ray.direction), ray.time)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rec = self.child.hit(self._to_local(ray), t_min, t_max, rng)
        if rec is None:
            return None
        # Rotation preserves dot products, so front_face carries over.
        rec.p = self.rotation.rotate(rec.p)
        rec.normal = self.rotation.rotate(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB.from_points(self.rotation.rotate(c) for c in box.corners())

    def is_samplable(self) -> bool:
        return self.child.is_samplable()

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.child.pdf_value(self.inverse.rotate(origin), self.inverse.rotate(direction))

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.rotation.rotate(self.child.random(self.inverse.rotate(origin), rng))
