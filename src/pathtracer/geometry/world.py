# src/geometry/world.py
from typing import Iterable, List, Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import build_bvh

class HittableList(Hittable):
    """
    An ordered list of Hittable objects; a ray reports the closest hit
    among them. Also serves as the light group sampled by HittablePDF.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, time0: float, time1: float, rng) -> Hittable:
        """Build a BVH over (a copy of) the current objects."""
        return build_bvh(self.objects, time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None and rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return AABB.surrounding(obj.bounding_box(time0, time1) for obj in self.objects)

    def is_samplable(self) -> bool:
        return bool(self.objects) and all(obj.is_samplable() for obj in self.objects)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        if not self.objects:
            raise ValueError("Cannot sample a direction towards an empty HittableList")
        return rng.choice(self.objects).random(origin, rng)
