# geometry/hittable.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.aabb import AABB

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "uv", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, uv: UV = None, front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection, facing the ray
        self.t = t              # Ray parameter at intersection
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.front_face = front_face  # Whether the hit was on the outward side
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p}, normal={self.normal}, front_face={self.front_face})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Besides intersection, a hittable can act as a sampling target for
    light-directed importance sampling through `pdf_value` and `random`.
    Only shapes whose `is_samplable()` is true implement that pair; the
    others raise instead of returning a density that does not match
    their samples.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def is_samplable(self) -> bool:
        return False

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        raise NotImplementedError(f"{type(self).__name__} cannot be sampled as a light")

    def random(self, origin: Vector3, rng) -> Vector3:
        raise NotImplementedError(f"{type(self).__name__} cannot be sampled as a light")

class EmptyHittable(Hittable):
    """Never hit, no bounding box. Stands in for an empty scene or subtree."""
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return None

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return None
