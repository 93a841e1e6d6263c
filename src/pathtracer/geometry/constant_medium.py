# geometry/constant_medium.py
import math
from typing import Optional, Union
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

class ConstantMedium(Hittable):
    """
    Fog/smoke of constant density filling a boundary shape.

    The boundary is used purely as a container: a ray crossing it scatters
    at a free-flight distance drawn from an exponential distribution, or
    passes straight through if that distance exceeds the path inside.
    The boundary must be convex for the entry/exit pairing to hold.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density if density > 0 else -math.inf
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            raise TypeError("ConstantMedium.hit needs an rng for free-flight sampling")
        if self.density <= 0:
            return None

        # Entry and exit along the whole line, then clipped to the query interval.
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf, rng)
        if rec2 is None:
            return None

        t1 = max(rec1.t, t_min)
        t2 = min(rec2.t, t_max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t2 - t1) * ray_length
        # 1 - U keeps the argument of log in (0, 1].
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t1 + hit_distance / ray_length
        # Normal and face are arbitrary inside a volume.
        return HitRecord(p=ray.at(t), normal=Vector3(1, 0, 0), t=t,
                         front_face=True, material=self.phase_function)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
