# geometry/cube.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import safe_inverse
from pathtracer.geometry.hittable import Hittable, HitRecord

class Cube(Hittable):
    """
    Axis-aligned box between two corner points, with six outward normals.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.minimum = Vector3.minimum(p0, p1)
        self.maximum = Vector3.maximum(p0, p1)
        self.material = material

    def _slab_interval(self, ray: Ray):
        t_enter = -math.inf
        t_exit = math.inf
        for a in range(3):
            inv_d = safe_inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            # NaN bounds fail the comparison and are ignored.
            t_enter = t0 if t0 > t_enter else t_enter
            t_exit = t1 if t1 < t_exit else t_exit
        return t_enter, t_exit

    def _face(self, p: Vector3, direction: Vector3):
        """
        Outward normal and surface coordinates of the face `p` lies on: the
        axis whose relative coordinate is nearest to 0 or 1. A flat box has
        both faces of its zero-extent axis in one plane; the one facing the
        incoming `direction` is reported, so the slab is two-sided.
        """
        extent = self.maximum - self.minimum
        rel = [((p[a] - self.minimum[a]) / extent[a]) if extent[a] != 0 else 0.0
               for a in range(3)]
        best_axis = None
        best_dist = math.inf
        for a in range(3):
            dist = min(abs(rel[a]), abs(1.0 - rel[a]))
            if dist < best_dist:
                best_axis, best_dist = a, dist
        if best_axis is None:
            # Only reachable with NaN coordinates.
            return Vector3(0, 1, 0), UV(0.0, 0.0)

        if extent[best_axis] == 0:
            sign = -1.0 if direction[best_axis] > 0 else 1.0
        else:
            sign = -1.0 if abs(rel[best_axis]) < abs(1.0 - rel[best_axis]) else 1.0
        components = [0.0, 0.0, 0.0]
        components[best_axis] = sign
        others = [a for a in range(3) if a != best_axis]
        uv = UV(min(max(rel[others[0]], 0.0), 1.0), min(max(rel[others[1]], 0.0), 1.0))
        return Vector3(*components), uv

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        t_enter, t_exit = self._slab_interval(ray)
        if not t_exit >= t_enter:
            return None

        if t_min <= t_enter <= t_max:
            t = t_enter
        elif t_min <= t_exit <= t_max:
            t = t_exit
        else:
            return None

        rec = HitRecord(t=t, material=self.material)
        rec.p = ray.at(t)
        outward_normal, rec.uv = self._face(rec.p, ray.direction)
        rec.set_face_normal(ray, outward_normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return AABB(self.minimum, self.maximum)

    def _face_areas(self):
        """
        Area of the faces perpendicular to each axis, both sides together.
        A zero-extent axis has its two faces in one plane, counted once.
        """
        extent = self.maximum - self.minimum
        areas = [extent.y * extent.z, extent.x * extent.z, extent.x * extent.y]
        return [area if extent[a] == 0 else 2 * area for a, area in enumerate(areas)]

    def surface_area(self) -> float:
        return sum(self._face_areas())

    def is_samplable(self) -> bool:
        return self.surface_area() > 0

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        """
        Solid-angle density of `random`: each point where the direction
        crosses the surface contributes d^2 / (|cos| * area).
        """
        area = self.surface_area()
        length = direction.length()
        if area <= 0 or length == 0:
            return 0.0
        ray = Ray(origin, direction)
        density = 0.0
        t_min = 0.001
        for _ in range(2):
            rec = self.hit(ray, t_min, math.inf)
            if rec is None:
                break
            distance_squared = rec.t * rec.t * direction.length_squared()
            cosine = abs(direction.dot(rec.normal)) / length
            if cosine > 0:
                density += distance_squared / (cosine * area)
            t_min = rec.t + 1e-4
        return density

    def random(self, origin: Vector3, rng) -> Vector3:
        """
        Direction from `origin` to a point drawn uniformly over the surface.
        """
        face_areas = self._face_areas()
        if sum(face_areas) <= 0:
            raise ValueError("Cannot sample directions towards a box without surface area")
        axis = rng.choices(range(3), weights=face_areas)[0]
        others = [a for a in range(3) if a != axis]
        point = [0.0, 0.0, 0.0]
        point[axis] = self.minimum[axis] if rng.random() < 0.5 else self.maximum[axis]
        for a in others:
            point[a] = rng.uniform(self.minimum[a], self.maximum[a])
        return Vector3(*point) - origin
