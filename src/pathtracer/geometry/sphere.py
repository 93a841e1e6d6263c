import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.aabb import AABB
from pathtracer.core.onb import ONB
from pathtracer.core.utils import random_to_sphere, random_unit_vector
from pathtracer.geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> UV:
    """
    Spherical coordinates of a point on the unit sphere:
    u is the angle around the Y axis (from X=-1), v the angle from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

def _solve_sphere(ray: Ray, center: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    """Nearest root of |O + tD - C|^2 = r^2 inside [t_min, t_max], or None."""
    a = ray.direction.length_squared()
    if a == 0 or radius == 0:
        return None
    oc = ray.origin - center
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root

def _sphere_record(ray: Ray, root: float, center: Vector3, radius: float, material) -> HitRecord:
    rec = HitRecord(t=root, material=material)
    rec.p = ray.at(root)
    # Dividing by the signed radius turns a negative sphere inside out.
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.uv = get_sphere_uv(outward_normal)
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    A negative radius keeps the geometry but flips the normals inward,
    which is how hollow glass shells are modelled.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        root = _solve_sphere(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, self.center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # The bounding box of a sphere is center +- radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if self.hit(Ray(origin, direction), 0.001, math.inf) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        rr = self.radius * self.radius
        # From inside, every direction reaches the surface: the cone is the whole sphere.
        cos_theta_max = -1.0 if distance_squared <= rr else math.sqrt(1 - rr / distance_squared)
        solid_angle = 2 * math.pi * (1 - cos_theta_max)
        if solid_angle <= 0:
            return 0.0
        return 1.0 / solid_angle

    def is_samplable(self) -> bool:
        return self.radius != 0

    def random(self, origin: Vector3, rng) -> Vector3:
        direction = self.center - origin
        distance_squared = direction.length_squared()
        if distance_squared <= self.radius * self.radius:
            return random_unit_vector(rng)
        uvw = ONB.from_w(direction)
        return uvw.local(random_to_sphere(rng, self.radius, distance_squared))

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from `center0` at `time0` to
    `center1` at `time1`; the ray's time picks the position (motion blur).
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * (
            (time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _solve_sphere(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, center, self.radius, self.material)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))
