# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray

class Camera:
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        """
        Args:
            vfov: vertical field of view in degrees
            aperture: lens diameter; 0 disables depth of field
            focus_dist: distance to the plane in perfect focus
            time0, time1: shutter open/close times for motion blur
        """
        self.position = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.fov = math.radians(vfov)
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # Compute forward, right and up vectors
        self.forward = (self.lookat - self.position).normalize()
        self.right = self.forward.cross(self.vup).normalize()
        self.up = self.right.cross(self.forward)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(self.fov / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * self.focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Ray through normalized screen coordinates (s, t) in [0, 1]^2, with the
        origin jittered over the lens and a time drawn from the open shutter.
        """
        offset = Vector3(0, 0, 0)
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.right * rd.x + self.up * rd.y

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = rng.uniform(self.time0, self.time1) if self.time1 > self.time0 else self.time0
        return Ray(ray_origin, ray_direction, time)

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0
        )
        if p.dot(p) < 1:
            return p
