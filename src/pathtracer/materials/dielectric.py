# src/materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, reflectance
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord

class Dielectric(Material):
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        # Calculate cosine using the angle between incoming ray and normal
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection, otherwise Schlick decides stochastically
        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return ScatterRecord.specular(Ray(rec.p, direction, ray_in.time), attenuation)
