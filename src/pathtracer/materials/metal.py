# materials/metal.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord, as_texture
from pathtracer.materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) <= 0:
            return None  # Absorb rays fuzzed below the surface

        scattered = Ray(rec.p, direction, ray_in.time)
        return ScatterRecord.specular(scattered, self.get_texture_color(rec))
