# materials/isotropic.py
import math
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.pdf import UniformSpherePDF
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord, as_texture
from pathtracer.materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in all directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        return ScatterRecord.sampled(self.get_texture_color(rec), UniformSpherePDF())

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 1.0 / (4.0 * math.pi)
