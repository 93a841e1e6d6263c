# materials/lambertian.py

import math
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.pdf import CosinePDF
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, ScatterRecord, as_texture
from pathtracer.materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        """
        Diffuse reflection: the next direction is importance-sampled from a
        cosine-weighted hemisphere around the normal.
        """
        return ScatterRecord.sampled(self.get_texture_color(rec), CosinePDF(rec.normal))

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        # Must match CosinePDF.value, or mixing with light sampling is biased.
        cosine = rec.normal.dot(scattered.direction.normalize())
        return cosine / math.pi if cosine > 0 else 0.0
