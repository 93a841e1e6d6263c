# materials/material.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.pdf import PDF
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, SolidTexture

BLACK = Vector3(0.0, 0.0, 0.0)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value

class ScatterRecord:
    """
    Outcome of a scattering event. Either a specular ray that the integrator
    follows deterministically, or a PDF to importance-sample the next
    direction from.
    """
    __slots__ = ("attenuation", "specular_ray", "pdf")

    def __init__(self, attenuation: Vector3, specular_ray: Optional[Ray] = None,
                 pdf: Optional[PDF] = None):
        self.attenuation = attenuation
        self.specular_ray = specular_ray
        self.pdf = pdf

    @classmethod
    def specular(cls, ray: Ray, attenuation: Vector3) -> "ScatterRecord":
        return cls(attenuation, specular_ray=ray)

    @classmethod
    def sampled(cls, attenuation: Vector3, pdf: PDF) -> "ScatterRecord":
        return cls(attenuation, pdf=pdf)

    @property
    def is_specular(self) -> bool:
        return self.specular_ray is not None

class Material:
    """
    Abstract material class. Subclasses override scatter() and, when they
    importance-sample, scattering_pdf(); emitters override emitted().
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Returns a ScatterRecord, or None if the ray is absorbed.
        """
        return None

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        """
        Density of the material's own scattering distribution in the
        direction of `scattered`.
        """
        return 0.0

    def emitted(self, ray_in: Ray, rec: HitRecord) -> Vector3:
        return BLACK

    def get_texture_color(self, rec: HitRecord) -> Vector3:
        """
        Color of the material's texture at the hit point.
        """
        return self.texture.value(rec.uv, rec.p, rec.normal)
