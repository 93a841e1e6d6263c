# core/pdf.py
import math
from typing import Sequence
from pathtracer.core.vector import Vector3
from pathtracer.core.onb import ONB
from pathtracer.core.utils import random_cosine_direction, random_unit_vector

class PDF:
    """
    A direction distribution used for importance sampling: `generate` draws a
    direction and `value` returns its density (per unit solid angle).
    PDF instances are short lived, built for a single scattering event.
    """
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")


class CosinePDF(PDF):
    """Cosine-weighted hemisphere around a surface normal."""
    __slots__ = ("uvw",)

    def __init__(self, normal: Vector3):
        self.uvw = ONB.from_w(normal)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return cosine / math.pi if cosine > 0 else 0.0

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))


class UniformSpherePDF(PDF):
    """Every direction equally likely; the phase function of isotropic media."""
    __slots__ = ()

    def value(self, direction: Vector3) -> float:
        return 1.0 / (4.0 * math.pi)

    def generate(self, rng) -> Vector3:
        return random_unit_vector(rng)


class HittablePDF(PDF):
    """Directions from `origin` towards a target hittable (usually the lights)."""
    __slots__ = ("hittable", "origin")

    def __init__(self, hittable, origin: Vector3):
        self.hittable = hittable
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.hittable.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.hittable.random(self.origin, rng)


class MixturePDF(PDF):
    """
    Uniform mixture: sampling picks one component at random, the density is
    the plain average of the component densities.
    """
    __slots__ = ("pdfs",)

    def __init__(self, pdfs: Sequence[PDF]):
        if not pdfs:
            raise ValueError("MixturePDF needs at least one component")
        self.pdfs = list(pdfs)

    def value(self, direction: Vector3) -> float:
        weight = 1.0 / len(self.pdfs)
        return sum(weight * pdf.value(direction) for pdf in self.pdfs)

    def generate(self, rng) -> Vector3:
        return rng.choice(self.pdfs).generate(rng)
