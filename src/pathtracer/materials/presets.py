# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def aluminum() -> Metal:
        return Metal(Vector3(0.91, 0.92, 0.92), fuzz=0.08)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    BLUE = Vector3(0.1, 0.2, 0.5)
    YELLOW = Vector3(0.8, 0.8, 0.0)
    BROWN = Vector3(0.4, 0.2, 0.1)

    WHITE = Vector3(0.73, 0.73, 0.73)
    BLACK = Vector3(0.0, 0.0, 0.0)

    # Background colors
    SKY = Vector3(0.70, 0.80, 1.00)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(odd: Vector3 = None, even: Vector3 = None,
                     frequency: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if odd is None:
            odd = Vector3(0.2, 0.3, 0.1)
        if even is None:
            even = Vector3(0.9, 0.9, 0.9)
        return CheckerTexture(odd, even, frequency)
