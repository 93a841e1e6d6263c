# materials/textures.py
import math
from typing import Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3
from pathtracer.core.uv import UV

class Texture:
    """Base class for all textures: a pure function of the surface point."""
    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        """Sample the texture at given UV coordinates, point and normal."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern. The sign of sin(f*x) * sin(f*y) * sin(f*z)
    picks the odd or the even sub-texture, which may be checkers themselves.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 frequency: float = 10.0):
        self.odd = SolidTexture(odd) if isinstance(odd, Vector3) else odd
        self.even = SolidTexture(even) if isinstance(even, Vector3) else even
        self.frequency = frequency

    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        f = self.frequency
        sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.value(uv, p, normal)
        return self.even.value(uv, p, normal)

class ImageTexture(Texture):
    """A texture backed by an RGB bitmap stored as a float array in [0, 1]."""
    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image texture needs a non-empty HxWx3 array, got shape {data.shape}")
        self.data = data[:, :, :3]
        self.height = data.shape[0]
        self.width = data.shape[1]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            # Convert to numpy array for faster access
            data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
        return cls(data)

    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        # Handle texture wrapping
        wrapped = uv.wrapped()
        u = wrapped.u
        v = 1.0 - wrapped.v  # Image rows run top to bottom

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        # Sample the color
        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

class NormalTexture(Texture):
    """Visualizes the surface normal, mapped from [-1, 1] to [0, 1]."""
    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        return (normal + Vector3(1.0, 1.0, 1.0)) * 0.5

class UVTexture(Texture):
    """Visualizes the surface coordinates as red/green."""
    def value(self, uv: UV, p: Vector3, normal: Vector3) -> Vector3:
        return Vector3(uv.u, uv.v, 0.0)
