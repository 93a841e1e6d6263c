# materials/diffuse_light.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import BLACK, Material, as_texture
from pathtracer.materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def emitted(self, ray_in: Ray, rec: HitRecord) -> Vector3:
        """
        Return the emitted radiance from the texture.

        Lights are one-sided: only the outward face emits.

        Args:
            ray_in (Ray): The ray that hit the light.
            rec (HitRecord): The hit on the emitting surface.

        Returns:
            Vector3: The emission color, black on the back face.
        """
        if not rec.front_face:
            return BLACK
        return self.get_texture_color(rec)
