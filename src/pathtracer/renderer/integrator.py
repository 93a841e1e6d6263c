# renderer/integrator.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.pdf import HittablePDF, MixturePDF
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList

# Minimum hit distance; keeps bounced rays from re-hitting their own surface.
SHADOW_ACNE_EPSILON = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)

def ray_color(ray: Ray, background: Vector3, world: Hittable,
              lights: Optional[HittableList], depth: int, rng) -> Vector3:
    """
    Radiance arriving along `ray`, estimated by recursive path tracing.

    Specular scatters are followed directly. Diffuse scatters draw the next
    direction from the material's PDF, mixed 50/50 with a PDF aimed at
    `lights` when there are any, and weight the result by
    scattering_pdf / pdf. `depth` is the only termination bound.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, SHADOW_ACNE_EPSILON, math.inf, rng)
    if rec is None:
        return background

    emitted = rec.material.emitted(ray, rec)
    srec = rec.material.scatter(ray, rec, rng)
    if srec is None:
        return emitted

    if srec.is_specular:
        return emitted + srec.attenuation * ray_color(
            srec.specular_ray, background, world, lights, depth - 1, rng)

    pdf = srec.pdf
    if lights is not None and len(lights) > 0:
        pdf = MixturePDF([HittablePDF(lights, rec.p), srec.pdf])

    scattered = Ray(rec.p, pdf.generate(rng), ray.time)
    pdf_value = pdf.value(scattered.direction)
    # A zero (or non-finite) density would make the estimate infinite or NaN.
    if not (pdf_value > 0.0 and math.isfinite(pdf_value)):
        return emitted

    scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
    if scattering_pdf <= 0.0:
        return emitted

    incoming = ray_color(scattered, background, world, lights, depth - 1, rng)
    return emitted + srec.attenuation * incoming * (scattering_pdf / pdf_value)
