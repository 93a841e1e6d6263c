# core/utils.py
import math
from pathtracer.core.vector import Vector3

# Every sampling helper takes an explicit `rng` (a random.Random instance)
# so render workers never share generator state.

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        if p.length_squared() > 1e-12:
            return p.normalize()

def random_cosine_direction(rng) -> Vector3:
    """
    Cosine-weighted direction on the +z hemisphere.
    """
    r1 = rng.random()
    r2 = rng.random()
    phi = 2 * math.pi * r1
    sqrt_r2 = math.sqrt(r2)
    return Vector3(math.cos(phi) * sqrt_r2,
                   math.sin(phi) * sqrt_r2,
                   math.sqrt(1 - r2))

def random_to_sphere(rng, radius: float, distance_squared: float) -> Vector3:
    """
    Direction (around +z) uniformly distributed inside the cone subtended by
    a sphere of `radius` seen from `sqrt(distance_squared)` away.
    """
    r1 = rng.random()
    r2 = rng.random()
    rr = radius * radius
    # From inside the sphere the "cone" covers every direction.
    cos_theta_max = -1.0 if distance_squared <= rr else math.sqrt(1 - rr / distance_squared)
    z = 1 + r2 * (cos_theta_max - 1)
    phi = 2 * math.pi * r1
    sin_theta = math.sqrt(max(0.0, 1 - z * z))
    return Vector3(math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, ref_idx: float) -> float:
    # Schlick's approximation for reflectance.
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

def safe_inverse(d: float) -> float:
    """
    1/d with IEEE-754 semantics: a zero component maps to a signed infinity
    instead of raising ZeroDivisionError.
    """
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d
