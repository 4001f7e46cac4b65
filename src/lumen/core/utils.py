# core/utils.py
import logging
import math
from typing import Optional

from lumen.core.vector import Vector3

logger = logging.getLogger(__name__)

# Expected attempts are below two; the cap only guards against a broken
# random source.
MAX_REJECTION_ATTEMPTS = 10_000


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere, by rejection sampling the
    [-1, 1]^3 cube.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p
    logger.warning("random_in_unit_sphere gave up after %d attempts", MAX_REJECTION_ATTEMPTS)
    return Vector3(0.0, 0.0, 0.0)


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk on the z = 0 plane.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    0.0)
        if p.dot(p) < 1.0:
            return p
    logger.warning("random_in_unit_disk gave up after %d attempts", MAX_REJECTION_ATTEMPTS)
    return Vector3(0.0, 0.0, 0.0)


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n using Snell's law.

    Returns None when the discriminant 1 - eta^2 (1 - cos^2) is not
    positive, i.e. on total internal reflection.
    """
    uv = v.normalize()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """
    Schlick's polynomial approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
