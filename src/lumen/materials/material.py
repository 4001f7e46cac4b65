# materials/material.py
from typing import NamedTuple, Optional
from lumen.core.ray import Ray
from lumen.core.vector import Vector3, BLACK
from lumen.geometry.hittable import HitRecord


class ScatterRecord(NamedTuple):
    attenuation: Vector3
    scattered: Ray


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable once built and may be shared by many objects.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Computes the attenuation and the scattered ray.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance emitted at the hit point; black for non-emissive materials.
        """
        return BLACK
