# materials/metal.py
from typing import Optional, Union
from lumen.core.ray import Ray
from lumen.core.vector import Vector3
from lumen.core.utils import reflect, random_in_unit_sphere
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material, ScatterRecord
from lumen.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.albedo = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterRecord(self.albedo.value(rec.u, rec.v, rec.p), scattered)

        return None  # Absorb the ray if it does not scatter forward
