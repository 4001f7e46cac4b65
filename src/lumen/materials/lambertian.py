# materials/lambertian.py
from typing import Union
from lumen.core.ray import Ray
from lumen.core.vector import Vector3
from lumen.core.utils import random_in_unit_sphere
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material, ScatterRecord
from lumen.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        # Aim at a random point in the unit sphere tangent to the hit point.
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        scattered = Ray(rec.p, target - rec.p, ray_in.time)
        attenuation = self.albedo.value(rec.u, rec.v, rec.p)
        return ScatterRecord(attenuation, scattered)
