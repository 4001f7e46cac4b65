# materials/diffuse_light.py
from typing import Optional, Union
from lumen.core.ray import Ray
from lumen.core.vector import Vector3
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material, ScatterRecord
from lumen.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Area light. Emits its texture's value on both sides of the surface and
    terminates every path that reaches it.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.emit.value(u, v, p)
