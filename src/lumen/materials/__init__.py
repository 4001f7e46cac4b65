from lumen.materials.material import Material, ScatterRecord
from lumen.materials.lambertian import Lambertian
from lumen.materials.metal import Metal
from lumen.materials.dielectric import Dielectric
from lumen.materials.diffuse_light import DiffuseLight
from lumen.materials.textures import (
    Texture,
    ConstantTexture,
    CheckerTexture,
    NoiseTexture,
    ImageTexture,
    as_texture,
)

__all__ = [
    "Material",
    "ScatterRecord",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Texture",
    "ConstantTexture",
    "CheckerTexture",
    "NoiseTexture",
    "ImageTexture",
    "as_texture",
]
