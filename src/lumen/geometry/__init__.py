from lumen.geometry.hittable import HitRecord, Hittable, FlipNormals
from lumen.geometry.sphere import Sphere, MovingSphere, sphere_uv
from lumen.geometry.rect import XYRect, XZRect, YZRect
from lumen.geometry.bvh import BVHNode
from lumen.geometry.world import HittableList
from lumen.geometry.box import Box

__all__ = [
    "HitRecord",
    "Hittable",
    "FlipNormals",
    "Sphere",
    "MovingSphere",
    "sphere_uv",
    "XYRect",
    "XZRect",
    "YZRect",
    "BVHNode",
    "HittableList",
    "Box",
]
