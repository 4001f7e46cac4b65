# geometry/box.py
from typing import Optional
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.core.aabb import AABB
from lumen.geometry.hittable import Hittable, HitRecord, FlipNormals
from lumen.geometry.rect import XYRect, XZRect, YZRect
from lumen.geometry.world import HittableList


class Box(Hittable):
    """
    Axis-aligned box between corners p0 and p1 built from six rectangles.
    The faces on the minimum side are flipped so every normal points out.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.pmin = p0
        self.pmax = p1
        self.faces = HittableList([
            XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
            FlipNormals(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material)),
            XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
            FlipNormals(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material)),
            YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
            FlipNormals(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material)),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.faces.hit(ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB:
        return AABB(self.pmin, self.pmax)
