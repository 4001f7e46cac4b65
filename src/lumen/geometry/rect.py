# geometry/rect.py
from typing import Optional
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.core.aabb import AABB
from lumen.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the flat axis so the box has nonzero volume.
RECT_PADDING = 0.0001


class _AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane `axis = k`, spanning [a0, a1] x [b0, b1] in
    the two remaining axes. Subclasses fix which axes those are.
    """
    axis = 2
    a_axis = 0
    b_axis = 1

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.axis] = 1.0
        return Vector3(*n)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        return HitRecord(
            t=t,
            p=ray.at(t),
            normal=self._normal(),
            u=(a - self.a0) / (self.a1 - self.a0),
            v=(b - self.b0) / (self.b1 - self.b0),
            material=self.material,
        )

    def bounding_box(self, t0: float, t1: float) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        lo[self.axis], hi[self.axis] = self.k - RECT_PADDING, self.k + RECT_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))


class XYRect(_AxisAlignedRect):
    """Rectangle in the plane z = k, normal +z."""
    axis, a_axis, b_axis = 2, 0, 1

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(_AxisAlignedRect):
    """Rectangle in the plane y = k, normal +y."""
    axis, a_axis, b_axis = 1, 0, 2

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(_AxisAlignedRect):
    """Rectangle in the plane x = k, normal +x."""
    axis, a_axis, b_axis = 0, 1, 2

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
