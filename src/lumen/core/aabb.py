# core/aabb.py
import math
from lumen.core.vector import Vector3


def _inverse(d: float) -> float:
    # Python raises on 1/0; IEEE 754 gives a signed infinity, which the slab
    # test handles naturally.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: intersect the ray's interval with each axis slab.
        for a in range(3):
            inv_d = _inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * inv_d
            t1 = (self.maximum[a] - ray.origin[a]) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, point: Vector3) -> bool:
        return all(self.minimum[a] <= point[a] <= self.maximum[a] for a in range(3))

    def corners(self) -> list:
        lo, hi = self.minimum, self.maximum
        return [Vector3(x, y, z)
                for x in (lo.x, hi.x)
                for y in (lo.y, hi.y)
                for z in (lo.z, hi.z)]

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
