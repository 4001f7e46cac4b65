# geometry/hittable.py
from typing import Optional
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.core.aabb import AABB


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "u", "v", "material")

    def __init__(self, t: float = 0.0, p: Vector3 = None, normal: Vector3 = None,
                 u: float = 0.0, v: float = 0.0, material=None):
        self.t = t                # Ray parameter at intersection
        self.p = p                # Intersection point
        self.normal = normal      # Unit shading normal, oriented by the primitive
        self.u = u                # Texture coordinates
        self.v = v
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        """
        Conservative box enclosing the object over the shutter interval
        [t0, t1], or None if the object cannot be bounded.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")


class FlipNormals(Hittable):
    """
    Decorator that inverts the normal reported by the wrapped object.
    """
    def __init__(self, inner: Hittable):
        self.inner = inner

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.inner.hit(ray, t_min, t_max)
        if rec is not None:
            rec.normal = -rec.normal
        return rec

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        return self.inner.bounding_box(t0, t1)
