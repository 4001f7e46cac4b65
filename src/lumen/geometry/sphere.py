# geometry/sphere.py
import math
from typing import Optional, Tuple
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.core.aabb import AABB
from lumen.geometry.hittable import Hittable, HitRecord


def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point p on the unit sphere: u from the azimuth,
    v from the polar angle, both in [0, 1].
    """
    phi = math.atan2(p.z, p.x)
    theta = math.asin(max(-1.0, min(1.0, p.y)))
    u = 1.0 - (phi + math.pi) / (2.0 * math.pi)
    v = (theta + math.pi / 2.0) / math.pi
    return u, v


def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant <= 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Prefer the nearer root, fall back to the farther one.
    root = (-half_b - sqrt_disc) / a
    if not t_min < root < t_max:
        root = (-half_b + sqrt_disc) / a
        if not t_min < root < t_max:
            return None

    p = ray.at(root)
    normal = (p - center) / radius
    u, v = sphere_uv(normal)
    return HitRecord(t=root, p=p, normal=normal, u=u, v=v, material=material)


def _sphere_box(center: Vector3, radius: float) -> AABB:
    # Negative radii (hollow glass) still need a box with minimum <= maximum.
    r = abs(radius)
    offset = Vector3(r, r, r)
    return AABB(center - offset, center + offset)


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB:
        # The bounding box of a sphere is center ± radius
        return _sphere_box(self.center, self.radius)


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Used for motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, t0: float, t1: float) -> AABB:
        # Union of the endpoint boxes, valid for the whole shutter interval.
        return AABB.surrounding_box(_sphere_box(self.center0, self.radius),
                                    _sphere_box(self.center1, self.radius))
