# camera/camera.py
import math
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.core.utils import random_in_unit_disk


class Camera:
    """
    Thin-lens camera. Builds an orthonormal basis from look-from / look-at /
    up and a focal-plane rectangle from the vertical field of view (degrees),
    aspect ratio and focus distance. Rays carry a time drawn uniformly from
    the shutter interval [time0, time1].
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect: float, aperture: float = 0.0, focus_dist: float = 1.0,
                 time0: float = 0.0, time1: float = 0.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect = aspect
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.time0 = time0
        self.time1 = time1
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and focal-plane rectangle."""
        theta = math.radians(self.vfov)
        half_height = math.tan(theta / 2)
        half_width = self.aspect * half_height

        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.lookfrom
        self.lower_left_corner = (self.origin -
                                  self.u * (half_width * self.focus_dist) -
                                  self.v * (half_height * self.focus_dist) -
                                  self.w * self.focus_dist)
        self.horizontal = self.u * (2 * half_width * self.focus_dist)
        self.vertical = self.v * (2 * half_height * self.focus_dist)

    @classmethod
    def default(cls, aspect: float = 2.0) -> "Camera":
        """
        Pinhole camera at the origin looking down -z with a 90 degree
        vertical field of view. For aspect 2 the focal plane spans
        (-2, -1, -1) to (2, 1, -1).
        """
        return cls(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), Vector3(0.0, 1.0, 0.0),
                   vfov=90.0, aspect=aspect)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """
        Generates the ray through image-plane coordinates (s, t) in [0, 1],
        with a lens offset for depth of field. Pinhole cameras with a zero
        shutter interval need no random source.
        """
        origin = self.origin
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        time = self.time0
        if self.time1 != self.time0:
            time = self.time0 + rng.random() * (self.time1 - self.time0)

        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     origin)
        return Ray(origin, direction, time)
