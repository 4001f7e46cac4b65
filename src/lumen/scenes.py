# scenes.py
"""
Demo scenes. Each builder assembles the primitives and materials, and
returns them with a matching camera and background.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict

from lumen.camera.camera import Camera
from lumen.core.vector import Vector3
from lumen.geometry import (
    Box,
    FlipNormals,
    Hittable,
    HittableList,
    MovingSphere,
    Sphere,
    XYRect,
    XZRect,
    YZRect,
)
from lumen.core.errors import ConfigError
from lumen.materials import Lambertian
from lumen.materials.presets import (
    ColorPresets,
    DielectricPresets,
    LightPresets,
    MetalPresets,
    TexturePresets,
)
from lumen.renderer.raytracer import black_background, sky_background

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    objects: HittableList
    camera: Camera
    background: Callable
    time0: float = 0.0
    time1: float = 0.0

    def world(self, use_bvh: bool = True, rng=None) -> Hittable:
        """The object to render: a BVH root, or the flat list itself."""
        if not use_bvh:
            return self.objects
        return self.objects.build_bvh(self.time0, self.time1, rng)


def two_spheres(aspect: float, rng) -> Scene:
    """A small sphere resting on a huge ground sphere, under a sky."""
    objects = HittableList([
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(ColorPresets.DUSTY_RED)),
        Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(ColorPresets.GROUND)),
    ])
    return Scene(objects, Camera.default(aspect), sky_background)


def random_spheres(aspect: float, rng) -> Scene:
    """Many small random spheres, some in motion, around three large ones."""
    objects = HittableList()
    objects.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = ColorPresets.random_matte(rng)
                objects.add(MovingSphere(center, center + Vector3(0, 0.5 * rng.random(), 0),
                                         0.0, 1.0, 0.2, material))
            elif choose_mat < 0.95:
                objects.add(Sphere(center, 0.2, MetalPresets.random_pale(rng)))
            else:
                objects.add(Sphere(center, 0.2, DielectricPresets.glass()))

    objects.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    objects.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    vfov=20.0, aspect=aspect, aperture=0.1, focus_dist=10.0,
                    time0=0.0, time1=1.0)
    return Scene(objects, camera, sky_background, 0.0, 1.0)


def two_perlin_spheres(aspect: float, rng) -> Scene:
    """Two marble-textured spheres."""
    marble = Lambertian(TexturePresets.marble(4.0))
    objects = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    vfov=20.0, aspect=aspect, focus_dist=10.0)
    return Scene(objects, camera, sky_background)


def simple_light(aspect: float, rng) -> Scene:
    """Marble spheres lit only by a light sphere and a light panel."""
    marble = Lambertian(TexturePresets.marble(4.0))
    light = LightPresets.panel(4.0)
    objects = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
        Sphere(Vector3(0, 7, 0), 2, light),
        XYRect(3, 5, 1, 3, -2, light),
    ])
    camera = Camera(Vector3(13, 2, 3), Vector3(0, 2, 0), Vector3(0, 1, 0),
                    vfov=20.0, aspect=aspect, focus_dist=10.0)
    return Scene(objects, camera, black_background)


def _cornell_walls() -> HittableList:
    red = Lambertian(ColorPresets.RED)
    white = Lambertian(ColorPresets.WHITE)
    green = Lambertian(ColorPresets.GREEN)
    light = LightPresets.ceiling(15.0)
    return HittableList([
        FlipNormals(YZRect(0, 555, 0, 555, 555, green)),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(213, 343, 227, 332, 554, light),
        FlipNormals(XZRect(0, 555, 0, 555, 555, white)),
        XZRect(0, 555, 0, 555, 0, white),
        FlipNormals(XYRect(0, 555, 0, 555, 555, white)),
    ])


def _cornell_camera(aspect: float) -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0),
                  vfov=40.0, aspect=aspect, focus_dist=10.0)


def cornell_box(aspect: float, rng) -> Scene:
    """The empty Cornell box: closed, lit by one ceiling panel."""
    return Scene(_cornell_walls(), _cornell_camera(aspect), black_background)


def cornell_box_with_boxes(aspect: float, rng) -> Scene:
    """The Cornell box with two white blocks."""
    objects = _cornell_walls()
    white = Lambertian(ColorPresets.WHITE)
    objects.add(Box(Vector3(130, 0, 65), Vector3(295, 165, 230), white))
    objects.add(Box(Vector3(265, 0, 295), Vector3(430, 330, 460), white))
    return Scene(objects, _cornell_camera(aspect), black_background)


SCENES: Dict[str, Callable[[float, random.Random], Scene]] = {
    "two_spheres": two_spheres,
    "random_spheres": random_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_box_with_boxes": cornell_box_with_boxes,
}


def build_scene(name: str, aspect: float, rng=None) -> Scene:
    if name not in SCENES:
        raise ConfigError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}")
    if rng is None:
        rng = random.Random(0)
    scene = SCENES[name](aspect, rng)
    logger.info("Built scene %s with %d objects", name, len(scene.objects))
    return scene
