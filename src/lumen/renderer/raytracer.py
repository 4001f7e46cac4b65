# renderer/raytracer.py
"""
Monte Carlo radiance estimator and the per-pixel sampling loop.

Each scanline is rendered with its own random stream derived from the
render seed and the row index, so an image is identical whether rows are
rendered in order in one process or spread across a process pool. The
world, camera and materials are only ever read during rendering.
"""
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Optional

import numpy as np

from lumen.core import perlin
from lumen.core.ray import Ray
from lumen.core.vector import Vector3, BLACK, WHITE

logger = logging.getLogger(__name__)

MAX_DEPTH = 50
# Minimum hit distance, keeps scattered rays off the surface they left.
T_MIN = 0.001

SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_background(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def black_background(ray: Ray) -> Vector3:
    """No ambient light, for enclosed scenes lit by emitters."""
    return BLACK


def color(ray: Ray, world, depth: int, rng,
          background: Callable[[Ray], Vector3] = sky_background,
          max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Estimates the radiance carried back along `ray`.

    Paths end on a miss (background), on absorption, or once `depth`
    reaches `max_depth`; the last two contribute only local emission.
    """
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    if depth < max_depth:
        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is not None:
            return emitted + scatter.attenuation * color(
                scatter.scattered, world, depth + 1, rng, background, max_depth)
    return emitted


def row_seed(seed: int, row: int) -> int:
    return seed * 1_000_003 + row


class Renderer:
    """
    Renders a world through a camera into a linear RGB image.

    The result is a float array of shape (height, width, 3); row 0 is the
    top of the image. Values are the mean of `samples` radiance estimates
    and are not clamped or gamma corrected.
    """
    def __init__(self, width: int, height: int, samples: int = 100,
                 max_depth: int = MAX_DEPTH,
                 background: Callable[[Ray], Vector3] = sky_background,
                 seed: int = 0, workers: int = 1, jitter: bool = True,
                 progress_interval: int = 0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples <= 0:
            raise ValueError(f"Samples per pixel must be positive, got {samples}")
        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.background = background
        self.seed = seed
        self.workers = max(1, workers)
        self.jitter = jitter
        self.progress_interval = progress_interval

    def render_row(self, world, camera, row: int) -> np.ndarray:
        """Renders image row `row` (0 = top) into a (width, 3) array."""
        rng = random.Random(row_seed(self.seed, row))
        j = self.height - 1 - row
        out = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            col = Vector3(0.0, 0.0, 0.0)
            for _ in range(self.samples):
                if self.jitter:
                    s = (i + rng.random()) / self.width
                    t = (j + rng.random()) / self.height
                else:
                    s = (i + 0.5) / self.width
                    t = (j + 0.5) / self.height
                ray = camera.get_ray(s, t, rng)
                col = col + color(ray, world, 0, rng, self.background, self.max_depth)
            col = col / self.samples
            out[i] = (col.x, col.y, col.z)
        return out

    def render(self, world, camera) -> np.ndarray:
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        start = time.time()
        logger.info("Rendering %dx%d, %d spp, max depth %d, %d worker(s)",
                    self.width, self.height, self.samples, self.max_depth, self.workers)

        if self.workers == 1:
            for row in range(self.height):
                image[row] = self.render_row(world, camera, row)
                self._report(row + 1)
        else:
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=(self, world, camera, perlin.current_seed())) as pool:
                for done, (row, pixels) in enumerate(
                        pool.map(_render_row_in_worker, range(self.height)), start=1):
                    image[row] = pixels
                    self._report(done)

        logger.info("Render finished in %.2fs", time.time() - start)
        return image

    def _report(self, rows_done: int):
        if self.progress_interval and rows_done % self.progress_interval == 0:
            logger.info("  %d/%d rows", rows_done, self.height)


# Per-process state for pooled rendering, set once by the pool initializer.
_worker_state: Optional[tuple] = None


def _init_worker(renderer: Renderer, world, camera, perlin_seed: int):
    global _worker_state
    if perlin.current_seed() != perlin_seed:
        perlin.seed_tables(perlin_seed)
    _worker_state = (renderer, world, camera)


def _render_row_in_worker(row: int):
    renderer, world, camera = _worker_state
    return row, renderer.render_row(world, camera, row)
