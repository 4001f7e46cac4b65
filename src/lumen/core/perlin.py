# core/perlin.py
"""
Gradient (Perlin) noise and turbulence.

The gradient vectors and permutation tables are process-wide and read-only.
They are built on first use from a seeded generator, so every process
(including render worker processes) sees identical noise for the same seed.
The per-sample kernels are compiled with numba.
"""
import logging
import math
import threading

import numpy as np
from numba import njit

from lumen.core.vector import Vector3

logger = logging.getLogger(__name__)

POINT_COUNT = 256
DEFAULT_SEED = 1984

_lock = threading.Lock()
_tables = None
_seed = DEFAULT_SEED


class _PerlinTables:
    __slots__ = ("seed", "ranvec", "perm_x", "perm_y", "perm_z")

    def __init__(self, seed: int):
        rng = np.random.default_rng(seed)
        ranvec = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        ranvec /= np.linalg.norm(ranvec, axis=1, keepdims=True)
        self.seed = seed
        self.ranvec = ranvec
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)
        for table in (self.ranvec, self.perm_x, self.perm_y, self.perm_z):
            table.setflags(write=False)


def _get_tables() -> _PerlinTables:
    global _tables
    tables = _tables
    if tables is None:
        with _lock:
            if _tables is None:
                logger.debug("Building Perlin tables with seed %d", _seed)
                _tables = _PerlinTables(_seed)
            tables = _tables
    return tables


def seed_tables(seed: int) -> None:
    """
    Rebuild the noise tables from the given seed. Must not be called while a
    render is running.
    """
    global _tables, _seed
    with _lock:
        _seed = seed
        _tables = _PerlinTables(seed)


def current_seed() -> int:
    return _seed


@njit
def _noise_kernel(x, y, z, ranvec, perm_x, perm_y, perm_z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)
    # Hermite smoothing
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)
    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                dot = ((u - di) * ranvec[idx, 0] +
                       (v - dj) * ranvec[idx, 1] +
                       (w - dk) * ranvec[idx, 2])
                accum += ((di * uu + (1 - di) * (1.0 - uu)) *
                          (dj * vv + (1 - dj) * (1.0 - vv)) *
                          (dk * ww + (1 - dk) * (1.0 - ww)) *
                          dot)
    return accum


@njit
def _turb_kernel(x, y, z, depth, ranvec, perm_x, perm_y, perm_z):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise_kernel(x, y, z, ranvec, perm_x, perm_y, perm_z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


def noise(p: Vector3) -> float:
    """
    Smoothed gradient noise at p, roughly in [-1, 1].
    """
    t = _get_tables()
    return _noise_kernel(float(p.x), float(p.y), float(p.z),
                         t.ranvec, t.perm_x, t.perm_y, t.perm_z)


def turb(p: Vector3, depth: int = 7) -> float:
    """
    Turbulence: absolute value of a sum of `depth` noise octaves, each at
    twice the frequency and half the weight of the previous one.
    """
    t = _get_tables()
    return _turb_kernel(float(p.x), float(p.y), float(p.z), depth,
                        t.ranvec, t.perm_x, t.perm_y, t.perm_z)
