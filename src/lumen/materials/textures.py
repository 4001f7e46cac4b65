# materials/textures.py
import math
from typing import Union

import numpy as np

from lumen.core import perlin
from lumen.core.vector import Vector3


class Texture:
    """Base class for all textures: an immutable function of (u, v, p)."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class ConstantTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a ConstantTexture; passes textures through."""
    if isinstance(albedo, Vector3):
        return ConstantTexture(albedo)
    return albedo


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(fx) sin(fy) sin(fz) at the hit
    point picks between the odd and even textures.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 frequency: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.frequency = frequency

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        f = self.frequency
        sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """Marble-like grey pattern driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, depth: int = 7):
        self.scale = scale
        self.depth = depth

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        t = perlin.turb(p * self.scale, self.depth)
        grey = 0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * t))
        return Vector3(grey, grey, grey)


class ImageTexture(Texture):
    """
    A texture backed by an RGB image, given as a float array of shape
    (height, width, 3) with values in [0, 1]. Row 0 is the top of the image.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Image texture data must have shape (h, w, 3), got {data.shape}")
        self.data = data
        self.height, self.width = data.shape[:2]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Clamp to the image, v = 0 at the bottom row.
        x = min(max(int(u * self.width), 0), self.width - 1)
        y = min(max(int((1.0 - v) * self.height), 0), self.height - 1)
        r, g, b = self.data[y, x]
        return Vector3(float(r), float(g), float(b))
