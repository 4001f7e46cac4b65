from lumen.renderer.raytracer import (
    MAX_DEPTH,
    T_MIN,
    Renderer,
    black_background,
    color,
    sky_background,
)
from lumen.renderer.tone_mapping import gamma_correct, quantize, to_rgb8
from lumen.renderer.output import write_image, write_ppm

__all__ = [
    "MAX_DEPTH",
    "T_MIN",
    "Renderer",
    "black_background",
    "color",
    "sky_background",
    "gamma_correct",
    "quantize",
    "to_rgb8",
    "write_image",
    "write_ppm",
]
