# renderer/tone_mapping.py
import numpy as np

# Scale-then-truncate convention for 8-bit channels.
CHANNEL_SCALE = 255.99


def gamma_correct(linear, gamma=2.0):
    """
    Apply gamma correction to a linear radiance image. gamma=2 is a square root.
    """
    return np.power(np.maximum(linear, 0.0), 1.0 / gamma)


def quantize(image, clamp=True):
    """
    Convert [0, 1] channel values to integers by scaling with 255.99 and
    truncating.

    With clamp=True (the default) values are clipped to [0, 1] first and a
    uint8 array is returned. clamp=False keeps unclipped integers, which may
    exceed 255 for bright pixels, as an int64 array.
    """
    image = np.asarray(image, dtype=np.float64)
    if clamp:
        image = np.clip(image, 0.0, 1.0)
        return (image * CHANNEL_SCALE).astype(np.uint8)
    return np.trunc(image * CHANNEL_SCALE).astype(np.int64)


def to_rgb8(linear, gamma=2.0, clamp=True):
    """Gamma correct then quantize a linear RGB image."""
    return quantize(gamma_correct(linear, gamma), clamp=clamp)
