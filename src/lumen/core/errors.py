# core/errors.py


class LumenError(Exception):
    """Base class for errors raised while setting up or running a render."""


class BoundingBoxError(LumenError):
    """
    A surface handed to BVH construction could not produce a bounding box.
    The scene is malformed; setup must stop.
    """


class TextureError(LumenError, ValueError):
    """An image texture could not be decoded."""


class ConfigError(LumenError, ValueError):
    """Render settings are missing, malformed or out of range."""
