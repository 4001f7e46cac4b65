from lumen.camera.camera import Camera

__all__ = ["Camera"]
