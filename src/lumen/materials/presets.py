# materials/presets.py
from lumen.core.vector import Vector3
from lumen.materials.metal import Metal
from lumen.materials.lambertian import Lambertian
from lumen.materials.dielectric import Dielectric
from lumen.materials.diffuse_light import DiffuseLight
from lumen.materials.textures import CheckerTexture, NoiseTexture


class ColorPresets:
    """Albedos used by the demo scenes."""

    # Cornell box walls
    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)

    GROUND = Vector3(0.8, 0.8, 0.0)
    DUSTY_RED = Vector3(0.8, 0.3, 0.3)
    BROWN = Vector3(0.4, 0.2, 0.1)
    CHECKER_DARK = Vector3(0.2, 0.3, 0.1)
    CHECKER_LIGHT = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

    @staticmethod
    def random_matte(rng) -> Lambertian:
        """Dark-biased random albedo: each channel is a product of two draws."""
        return Lambertian(Vector3(rng.random() * rng.random(),
                                  rng.random() * rng.random(),
                                  rng.random() * rng.random()))


class MetalPresets:
    """Reflective materials."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed(albedo: Vector3 = Vector3(0.8, 0.8, 0.8), fuzz: float = 0.3) -> Metal:
        return Metal(albedo, fuzz)

    @staticmethod
    def random_pale(rng) -> Metal:
        """Light random tint in [0.5, 1) per channel, fuzz in [0, 0.5)."""
        albedo = Vector3(0.5 * (1 + rng.random()),
                         0.5 * (1 + rng.random()),
                         0.5 * (1 + rng.random()))
        return Metal(albedo, 0.5 * rng.random())


class DielectricPresets:
    """Dielectrics by refractive index."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class LightPresets:
    """White area lights; intensity is the emitted radiance per channel."""

    @staticmethod
    def panel(intensity: float = 4.0) -> DiffuseLight:
        return DiffuseLight(Vector3(intensity, intensity, intensity))

    @staticmethod
    def ceiling(intensity: float = 15.0) -> DiffuseLight:
        # Cornell box ceiling light
        return DiffuseLight(Vector3(intensity, intensity, intensity))


class TexturePresets:
    """Procedural textures used by the demo scenes."""

    @staticmethod
    def checkerboard(odd: Vector3 = ColorPresets.CHECKER_DARK,
                     even: Vector3 = ColorPresets.CHECKER_LIGHT,
                     frequency: float = 10.0) -> CheckerTexture:
        return CheckerTexture(odd, even, frequency)

    @staticmethod
    def marble(scale: float = 4.0) -> NoiseTexture:
        return NoiseTexture(scale)
