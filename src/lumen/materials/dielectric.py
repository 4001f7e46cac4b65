# materials/dielectric.py
from lumen.core.ray import Ray
from lumen.core.vector import WHITE
from lumen.core.utils import reflect, refract, schlick
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material, ScatterRecord


class Dielectric(Material):
    """
    Clear refractive material (glass, water). Chooses between reflection and
    refraction with the Schlick-approximated Fresnel probability.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = WHITE  # Glass doesn't absorb light
        direction = ray_in.direction
        d_dot_n = direction.dot(rec.normal)

        # Determine if we're entering or exiting the material
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        reflected = reflect(direction, rec.normal)
        refracted = refract(direction, outward_normal, ni_over_nt)

        if refracted is None:
            # Total internal reflection
            return ScatterRecord(attenuation, Ray(rec.p, reflected, ray_in.time))

        reflect_prob = schlick(cosine, self.ref_idx)
        if rng.random() < reflect_prob:
            return ScatterRecord(attenuation, Ray(rec.p, reflected, ray_in.time))
        return ScatterRecord(attenuation, Ray(rec.p, refracted, ray_in.time))
