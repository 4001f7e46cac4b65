# geometry/world.py
import logging
from typing import Optional, List, Iterable

from lumen.core.ray import Ray
from lumen.core.aabb import AABB
from lumen.geometry.hittable import Hittable, HitRecord
from lumen.geometry.bvh import BVHNode

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    A flat list of Hittable objects queried by linear scan. Serves as the
    plain "world" container and as the reference the BVH must agree with.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, t0: float, t1: float) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(t0, t1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

    def build_bvh(self, time0: float = 0.0, time1: float = 0.0, rng=None) -> Hittable:
        """
        Builds a BVH over a copy of the objects, leaving this list's order
        untouched, and returns its root.
        """
        if not self.objects:
            raise ValueError("Cannot build a BVH over an empty world")
        root = BVHNode(list(self.objects), 0, len(self.objects), time0, time1, rng)
        logger.debug("Built BVH over %d objects (depth %d)", len(self.objects), root.depth())
        return root
