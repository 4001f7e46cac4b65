# geometry/bvh.py
import random
from typing import Optional

from lumen.core.aabb import AABB
from lumen.core.errors import BoundingBoxError
from lumen.core.ray import Ray
from lumen.geometry.hittable import Hittable, HitRecord


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BoundingBoxError(f"{obj!r} has no bounding box; it cannot be placed in a BVH")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over objects[start:end].

    Splits on a uniformly random axis after sorting the slice in place by
    each object's box minimum on that axis. The slice is reordered; build
    before any traversal starts.
    """
    def __init__(self, objects: list, start: int = 0, end: Optional[int] = None,
                 time0: float = 0.0, time1: float = 0.0, rng=None):
        if end is None:
            end = len(objects)
        if rng is None:
            rng = random.Random()
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        if object_span == 1:
            # Both children alias the single leaf.
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            axis = rng.randrange(3)
            objects[start:end] = sorted(
                objects[start:end],
                key=lambda obj: _box_of(obj, time0, time1).minimum[axis])
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Only a nearer hit on the right can matter.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)

        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, t0: float, t1: float) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def leaves(self) -> list:
        """Distinct leaf objects, left to right."""
        found = []
        for child in (self.left, self.right):
            if isinstance(child, BVHNode):
                found.extend(child.leaves())
            elif not any(child is f for f in found):
                found.append(child)
        return found
