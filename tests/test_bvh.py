"""Unit tests for the bounding volume hierarchy.

Tests cover:
- Agreement with the linear scan over mixed primitives
- Degenerate builds (one and two objects, empty worlds)
- Unboundable objects
- Node boxes enclosing their leaves
- Traversal pruning and build determinism
"""

import math
import random

import pytest

from lumen.core.errors import BoundingBoxError
from lumen.core.ray import Ray
from lumen.core.vector import Vector3
from lumen.geometry import (
    BVHNode,
    Box,
    HittableList,
    Hittable,
    MovingSphere,
    Sphere,
    XYRect,
    XZRect,
)
from lumen.materials import Lambertian

MATERIAL = Lambertian(Vector3(0.5, 0.5, 0.5))


def random_vector(rng, lo=-10.0, hi=10.0):
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_world(rng, count=60):
    objects = []
    for i in range(count):
        kind = i % 4
        c = random_vector(rng)
        # One material per object so a hit identifies its primitive.
        material = Lambertian(Vector3(rng.random(), rng.random(), rng.random()))
        if kind == 0:
            objects.append(Sphere(c, rng.uniform(0.1, 1.5), material))
        elif kind == 1:
            objects.append(MovingSphere(c, c + random_vector(rng, -1, 1), 0.0, 1.0,
                                        rng.uniform(0.1, 1.0), material))
        elif kind == 2:
            objects.append(XYRect(c.x, c.x + 1.5, c.y, c.y + 0.5, c.z, material))
        else:
            objects.append(Box(c, c + Vector3(0.7, 1.1, 0.4), material))
    return HittableList(objects)


class Unbounded(Hittable):
    """A hittable with no bounding box."""

    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, t0, t1):
        return None


class CountingSphere(Sphere):
    """Sphere that counts how often it is intersected."""

    def __init__(self, *args):
        super().__init__(*args)
        self.calls = 0

    def hit(self, ray, t_min, t_max):
        self.calls += 1
        return super().hit(ray, t_min, t_max)


class TestBVHAgreement:
    """The BVH must return what the linear scan returns."""

    def test_matches_linear_scan(self):
        """Random rays at random times agree on hit/miss, t, normal and material."""
        rng = random.Random(2024)
        world = random_world(rng)
        bvh = world.build_bvh(0.0, 1.0, random.Random(5))
        hits = 0
        for _ in range(400):
            ray = Ray(random_vector(rng, -15, 15), random_vector(rng, -1, 1), rng.random())
            expected = world.hit(ray, 0.001, math.inf)
            actual = bvh.hit(ray, 0.001, math.inf)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
            assert actual.normal.is_close(expected.normal)
            assert actual.material is expected.material
        assert hits > 0

    def test_rays_aimed_at_objects(self):
        """Rays aimed at every sphere center agree with the scan."""
        rng = random.Random(7)
        spheres = [Sphere(random_vector(rng), 0.5, Lambertian(Vector3(0.1 * i, 0.5, 0.5)))
                   for i in range(30)]
        world = HittableList(spheres)
        bvh = world.build_bvh(rng=random.Random(3))
        origin = Vector3(0.0, 0.0, 30.0)
        for sphere in spheres:
            ray = Ray(origin, sphere.center - origin)
            expected = world.hit(ray, 0.001, math.inf)
            actual = bvh.hit(ray, 0.001, math.inf)
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
            assert actual.material is expected.material


class TestBVHConstruction:
    """Tests for building BVH nodes."""

    def test_single_object_aliases(self):
        """One object: both children are that object."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATERIAL)
        node = BVHNode([sphere])
        assert node.left is sphere
        assert node.right is sphere
        assert node.leaves() == [sphere]
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert node.hit(ray, 0.001, math.inf).t == pytest.approx(4.0)

    def test_two_objects_direct_children(self):
        """Two objects become the two leaves without sorting."""
        a = Sphere(Vector3(5.0, 0.0, 0.0), 1.0, MATERIAL)
        b = Sphere(Vector3(-5.0, 0.0, 0.0), 1.0, MATERIAL)
        node = BVHNode([a, b])
        assert node.left is a
        assert node.right is b

    def test_empty_world_rejected(self):
        """Building over nothing is an error."""
        with pytest.raises(ValueError):
            HittableList().build_bvh()
        with pytest.raises(ValueError):
            BVHNode([])

    @pytest.mark.parametrize("count", [2, 3, 5])
    def test_unbounded_object_raises(self, count):
        """An object without a box cannot go into a BVH."""
        objects = [Sphere(Vector3(float(i), 0.0, 0.0), 0.5, MATERIAL) for i in range(count - 1)]
        objects.append(Unbounded())
        with pytest.raises(BoundingBoxError):
            BVHNode(objects, rng=random.Random(0))

    def test_node_box_contains_leaf_boxes(self):
        """Every node's box encloses every leaf box below it."""
        world = random_world(random.Random(11), count=40)
        root = world.build_bvh(0.0, 1.0, random.Random(1))

        def check(node):
            if not isinstance(node, BVHNode):
                return
            for leaf in node.leaves():
                for corner in leaf.bounding_box(0.0, 1.0).corners():
                    assert node.box.contains(corner)
            check(node.left)
            check(node.right)

        check(root)
        assert len(root.leaves()) == 40

    def test_build_bvh_leaves_list_order(self):
        """build_bvh sorts a copy; BVHNode sorts the given list in place."""
        rng = random.Random(4)
        spheres = [Sphere(random_vector(rng), 0.5, MATERIAL) for _ in range(10)]
        world = HittableList(spheres)
        world.build_bvh(rng=random.Random(0))
        assert world.objects == spheres

        objects = list(spheres)
        BVHNode(objects, rng=random.Random(0))
        assert sorted(map(id, objects)) == sorted(map(id, spheres))

    def test_same_seed_same_tree(self):
        """The random split axis is reproducible from the seed."""
        world = random_world(random.Random(8), count=25)
        first = world.build_bvh(0.0, 1.0, random.Random(42)).leaves()
        second = world.build_bvh(0.0, 1.0, random.Random(42)).leaves()
        assert [id(o) for o in first] == [id(o) for o in second]


class TestBVHTraversal:
    """Tests for pruning during traversal."""

    def test_missed_subtree_not_visited(self):
        """Objects whose boxes the ray misses are never intersected."""
        near = [CountingSphere(Vector3(float(i), 0.0, 0.0), 0.3, MATERIAL) for i in range(4)]
        far = [CountingSphere(Vector3(100.0 + i, 100.0, 100.0), 0.3, MATERIAL) for i in range(4)]
        # Far on every axis, so any split puts the far cluster in its own subtree.
        root = BVHNode(near + far, rng=random.Random(0))
        for obj in near + far:
            obj.calls = 0
        ray = Ray(Vector3(0.0, 0.0, 10.0), Vector3(0.0, 0.0, -1.0))
        assert root.hit(ray, 0.001, math.inf) is not None
        assert all(obj.calls == 0 for obj in far)

    def test_depth_is_logarithmic(self):
        """A balanced midpoint split keeps the tree shallow."""
        rng = random.Random(3)
        spheres = [Sphere(random_vector(rng), 0.2, MATERIAL) for _ in range(64)]
        root = BVHNode(spheres, rng=rng)
        assert root.depth() <= 7

    def test_rect_world(self):
        """Flat primitives are traversed through their padded boxes."""
        floor = XZRect(-5.0, 5.0, -5.0, 5.0, 0.0, MATERIAL)
        ceiling = XZRect(-5.0, 5.0, -5.0, 5.0, 4.0, MATERIAL)
        ball = Sphere(Vector3(0.0, 2.0, 0.0), 0.5, MATERIAL)
        bvh = HittableList([floor, ceiling, ball]).build_bvh(rng=random.Random(0))
        down = Ray(Vector3(3.0, 3.0, 3.0), Vector3(0.0, -1.0, 0.0))
        assert bvh.hit(down, 0.001, math.inf).t == pytest.approx(3.0)
