"""Pytest configuration for lumen tests.

Shared fixtures: seeded random sources, a fixed-value random stub for
forcing sampling decisions, and deterministic Perlin tables.
"""

import random

import pytest

from lumen.core import perlin


class FixedRandom:
    """Random source that always returns the same value in [0, 1)."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value

    def randrange(self, n: int) -> int:
        return int(self.value * n)


@pytest.fixture
def rng():
    """A seeded random.Random, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom stubs."""
    return FixedRandom


@pytest.fixture(autouse=True)
def default_perlin_tables():
    """Keep the process-wide noise tables on the default seed."""
    if perlin.current_seed() != perlin.DEFAULT_SEED:
        perlin.seed_tables(perlin.DEFAULT_SEED)
    yield
    if perlin.current_seed() != perlin.DEFAULT_SEED:
        perlin.seed_tables(perlin.DEFAULT_SEED)
