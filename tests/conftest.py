"""Pytest configuration and shared fixtures."""

import random

import pytest

from core.vector import Vector3
from geometry import World
from materials.material import Material
from materials.point_light import PointLight


class CountingWorld(World):
    """World that records how many scene queries were made."""

    def __init__(self):
        super().__init__()
        self.queries = 0

    def hit(self, ray):
        self.queries += 1
        return super().hit(ray)


@pytest.fixture
def matte():
    return Material(Vector3(0.5, 0.25, 1.0), specular_strength=0.0)


@pytest.fixture
def white_light():
    return PointLight(Vector3(0, 0, 0), Vector3(1, 1, 1), 1.0)


@pytest.fixture
def counting_world():
    return CountingWorld()


@pytest.fixture
def rng():
    return random.Random(1234)
