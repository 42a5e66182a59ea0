import math

import pytest

from core.vector import Vector3
from materials.phong import SPECULAR_EXPONENT, light_contribution
from materials.point_light import PointLight


def test_light_along_normal():
    light = PointLight(Vector3(0, 0, 10), Vector3(1, 1, 1), 2)

    color = light_contribution(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 0, 1), light)

    # Diffuse and specular both at full strength.
    assert color == Vector3(4, 4, 4)


def test_light_behind_surface_contributes_nothing():
    light = PointLight(Vector3(0, 0, -10), Vector3(1, 1, 1), 2)

    color = light_contribution(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 0, 1), light)

    assert color == Vector3(0, 0, 0)


def test_light_color_and_intensity_scale_result():
    light = PointLight(Vector3(0, 0, 10), Vector3(1, 0.5, 0), 0.5)

    color = light_contribution(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 1, 0), light)

    # Viewer at grazing angle: diffuse only.
    assert color == Vector3(0.5, 0.25, 0)


def test_specular_peaks_along_mirror_direction():
    light = PointLight(Vector3(-1, 0, 1), Vector3(1, 1, 1), 1)
    normal = Vector3(0, 0, 1)
    mirror = Vector3(1, 0, 1).normalize()

    color = light_contribution(Vector3(0, 0, 0), normal, mirror, light)

    assert color.x == pytest.approx(1 + 1 / math.sqrt(2))


def test_specular_uses_fixed_exponent():
    light = PointLight(Vector3(0, 0, 10), Vector3(1, 1, 1), 1)
    angle = 0.2
    view = Vector3(math.sin(angle), 0, math.cos(angle))

    color = light_contribution(Vector3(0, 0, 0), Vector3(0, 0, 1), view, light)

    assert SPECULAR_EXPONENT == 32
    assert color.x == pytest.approx(1 + math.cos(angle) ** 32)


def test_result_is_not_clamped():
    light = PointLight(Vector3(0, 0, 10), Vector3(1, 1, 1), 50)

    color = light_contribution(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 0, 1), light)

    assert color.x == 100
