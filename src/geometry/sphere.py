# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import SceneObject, intersect
from materials.material import Material

class Sphere(SceneObject):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        super().__init__(material)
        self.center = center
        self.radius = radius

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

@intersect.register(Sphere)
def _intersect_sphere(sphere: Sphere, ray: Ray, nearest: float) -> Optional[Tuple[float, Vector3]]:
    oc = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    discriminant = b * b - 4 * a * c

    # Tangent rays (discriminant == 0) count as misses.
    if not discriminant > 0:
        return None

    # Near root only: a ray starting inside the sphere never reports the far wall.
    t = (-b - math.sqrt(discriminant)) / (2 * a)
    if t <= 0 or t >= nearest:
        return None

    normal = (ray.at(t) - sphere.center).normalize()
    return t, normal
