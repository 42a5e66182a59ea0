# geometry/hittable.py
from functools import singledispatch
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material

class HitRecord:
    """
    Records details of the nearest ray-object intersection.
    """
    __slots__ = ("object", "t", "p", "normal")

    def __init__(self, obj: "SceneObject", t: float, p: Vector3, normal: Vector3):
        self.object = obj       # Object that was struck
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection

    @property
    def material(self) -> Material:
        return self.object.material

class SceneObject:
    """
    Base of every primitive: something with a material that a ray can hit.
    Intersection itself is dispatched on the concrete type by intersect().
    """
    def __init__(self, material: Material):
        self.material = material

@singledispatch
def intersect(shape, ray: Ray, nearest: float) -> Optional[Tuple[float, Vector3]]:
    """
    Intersect a ray with a primitive.

    Returns (distance, normal) when the primitive is hit strictly closer than
    `nearest`, otherwise None. Primitives register an implementation with
    @intersect.register.
    """
    raise TypeError(f"intersect() is not defined for {type(shape).__name__}")
