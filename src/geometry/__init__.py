# geometry/__init__.py
# Importing the primitive modules registers their intersect() implementations.
from geometry.hittable import HitRecord, SceneObject, intersect
from geometry.sphere import Sphere
from geometry.room import AxisAlignedRoom
from geometry.world import World

__all__ = ["HitRecord", "SceneObject", "intersect", "Sphere", "AxisAlignedRoom", "World"]
