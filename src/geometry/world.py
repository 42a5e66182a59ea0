# geometry/world.py
import math
from typing import List, Optional
from core.ray import Ray
from geometry.hittable import HitRecord, SceneObject, intersect
from materials.point_light import PointLight

class World:
    """
    The scene: an ordered list of objects plus the point lights shining on
    them. Both are filled during scene construction and only read while
    rendering.
    """
    def __init__(self):
        self.objects: List[SceneObject] = []
        self.lights: List[PointLight] = []

    def add(self, obj: SceneObject):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Nearest intersection of the ray with any object, or None.

        Every object is tested; each one only reports a hit strictly closer
        than the best found so far, so ties keep the earlier object.
        """
        closest_so_far = math.inf
        closest_obj = None
        closest_normal = None
        for obj in self.objects:
            result = intersect(obj, ray, closest_so_far)
            if result is not None:
                closest_so_far, closest_normal = result
                closest_obj = obj

        if closest_obj is None:
            return None
        return HitRecord(closest_obj, closest_so_far, ray.at(closest_so_far), closest_normal)

    def __len__(self) -> int:
        return len(self.objects)
