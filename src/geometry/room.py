# geometry/room.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import safe_inverse
from geometry.hittable import SceneObject, intersect
from materials.material import Material

# Normal reported for each slab slot, checked in this order:
# near planes t1.x, t1.y, t1.z, then far planes t2.x, t2.y, t2.z.
FACE_NORMALS = (
    Vector3(-1, 0, 0),   # left
    Vector3(0, -1, 0),   # bottom
    Vector3(0, 0, -1),   # front
    Vector3(1, 0, 0),    # right
    Vector3(0, 1, 0),    # top
    Vector3(0, 0, 1),    # back
)

class AxisAlignedRoom(SceneObject):
    """
    The inside of an axis-aligned box. Rays are expected to start inside and
    strike the inner walls.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3, material: Material):
        super().__init__(material)
        self.minimum = minimum
        self.maximum = maximum

    def __repr__(self) -> str:
        return f"AxisAlignedRoom({self.minimum!r}, {self.maximum!r})"

@intersect.register(AxisAlignedRoom)
def _intersect_room(room: AxisAlignedRoom, ray: Ray, nearest: float) -> Optional[Tuple[float, Vector3]]:
    # Slab method over the three axes.
    t1 = []
    t2 = []
    for o, d, lo, hi in zip(ray.origin, ray.direction, room.minimum, room.maximum):
        inv = safe_inverse(d)
        t_min = (lo - o) * inv
        t_max = (hi - o) * inv
        t1.append(min(t_min, t_max))
        t2.append(max(t_min, t_max))

    t_near = max(t1)
    t_far = min(t2)
    if t_near > t_far or t_far < 0:
        return None

    # From inside the room the entry planes lie behind the origin.
    t = t_near if t_near > 0 else t_far
    if not 0 < t < nearest:
        return None

    for candidate, normal in zip(t1 + t2, FACE_NORMALS):
        if t == candidate:
            return t, normal
    return None
