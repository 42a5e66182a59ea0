# renderer/raytracer.py
import random
from typing import Optional
import numpy as np
from tqdm import tqdm
from camera.camera import Camera
from core.ray import Ray
from core.utils import random_color, reflect
from core.vector import Vector3
from geometry.world import World
from materials.phong import light_contribution

MAX_DEPTH = 5
# Offset along the reflected direction so a bounce does not re-hit its origin.
REFLECTION_EPSILON = 1e-3

def trace(ray: Ray, world: World, depth: int, rng: random.Random) -> Vector3:
    """
    Color seen along a ray.

    Args:
        ray: Ray to follow.
        world: Objects and lights, read-only.
        depth: Remaining recursion budget; at 0 or below the ray is black and
            the scene is not queried.
        rng: Generator for the starfield background of rays that miss.

    Returns:
        Vector3: Unclamped RGB.
    """
    if depth <= 0:
        return Vector3(0, 0, 0)

    rec = world.hit(ray)
    if rec is None:
        return random_color(rng)

    material = rec.material
    view_dir = -ray.direction
    color = Vector3(0, 0, 0)
    for light in world.lights:
        color = color + light_contribution(rec.p, rec.normal, view_dir, light) * material.color

    if material.specular_strength > 0:
        reflected = reflect(ray.direction, rec.normal)
        bounce = Ray(rec.p + reflected * REFLECTION_EPSILON, reflected)
        color = color + trace(bounce, world, depth - 1, rng) * material.specular_strength

    return color

class Renderer:
    """
    Sequential pixel driver: one camera ray per pixel, traced into a float
    framebuffer of shape (height, width, 3).
    """
    def __init__(self, width: int, height: int, max_depth: int = MAX_DEPTH,
                 seed: Optional[int] = None):
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.camera = Camera(width, height)
        # One generator for the whole image.
        self.rng = random.Random(seed)
        self.framebuffer = np.zeros((height, width, 3), dtype=np.float64)

    def reset(self, seed: Optional[int] = None):
        self.rng.seed(seed)
        self.framebuffer.fill(0.0)

    def render_pixel(self, world: World, i: int, j: int) -> Vector3:
        ray = self.camera.get_ray(i, j)
        return trace(ray, world, self.max_depth, self.rng)

    def render(self, world: World, progress: bool = False) -> np.ndarray:
        """
        Trace every pixel row-major into the framebuffer and return it.
        """
        rows = range(self.height)
        if progress:
            rows = tqdm(rows, total=self.height, unit="row")
        for j in rows:
            for i in range(self.width):
                self.framebuffer[j, i] = self.render_pixel(world, i, j).to_tuple()
        return self.framebuffer
