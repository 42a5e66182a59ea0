# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera at the origin looking down -z, with an image plane
    at z = -1 spanning [-aspect, aspect] x [-1, 1].
    """
    def __init__(self, width: int, height: int, position: Vector3 = None):
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.position = position if position is not None else Vector3(0, 0, 0)

    def get_ray(self, i: int, j: int) -> Ray:
        """
        Ray through the center of pixel (i, j); i counts columns left to
        right and j counts rows top to bottom.
        """
        x = (2 * (i + 0.5) / self.width - 1) * self.aspect_ratio
        y = 1 - 2 * (j + 0.5) / self.height
        return Ray(self.position, Vector3(x, y, -1))
