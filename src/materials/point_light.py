# materials/point_light.py
from core.vector import Vector3

class PointLight:
    """
    Point light with a position, an RGB color and a scalar intensity.
    """
    def __init__(self, position: Vector3, color: Vector3, intensity: float = 1.0):
        self.position = position
        self.color = color
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.color!r}, {self.intensity})"
