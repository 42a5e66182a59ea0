# materials/material.py
from core.vector import Vector3

class Material:
    """
    Surface parameters shared by every scene object.

    color             -- base albedo, 0..1 per channel (not enforced)
    specular_strength -- weight of the mirror-reflected ray; 0 disables reflection
    shininess         -- Phong exponent of the surface
    transparency, refractive_index -- carried for scene descriptions, unused
    """
    def __init__(self, color: Vector3, specular_strength: float = 0.0,
                 shininess: float = 32.0, transparency: float = 0.0,
                 refractive_index: float = 1.0):
        self.color = color
        self.specular_strength = specular_strength
        self.shininess = shininess
        self.transparency = transparency
        self.refractive_index = refractive_index

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, "
                f"specular_strength={self.specular_strength}, "
                f"shininess={self.shininess})")
