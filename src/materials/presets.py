# materials/presets.py
from core.vector import Vector3
from materials.material import Material
from materials.point_light import PointLight

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined surfaces, from fully matte to near-perfect mirrors."""

    @staticmethod
    def matte(color: Vector3) -> Material:
        return Material(color, specular_strength=0.0, shininess=8.0)

    @staticmethod
    def glossy(color: Vector3) -> Material:
        return Material(color, specular_strength=0.2, shininess=32.0)

    @staticmethod
    def mirror(tint: Vector3 = None) -> Material:
        if tint is None:
            tint = Vector3(0.1, 0.1, 0.1)
        return Material(tint, specular_strength=0.9, shininess=128.0)

    @staticmethod
    def glass(color: Vector3 = None) -> Material:
        # Refraction is not traced; the fields only travel with the scene.
        if color is None:
            color = Vector3(0.05, 0.05, 0.05)
        return Material(color, specular_strength=0.5, shininess=96.0,
                        transparency=0.9, refractive_index=1.52)

class LightPresets:
    """Predefined point lights with different colors."""

    @staticmethod
    def warm_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 0.95, 0.9), intensity)

    @staticmethod
    def cool_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(0.9, 0.95, 1.0), intensity)

    @staticmethod
    def daylight(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 1.0, 1.0), intensity)
