# materials/phong.py
from core.utils import reflect
from core.vector import Vector3
from materials.point_light import PointLight

# Every surface shares this exponent; Material.shininess is not consulted.
SPECULAR_EXPONENT = 32

def light_contribution(point: Vector3, normal: Vector3, view_dir: Vector3,
                       light: PointLight, exponent: float = SPECULAR_EXPONENT) -> Vector3:
    """
    Diffuse plus specular contribution of one point light at a surface point.

    Args:
        point: Shaded point.
        normal: Unit surface normal at the point.
        view_dir: Unit vector from the point toward the eye.
        light: The light being evaluated.
        exponent: Phong specular exponent.

    Returns:
        Vector3: Additive RGB contribution. Not clamped, and no occlusion test
        is made between the point and the light.
    """
    light_dir = (light.position - point).normalize()
    radiance = light.color * light.intensity

    diffuse = radiance * max(normal.dot(light_dir), 0.0)

    reflect_dir = reflect(-light_dir, normal)
    specular = radiance * (max(view_dir.dot(reflect_dir), 0.0) ** exponent)

    return diffuse + specular
