# scenes.py
"""Scene construction: the built-in demo scene and JSON scene descriptions."""
import json
import os
from typing import Any, Dict, List
from core.vector import Vector3
from geometry import AxisAlignedRoom, Sphere, World
from materials.material import Material
from materials.point_light import PointLight
from materials.presets import ColorPresets, LightPresets, MaterialPresets

class SceneError(ValueError):
    """Raised when a scene description is malformed."""

def default_scene() -> World:
    """
    A room around the camera holding a mirror sphere between two matte ones,
    lit by a warm and a cool light.
    """
    world = World()
    world.add(AxisAlignedRoom(Vector3(-6, -3, -16), Vector3(6, 6, 2),
                              MaterialPresets.matte(ColorPresets.GRAY)))
    world.add(Sphere(Vector3(0, -1, -8), 2.0, MaterialPresets.mirror()))
    world.add(Sphere(Vector3(-3.5, -2, -7), 1.0, MaterialPresets.glossy(ColorPresets.RED)))
    world.add(Sphere(Vector3(3.5, -2, -7), 1.0, MaterialPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vector3(1.5, 1.5, -11), 1.2, MaterialPresets.glass()))

    world.add_light(LightPresets.warm_light(Vector3(-4, 5, -3), intensity=0.8))
    world.add_light(LightPresets.cool_light(Vector3(4, 4, -12), intensity=0.6))
    return world

def _vector(data: Dict[str, Any], key: str, where: str) -> Vector3:
    if key not in data:
        raise SceneError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneError(f"{where}: '{key}' must be a list of 3 numbers, got {value!r}")
    try:
        return Vector3(*value)
    except (TypeError, ValueError) as e:
        raise SceneError(f"{where}: '{key}' must be a list of 3 numbers, got {value!r}") from e

def _number(data: Dict[str, Any], key: str, where: str, default: float = None) -> float:
    if key not in data:
        if default is None:
            raise SceneError(f"{where}: missing '{key}'")
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{where}: '{key}' must be a number, got {value!r}")
    return float(value)

def _entries(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = data.get(key, [])
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise SceneError(f"'{key}' must be a list of objects")
    return entries

def _material(data: Dict[str, Any], where: str) -> Material:
    spec = data.get("material", {})
    if not isinstance(spec, dict):
        raise SceneError(f"{where}: 'material' must be an object")
    where = f"{where}.material"
    return Material(
        color=_vector(spec, "color", where),
        specular_strength=_number(spec, "specular_strength", where, 0.0),
        shininess=_number(spec, "shininess", where, 32.0),
        transparency=_number(spec, "transparency", where, 0.0),
        refractive_index=_number(spec, "refractive_index", where, 1.0),
    )

def scene_from_dict(data: Dict[str, Any]) -> World:
    """
    Build a World from a parsed scene description.

    Expected layout::

        {
          "room":    {"min": [x, y, z], "max": [x, y, z], "material": {...}},
          "spheres": [{"center": [x, y, z], "radius": r, "material": {...}}],
          "lights":  [{"position": [x, y, z], "color": [r, g, b], "intensity": i}]
        }

    Objects are added room first, then spheres in file order.

    Raises:
        SceneError: If a required key is missing or a value is out of range.
    """
    if not isinstance(data, dict):
        raise SceneError("scene description must be a JSON object")

    world = World()

    room = data.get("room")
    if room is not None:
        if not isinstance(room, dict):
            raise SceneError("'room' must be an object")
        minimum = _vector(room, "min", "room")
        maximum = _vector(room, "max", "room")
        if not (minimum.x < maximum.x and minimum.y < maximum.y and minimum.z < maximum.z):
            raise SceneError(f"room: min {minimum} must be below max {maximum} on every axis")
        world.add(AxisAlignedRoom(minimum, maximum, _material(room, "room")))

    for n, sphere in enumerate(_entries(data, "spheres")):
        where = f"spheres[{n}]"
        radius = _number(sphere, "radius", where)
        if radius <= 0:
            raise SceneError(f"{where}: radius must be positive, got {radius}")
        world.add(Sphere(_vector(sphere, "center", where), radius, _material(sphere, where)))

    for n, light in enumerate(_entries(data, "lights")):
        where = f"lights[{n}]"
        intensity = _number(light, "intensity", where, 1.0)
        if intensity < 0:
            raise SceneError(f"{where}: intensity must be non-negative, got {intensity}")
        world.add_light(PointLight(_vector(light, "position", where),
                                   _vector(light, "color", where), intensity))

    return world

def load_scene(path: str) -> World:
    """
    Load a scene description from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SceneError: If the file is not valid JSON or the description is malformed.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"{path}: invalid JSON ({e})") from e
    world = scene_from_dict(data)
    print(f"Loaded {len(world.objects)} objects and {len(world.lights)} lights from {path}")
    return world
