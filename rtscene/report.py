"""Human-readable dumps of a parsed scene."""

from __future__ import annotations

from .scene import Ambient, Camera, ObjectType, Scene, Vec


def format_vec(label: str, vec: Vec) -> str:
    """A labelled vector with two decimals per component, newline-terminated."""
    return f"{label}({vec.x:.2f}, {vec.y:.2f}, {vec.z:.2f})\n"


def format_ambient(ambient: Ambient) -> str:
    """The ambient section of a scene dump."""
    if not ambient.is_set:
        return "Ambient: not set\n"
    return (
        "=== Ambient ===\n"
        f"ratio: {ambient.ratio:.3f}\n"
        + format_vec("color: ", ambient.color)
    )


def format_camera(camera: Camera) -> str:
    """The camera section of a scene dump."""
    if not camera.is_set:
        return "Camera: not set\n"
    return (
        "=== Camera ===\n"
        + format_vec("pos:   ", camera.pos)
        + format_vec("dir:   ", camera.dir)
        + f"fov: {camera.fov:.2f}\n"
    )


def _format_object(obj) -> str:
    kind = getattr(obj, "type", None)
    if kind is ObjectType.SPHERE:
        return (
            "Sphere\n"
            + format_vec("  center:  ", obj.center)
            + f"  diam:    {obj.diameter:.3f}\n"
            + format_vec("  color:   ", obj.color)
        )
    if kind is ObjectType.PLANE:
        return (
            "Plane\n"
            + format_vec("  point:  ", obj.point)
            + format_vec("  normal:  ", obj.normal)
            + format_vec("  color:   ", obj.color)
        )
    if kind is ObjectType.CYLINDER:
        return "Cylinder (no print data yet)\n"
    return ""


def format_lights_and_objects(scene: Scene) -> str:
    """The lights and objects sections of a scene dump, in scene order."""
    parts = ["=== Lights ===\n"]
    if not scene.lights:
        parts.append("none\n")
    for index, light in enumerate(scene.lights):
        parts.append(f"Light #{index}\n")
        parts.append(format_vec("  pos:   ", light.pos))
        parts.append(f"  ratio: {light.ratio:.3f}\n")
        parts.append(format_vec("  color: ", light.color))
    parts.append("=== Objects ===\n")
    if not scene.objects:
        parts.append("none\n")
    for index, obj in enumerate(scene.objects):
        parts.append(f"Object #{index}: ")
        parts.append(_format_object(obj))
    return "".join(parts)


def format_scene(scene: Scene) -> str:
    """The whole scene dump."""
    return (
        "===== SCENE DUMP =====\n"
        + format_ambient(scene.ambient)
        + "\n"
        + format_camera(scene.camera)
        + "\n"
        + format_lights_and_objects(scene)
        + "\n"
    )