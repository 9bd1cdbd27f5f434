"""Read scene descriptions line by line into a :class:`Scene`."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence

from .linereader import LineReader
from .scene import Ambient, Camera, Light, Plane, Scene, SceneError, Sphere, Vec
from .strtools import split
from .values import has_invalid_input, parse_color, parse_double, parse_vector


def _any_invalid(tokens: Sequence[str]) -> bool:
    return any(has_invalid_input(token) for token in tokens)


def _vector(text: str, message: str) -> Vec:
    try:
        return parse_vector(text)
    except ValueError:
        raise SceneError(message) from None


def _color(text: str, message: str) -> Vec:
    try:
        return parse_color(text)
    except ValueError:
        raise SceneError(message) from None


def _outside_unit_range(vec: Vec) -> bool:
    return any(component < -1 or component > 1 for component in vec)


def parse_ambient(scene: Scene, tokens: Sequence[str]) -> None:
    """Read an ``A ratio r,g,b`` line into the scene's ambient light."""
    if len(tokens) != 3:
        raise SceneError("invalid ambient!")
    if scene.ambient.is_set:
        raise SceneError("Too many ambient!")
    if _any_invalid(tokens[1:3]):
        raise SceneError("Ambient has invalid input!")
    ratio = parse_double(tokens[1])
    if ratio < 0 or ratio > 1:
        raise SceneError("Ambient ratio must be in [0.0,1.0]!")
    color = _color(tokens[2], "Invalid ambient color!")
    scene.ambient = Ambient(is_set=True, ratio=ratio, color=color)


def parse_camera(scene: Scene, tokens: Sequence[str]) -> None:
    """Read a ``C x,y,z dx,dy,dz fov`` line into the scene's camera."""
    if len(tokens) != 4:
        raise SceneError("invalid camera!")
    if scene.camera.is_set:
        raise SceneError("Too many camera!")
    if _any_invalid(tokens[1:4]):
        raise SceneError("Camera has invalid input!")
    pos = _vector(tokens[1], "Invalid Camera Vector!")
    direction = _vector(tokens[2], "Invalid Camera Vector!")
    if _outside_unit_range(direction) or direction.is_zero():
        raise SceneError("Invalid Camera orientation!")
    fov = parse_double(tokens[3])
    if fov < 0 or fov > 180:
        raise SceneError("Camera's FOV must be in [0,180]")
    scene.camera = Camera(is_set=True, pos=pos, dir=direction, fov=fov)


def parse_light(scene: Scene, tokens: Sequence[str]) -> None:
    """Read an ``L x,y,z ratio r,g,b`` line and add the light to the scene."""
    if len(tokens) != 4:
        raise SceneError("Invalid Light!")
    if _any_invalid(tokens[1:4]):
        raise SceneError("Invalid Light input parameter!")
    pos = _vector(tokens[1], "Invalid light position!")
    ratio = parse_double(tokens[2])
    if ratio > 1 or ratio < 0:
        raise SceneError("The light brightness ratio must be in [0.0,1.0]!")
    color = _color(tokens[3], "Invalid light color!!")
    scene.add_light(Light(pos=pos, ratio=ratio, color=color))


def parse_sphere(scene: Scene, tokens: Sequence[str]) -> None:
    """Read an ``sp x,y,z diameter r,g,b`` line and add the sphere to the scene."""
    if len(tokens) != 4:
        raise SceneError("Invalid number of sphere parameter!")
    if _any_invalid(tokens[1:4]):
        raise SceneError("Invalid sphere input parameter!")
    center = _vector(tokens[1], "Invalid sphere center!")
    diameter = parse_double(tokens[2])
    if diameter <= 0:
        raise SceneError("Sphere diameter must be > 0!")
    color = _color(tokens[3], "Invalid sphere color!")
    scene.add_object(Sphere(center=center, diameter=diameter, color=color))


def parse_plane(scene: Scene, tokens: Sequence[str]) -> None:
    """Read a ``pl x,y,z nx,ny,nz r,g,b`` line and add the plane to the scene."""
    if len(tokens) != 4:
        raise SceneError("Invalid number of plane parameter!!")
    if _any_invalid(tokens[1:4]):
        raise SceneError("Invalid plane input parameter!")
    point = _vector(tokens[1], "Invalid plane vector!")
    normal = _vector(tokens[2], "Invalid plane vector!")
    if _outside_unit_range(normal) or normal.is_zero():
        raise SceneError("Invalid plane normal vector [-1,1] and not zero!")
    color = _color(tokens[3], "Plane R,G,B colors have to be in [0-255]")
    scene.add_object(Plane(point=point, normal=normal, color=color))


_HANDLERS: Dict[str, Callable[[Scene, Sequence[str]], None]] = {
    "A": parse_ambient,
    "C": parse_camera,
    "L": parse_light,
    "sp": parse_sphere,
    "pl": parse_plane,
}


def parse_line(scene: Scene, line: str) -> None:
    """Apply one scene line to ``scene``; blank lines are ignored."""
    if line.endswith("\n"):
        line = line[:-1]
    tokens: List[str] = split(line, " ")
    if not tokens:
        return
    handler = _HANDLERS.get(tokens[0])
    if handler is None:
        raise SceneError("Invaid Object Type")
    handler(scene, tokens)


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a scene from an iterable of lines."""
    scene = Scene()
    for line in lines:
        parse_line(scene, line)
    return scene


def parse_file(path) -> Scene:
    """Build a scene from the file at ``path``."""
    try:
        handle = open(path, encoding="latin-1", newline="")
    except OSError:
        raise SceneError("failed to read the file") from None
    with handle:
        return parse_lines(LineReader(handle))