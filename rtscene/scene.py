"""Scene description: vectors, the global elements, lights, objects and the scene itself."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, List, Union


class SceneError(Exception):
    """A scene could not be read or is invalid; carries the process exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Vec:
    """A point, direction or RGB color with three components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def is_zero(self) -> bool:
        """True when every component is zero."""
        return self.x == 0 and self.y == 0 and self.z == 0


class ObjectType(enum.Enum):
    """The kinds of scene objects."""

    SPHERE = enum.auto()
    PLANE = enum.auto()
    CYLINDER = enum.auto()


@dataclass
class Ambient:
    """Ambient lighting; appears at most once in a scene."""

    is_set: bool = False
    ratio: float = 0.0
    color: Vec = field(default_factory=Vec)


@dataclass
class Camera:
    """The camera; appears at most once in a scene."""

    is_set: bool = False
    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    fov: float = 0.0


@dataclass
class Light:
    """A point light source."""

    pos: Vec = field(default_factory=Vec)
    ratio: float = 0.0
    color: Vec = field(default_factory=Vec)


@dataclass
class Sphere:
    """A sphere given by its center and diameter."""

    type: ClassVar[ObjectType] = ObjectType.SPHERE

    center: Vec = field(default_factory=Vec)
    diameter: float = 0.0
    color: Vec = field(default_factory=Vec)


@dataclass
class Plane:
    """A plane given by a point on it and its normal."""

    type: ClassVar[ObjectType] = ObjectType.PLANE

    point: Vec = field(default_factory=Vec)
    normal: Vec = field(default_factory=Vec)
    color: Vec = field(default_factory=Vec)


SceneObject = Union[Sphere, Plane]


@dataclass
class Scene:
    """Everything read from a scene file, lights and objects in file order."""

    ambient: Ambient = field(default_factory=Ambient)
    camera: Camera = field(default_factory=Camera)
    lights: List[Light] = field(default_factory=list)
    objects: List[SceneObject] = field(default_factory=list)

    def add_light(self, light: Light) -> None:
        """Append a light after those already in the scene."""
        self.lights.append(light)

    def add_object(self, obj: SceneObject) -> None:
        """Append an object after those already in the scene."""
        self.objects.append(obj)