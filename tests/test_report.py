from dataclasses import dataclass
from typing import ClassVar

from rtscene.report import (
    format_ambient,
    format_camera,
    format_lights_and_objects,
    format_scene,
    format_vec,
)
from rtscene.scene import (
    Ambient,
    Camera,
    Light,
    ObjectType,
    Plane,
    Scene,
    Sphere,
    Vec,
)


@dataclass
class _Cylinder:
    type: ClassVar[ObjectType] = ObjectType.CYLINDER


def test_format_vec():
    assert format_vec("pos: ", Vec(1, 2, 3)) == "pos: (1.00, 2.00, 3.00)\n"


def test_unset_sections():
    assert format_ambient(Ambient()) == "Ambient: not set\n"
    assert format_camera(Camera()) == "Camera: not set\n"


def test_ambient_section_layout():
    ambient = Ambient(True, 0.25, Vec(1, 2, 3))
    lines = format_ambient(ambient).splitlines(keepends=True)
    assert lines[0] == "=== Ambient ===\n"
    assert lines[1].startswith("ratio: ")
    assert lines[2] == format_vec("color: ", Vec(1, 2, 3))


def test_camera_section_layout():
    camera = Camera(True, Vec(0, 1, 2), Vec(0, 0, 1), 70.0)
    lines = format_camera(camera).splitlines(keepends=True)
    assert lines[0] == "=== Camera ===\n"
    assert lines[1] == format_vec("pos:   ", camera.pos)
    assert lines[2] == format_vec("dir:   ", camera.dir)
    assert lines[3].startswith("fov: ")


def test_empty_lights_and_objects():
    text = format_lights_and_objects(Scene())
    assert text.splitlines() == ["=== Lights ===", "none", "=== Objects ===", "none"]


def test_lights_and_objects_listed_in_order():
    scene = Scene()
    scene.add_light(Light(Vec(1, 1, 1), 0.5, Vec(9, 9, 9)))
    scene.add_object(Sphere(Vec(0, 0, 5), 2.0, Vec(255, 0, 0)))
    scene.add_object(Plane(Vec(0, 0, 0), Vec(0, 1, 0), Vec(0, 0, 255)))
    scene.add_object(_Cylinder())
    text = format_lights_and_objects(scene)
    assert "Light #0\n" in text
    assert format_vec("  pos:   ", Vec(1, 1, 1)) in text
    assert "Object #0: Sphere\n" in text
    assert "Object #1: Plane\n" in text
    assert "Cylinder (no print data yet)\n" in text
    assert text.index("Sphere") < text.index("Plane") < text.index("Cylinder")
    assert format_vec("  normal:  ", Vec(0, 1, 0)) in text


def test_format_scene_combines_sections():
    scene = Scene(ambient=Ambient(True, 0.1, Vec(1, 1, 1)))
    text = format_scene(scene)
    assert text.startswith("===== SCENE DUMP =====\n")
    assert text == (
        "===== SCENE DUMP =====\n"
        + format_ambient(scene.ambient)
        + "\n"
        + format_camera(scene.camera)
        + "\n"
        + format_lights_and_objects(scene)
        + "\n"
    )