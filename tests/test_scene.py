import dataclasses

import pytest

from rtscene.scene import (
    Ambient,
    Camera,
    Light,
    ObjectType,
    Plane,
    Scene,
    SceneError,
    Sphere,
    Vec,
)


def test_new_scene_is_empty_and_unset():
    scene = Scene()
    assert scene.lights == []
    assert scene.objects == []
    assert scene.ambient.is_set is False
    assert scene.ambient.ratio == 0.0
    assert scene.camera.is_set is False


def test_scenes_do_not_share_lists():
    first, second = Scene(), Scene()
    first.add_light(Light())
    assert second.lights == []


def test_add_light_keeps_order():
    scene = Scene()
    a = Light(pos=Vec(1, 2, 3), ratio=0.5, color=Vec(10, 20, 30))
    b = Light(pos=Vec(-1, 0, 0), ratio=1.0, color=Vec(255, 255, 255))
    scene.add_light(a)
    scene.add_light(b)
    assert scene.lights == [a, b]


def test_add_object_keeps_order_and_types():
    scene = Scene()
    sp = Sphere(center=Vec(0, 0, 5), diameter=2.0, color=Vec(255, 0, 0))
    pl = Plane(point=Vec(0, -1, 0), normal=Vec(0, 1, 0), color=Vec(0, 255, 0))
    scene.add_object(sp)
    scene.add_object(pl)
    assert scene.objects == [sp, pl]
    assert [o.type for o in scene.objects] == [ObjectType.SPHERE, ObjectType.PLANE]


def test_vec_is_frozen_and_comparable():
    v = Vec(1.0, 2.0, 3.0)
    assert v == Vec(1.0, 2.0, 3.0)
    assert tuple(v) == (1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]


def test_vec_is_zero():
    assert Vec().is_zero()
    assert not Vec(0, 0, 1).is_zero()


def test_scene_error_message_and_code():
    err = SceneError("Too many camera!")
    assert str(err) == "Too many camera!"
    assert err.exit_code == 1
    with pytest.raises(SceneError, match="invalid ambient!"):
        raise SceneError("invalid ambient!")


def test_global_elements_defaults():
    amb = Ambient()
    cam = Camera()
    assert amb.color == Vec(0, 0, 0)
    assert cam.pos.is_zero() and cam.dir.is_zero()
    assert cam.fov == 0.0