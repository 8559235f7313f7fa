import pytest

from bounceengine.components import (
    Component,
    ComponentClass,
    PhysicsComponent,
    TransformComponent,
)
from bounceengine.quaternion import Quaternion
from bounceengine.vectors import Vector3, Vector3d


def approx_vec(vector):
    return [pytest.approx(value, abs=1e-9) for value in vector]


def test_component_class_prefixes():
    assert ComponentClass(0x0100000000000000) is ComponentClass.BUILTIN
    assert ComponentClass(0x0200000000000000) is ComponentClass.EXTERNAL


def test_position_starts_where_given():
    tc = TransformComponent(Vector3.Zero, Vector3.Zero)
    assert tc.position == Vector3d(0, 0, 0)
    assert tc.rotation == Vector3d(0, 0, 0)


def test_move_and_move_to():
    tc = TransformComponent(Vector3d(1, 2, 3), Vector3.Zero)
    tc.move(Vector3d(1, 2, 3))
    assert tc.position == Vector3d(1, 2, 3) + Vector3d(1, 2, 3)
    tc.move_to(Vector3d(7, 8, 9))
    assert tc.position == Vector3d(7, 8, 9)


def test_position_is_a_copy():
    tc = TransformComponent(Vector3d(1, 2, 3), Vector3.Zero)
    tc.position.set(0, 100.0)
    assert tc.position == Vector3d(1, 2, 3)


def test_rotate_to_wraps_angles():
    tc = TransformComponent(Vector3.Zero, Vector3.Zero)
    tc.rotate_to(Vector3d(370, 45, 720))
    assert list(tc.rotation) == approx_vec([10, 45, 0])


def test_rotate_accumulates():
    tc = TransformComponent(Vector3.Zero, Vector3d(10, 20, 30))
    tc.rotate(Vector3d(10, 20, 30))
    assert list(tc.rotation) == approx_vec(Vector3d(10, 20, 30) * 2)


def test_identity_rotation_directions():
    tc = TransformComponent(Vector3.Zero, Vector3.Zero)
    assert list(tc.up()) == approx_vec(Vector3d(Vector3.Up))
    assert list(tc.forward()) == approx_vec(Vector3d(Vector3.Forward))
    assert list(tc.right()) == approx_vec(Vector3d(Vector3.Right))


def test_directions_stay_unit_length():
    tc = TransformComponent(Vector3.Zero, Vector3d(30, 60, 90))
    for direction in (tc.up(), tc.forward(), tc.right()):
        assert direction.magnitude() == pytest.approx(1.0)


def test_quaternion_matches_rotation():
    tc = TransformComponent(Vector3.Zero, Vector3d(54, 178, 3))
    assert tc.quaternion() == Quaternion.from_euler(Vector3d(54, 178, 3))


def test_rotate_by_identity_quaternion_keeps_rotation():
    tc = TransformComponent(Vector3.Zero, Vector3d(5, 6, 7))
    tc.rotate_by_quaternion(Quaternion(0.0, 0.0, 0.0, 1.0))
    assert list(tc.rotation) == approx_vec([5, 6, 7])


def test_physics_defaults_and_values():
    default = PhysicsComponent(Vector3.Zero, Vector3.Zero)
    assert (default.velocity, default.gravity_modifier) == (0.0, 0.0)
    physics = PhysicsComponent(Vector3d(1, 1, 1), Vector3.Zero, 3.5, 9.8, 300.0, 2.0)
    assert physics.velocity == 3.5
    assert physics.gravity_modifier == 9.8
    assert physics.temperature == 300.0
    assert physics.elasticity == 2.0
    assert physics.position == Vector3d(1, 1, 1)