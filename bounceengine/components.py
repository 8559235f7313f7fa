"""Components attachable to objects: the base interface, transform and physics."""

from __future__ import annotations

import math
from abc import ABC
from enum import Enum, IntEnum

from .quaternion import Quaternion
from .vectors import Vector, Vector3, Vector3d


class ComponentClass(IntEnum):
    """Prefix of a component ID, held in its most significant byte."""

    INTERNAL = 0
    BUILTIN = 0x0100000000000000
    EXTERNAL = 0x0200000000000000


class ComponentStage(Enum):
    """Where a component is in its lifecycle."""

    CREATED = "created"
    INITIALIZED = "initialized"
    RUNNING = "running"
    ENDED = "ended"


class Component(ABC):
    """A component that can be attached to any object."""

    name: str = ""
    id: int = 0
    stage: ComponentStage = ComponentStage.CREATED
    frames: int = 0

    def init(self) -> None:
        """Called when the parent object is initiated."""
        self.stage = ComponentStage.INITIALIZED

    def start(self) -> None:
        """Called when the game actually starts."""
        self.stage = ComponentStage.RUNNING
        self.frames = 0

    def end(self) -> None:
        """Called before the game shuts down."""
        self.stage = ComponentStage.ENDED

    def update(self) -> None:
        """Called every frame between start() and end(); counts frames while running."""
        if self.stage is ComponentStage.RUNNING:
            self.frames += 1


def _wrap_degrees(rotation: Vector) -> Vector3d:
    wrapped = Vector3d(rotation)
    wrapped.apply(lambda angle: math.fmod(angle, 360.0))
    return wrapped


class TransformComponent(Component):
    """Position and rotation (Euler angles in degrees) in 3D space."""

    def __init__(self, position: Vector, rotation: Vector) -> None:
        self.name = ""
        self.id = 0
        self._position = Vector3d(position)
        self._rotation = Vector3d(rotation)

    @property
    def position(self) -> Vector3d:
        return Vector3d(self._position)

    @property
    def rotation(self) -> Vector3d:
        return Vector3d(self._rotation)

    def quaternion(self) -> Quaternion:
        """The rotation as a quaternion."""
        return Quaternion.from_euler(self._rotation)

    def move_to(self, position: Vector) -> None:
        self._position = Vector3d(position)

    def move(self, offset: Vector) -> None:
        self._position = Vector3d(self._position + Vector3d(offset))

    def rotate_to(self, rotation: Vector) -> None:
        self._rotation = _wrap_degrees(rotation)

    def rotate(self, rotation: Vector) -> None:
        """Add rotation (each angle first wrapped to below 360 degrees)."""
        self._rotation = Vector3d(self._rotation + _wrap_degrees(rotation))

    def rotate_by_quaternion(self, quaternion: Quaternion) -> None:
        self._rotation = quaternion.rotate(self._rotation)

    def up(self) -> Vector3d:
        return self.quaternion().rotate(Vector3.Up)

    def forward(self) -> Vector3d:
        return self.quaternion().rotate(Vector3.Forward)

    def right(self) -> Vector3d:
        return self.quaternion().rotate(Vector3.Right)


class PhysicsComponent(TransformComponent):
    """Transform with gravity, temperature (K), elasticity (Pa) and velocity (m/s)."""

    def __init__(
        self,
        position: Vector,
        rotation: Vector,
        velocity: float = 0.0,
        gravity_modifier: float = 0.0,
        temperature: float = 0.0,
        elasticity: float = 0.0,
    ) -> None:
        super().__init__(position, rotation)
        self.velocity = float(velocity)
        self.gravity_modifier = float(gravity_modifier)
        self.temperature = float(temperature)
        self.elasticity = float(elasticity)