"""Base game objects and renderable bodies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .components import Component, PhysicsComponent


class Renderable(ABC):
    """Something that can be drawn."""

    @abstractmethod
    def draw(self) -> None:
        """Draw this object in the current context."""


@dataclass(eq=False)
class GameObject:
    """Base object of the engine, holding a name, an ID and components."""

    name: str = ""
    id: int = 0
    components: list[Component] = field(default_factory=list)

    def try_get_component(self, key: str | int) -> Component | None:
        """Find a component by name (str) or by ID (int); None if absent."""
        if isinstance(key, str):
            return next((c for c in self.components if c.name == key), None)
        return next((c for c in self.components if c.id == key), None)

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def is_renderable(self) -> bool:
        return isinstance(self, Renderable)

    def serialize(self) -> bytes:
        """Serialized form of the object; plain objects carry no data yet."""
        return b""

    def destroy(self) -> None:
        """End every component, drop them and reset the ID."""
        for component in self.components:
            component.end()
        self.components.clear()
        self.id = 0

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Body(GameObject, Renderable):
    """A physical, renderable object in the scene."""

    physics_component: PhysicsComponent | None = None
    mesh_component: Any = None

    def is_renderable(self) -> bool:
        return True

    def draw(self) -> None:
        pass


@dataclass(eq=False)
class Being(Body):
    """A body that can both move and react."""


@dataclass(eq=False)
class Player(Being):
    """A controllable being."""