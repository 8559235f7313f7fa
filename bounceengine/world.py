"""Worlds: scenes holding objects, with a separate list of renderable ones."""

from __future__ import annotations

from .objects import GameObject, Renderable
from .resources import look_up_resource


class World(GameObject):
    """A scene that holds objects."""

    def __init__(self, uri: str = "") -> None:
        super().__init__()
        self.uri = uri
        self.objects: list[GameObject] = []
        self._renderable: list[Renderable] = []
        # Loading saved worlds is not supported yet; a missing resource means a new world.
        self._resource_flags = look_up_resource(uri) if uri else 0

    @staticmethod
    def create(uri: str) -> World:
        """Create a new world bound to uri."""
        return World(uri)

    @staticmethod
    def load(uri: str) -> World:
        """Load a world from uri."""
        return World(uri)

    def reload(self) -> World:
        """Return the world to its saved state."""
        return self

    def unload(self) -> None:
        """Destroy every object of this world and empty it."""
        for obj in self.objects:
            obj.destroy()
        self.objects.clear()
        self._renderable.clear()

    @staticmethod
    def _contains(items: list, obj: object) -> bool:
        return any(item is obj for item in items)

    @staticmethod
    def _remove(items: list, obj: object) -> None:
        for position, item in enumerate(items):
            if item is obj:
                del items[position]
                return

    def attach_object(self, obj: GameObject, check: bool = False) -> bool:
        """Attach obj; with check, return whether it is now present in every list it belongs to."""
        renderable = isinstance(obj, Renderable)
        self.objects.append(obj)
        if renderable:
            self._renderable.append(obj)
        if not check:
            return True
        found = self._contains(self.objects, obj)
        if renderable:
            return found and self._contains(self._renderable, obj)
        return found

    def detach_object(self, obj: GameObject, check: bool = False) -> bool:
        """Detach obj; with check, return whether it is gone from every list."""
        renderable = isinstance(obj, Renderable)
        self._remove(self.objects, obj)
        if renderable:
            self._remove(self._renderable, obj)
        if not check:
            return True
        gone = not self._contains(self.objects, obj)
        if renderable:
            return gone and not self._contains(self._renderable, obj)
        return gone

    def renderable(self) -> tuple[Renderable, ...]:
        """The renderable objects of this world."""
        return tuple(self._renderable)