"""Events: groups of callbacks fired together."""

from __future__ import annotations

from typing import Callable

Callback = Callable[[], None]


class Event:
    """A list of callbacks called in order when the event fires."""

    def __init__(self, *args: Callback) -> None:
        self._methods: list[Callback] = list(args)

    @property
    def methods(self) -> tuple[Callback, ...]:
        return tuple(self._methods)

    def add_method(self, method: Callback) -> None:
        self._methods.append(method)

    def remove_method(self, method: Callback) -> None:
        """Remove every registration of method."""
        self._methods = [m for m in self._methods if m != method]

    def fire(self) -> None:
        for method in list(self._methods):
            method()

    def has_methods(self) -> bool:
        """True if firing this event will call anything."""
        return bool(self._methods)