"""Core of a small game engine: maths, serialization, components, worlds, quests, colours and UI."""

__version__ = "0.1.0"