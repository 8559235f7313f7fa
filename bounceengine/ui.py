"""2D user interface elements, panels and the developer console."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .color import Color
from .objects import Renderable
from .resources import log as append_to_file
from .vectors import Vector2

DEFAULT_BACKGROUND_COLOR = 0x474747FF
DEFAULT_FOREGROUND_COLOR = 0xFFFFFFFF
DEFAULT_STROKE_COLOR = 0x3E3E3EFF
DEFAULT_CHILDREN_BACKGROUND_COLOR = 0x2A2A2AFF

DEFAULT_CONSOLE_LOG = "./console_out.log"


def _rgba(color: Color) -> bytes:
    return bytes((color.r(), color.g(), color.b(), color.a()))


@dataclass(eq=False)
class UIElement:
    """A rectangular 2D element with a stroke border and children."""

    origin: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    size: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    background_color: Color = field(default_factory=lambda: Color(DEFAULT_BACKGROUND_COLOR))
    foreground_color: Color = field(default_factory=lambda: Color(DEFAULT_FOREGROUND_COLOR))
    stroke_color: Color = field(default_factory=lambda: Color(DEFAULT_STROKE_COLOR))
    stroke_size: int = 0
    children: list[UIElement] = field(default_factory=list)
    frame: bytes = b""

    def render_pixels(self) -> bytes:
        """RGBA pixels, row by row: stroke within stroke_size of an edge, background inside."""
        width, height = self.size.x(), self.size.y()
        if width <= 0 or height <= 0:
            return b""
        stroke, background = _rgba(self.stroke_color), _rgba(self.background_color)
        edge = self.stroke_size

        def pixel(px: int, py: int) -> bytes:
            on_border = px < edge or px >= width - edge or py < edge or py >= height - edge
            return stroke if on_border else background

        return b"".join(pixel(px, py) for py in range(height) for px in range(width))

    def draw(self) -> None:
        """Render this element into its frame, then draw its children."""
        self.frame = self.render_pixels()
        for child in self.children:
            child.draw()

    def add_child(self, child: UIElement) -> None:
        self.children.append(child)

    def remove_child(self, child: UIElement) -> None:
        """Remove the first occurrence of child, if present."""
        for position, existing in enumerate(self.children):
            if existing is child:
                del self.children[position]
                return


@dataclass(eq=False)
class Panel(UIElement):
    """A plain rectangular panel."""


class UIHolder(Renderable):
    """Holds all the UI elements to render."""

    def __init__(self, *elements: UIElement) -> None:
        self.elements: list[UIElement] = list(elements)

    def draw(self) -> None:
        for element in self.elements:
            element.draw()

    def add_element(self, element: UIElement) -> None:
        self.elements.append(element)

    def remove_element(self, element: UIElement) -> None:
        """Remove the first occurrence of element, if present."""
        for position, existing in enumerate(self.elements):
            if existing is element:
                del self.elements[position]
                return


class MessageType(Enum):
    """Severity of a console message."""

    # Casual messages of no real importance.
    MESSAGE = "Message"
    # Important information about the program.
    INFO = "Info"
    # Warnings about the engine, runtime or a component.
    WARNING = "Warning"
    # Errors that keep the engine or game from working properly.
    ERROR = "Error"


@dataclass(eq=False)
class Console(Panel):
    """The developer console: a panel collecting log messages."""

    size: Vector2 = field(default_factory=lambda: Vector2(512, 256))
    stroke_size: int = 20
    logs: str = ""

    def log(self, level: MessageType, message: str) -> None:
        """Add a message to the console."""
        self.logs += f"\n{level.value}: {message}"

    def flush(self, path: str = DEFAULT_CONSOLE_LOG) -> None:
        """Append the collected logs to the file at path, then clear them."""
        append_to_file(path, self.logs)
        self.logs = ""