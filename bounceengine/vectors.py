"""Variable-length vectors and fixed-size 2D/3D/4D vectors."""

from __future__ import annotations

import math
from typing import Any, Callable, ClassVar, Iterator

from .errors import OutOfBoundsError


def _format_component(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


class Vector:
    """A vector of any length holding numbers."""

    # Conversion applied to every stored component; None keeps values as given.
    _COERCE: ClassVar[Callable[[Any], Any] | None] = None

    def __init__(self, *args: Any) -> None:
        self._values = [self._converted(value) for value in args]

    def _converted(self, value: Any) -> Any:
        coerce = type(self)._COERCE
        return value if coerce is None else coerce(value)

    def _like(self, values: list[Any]) -> Vector:
        return type(self)(*values)

    def _display_size(self) -> int:
        return len(self._values)

    def size(self) -> int:
        """Number of components."""
        return len(self._values)

    def get(self, index: int) -> Any:
        """Component at index, or 0 past the end."""
        if index < 0 or index >= len(self._values):
            return 0
        return self._values[index]

    def set(self, index: int, value: Any) -> Vector:
        """Set a component; an index equal to the size appends. Returns self."""
        if index < 0 or index > len(self._values):
            raise OutOfBoundsError(f"index {index} out of bounds for vector of size {len(self._values)}")
        value = self._converted(value)
        if index == len(self._values):
            self._values.append(value)
        else:
            self._values[index] = value
        return self

    def zero(self) -> Vector:
        """A vector of the same length filled with zeros."""
        return self._like([type(value)(0) for value in self._values])

    def one(self) -> Vector:
        """A vector of the same length filled with ones."""
        return self._like([type(value)(1) for value in self._values])

    def apply(self, operation: Callable[[Any], Any]) -> None:
        """Replace every component with operation(component), in place."""
        self._values = [self._converted(operation(value)) for value in self._values]

    def magnitude(self) -> float:
        return math.sqrt(sum(value * value for value in self._values))

    def normalize(self) -> Vector:
        """A unit-length copy, or a zero vector when the magnitude is zero."""
        magnitude = self.magnitude()
        return self / magnitude if magnitude > 0 else self.zero()

    def distance(self, other: Vector) -> float:
        return math.sqrt(
            sum((self.get(i) - other.get(i)) ** 2 for i in range(self.size()))
        )

    def invert(self) -> Vector:
        """A copy with every component negated."""
        return self._like([-value for value in self._values])

    def _combine(self, other: Vector, operation: Callable[[Any, Any], Any]) -> Vector:
        base = other if other.size() > self.size() else self
        return base._like([operation(self.get(i), other.get(i)) for i in range(base.size())])

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self._combine(other, lambda a, b: a * b)
        return self._like([value * other for value in self._values])

    def __rmul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return NotImplemented
        return self * other

    def __truediv__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self._combine(other, lambda a, b: a / b)
        return self._like([value / other for value in self._values])

    def __neg__(self) -> Vector:
        return self.invert()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def to_string(self) -> str:
        size = self._display_size()
        shown = "; ".join(_format_component(value) for value in self._values[:size])
        return f"Vector{size}({shown})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._values)})"


class _FixedVector(Vector):
    DIMENSION = 0

    def __init__(self, *args: Any) -> None:
        if len(args) == 1 and isinstance(args[0], Vector):
            source = args[0]
            args = tuple(source.get(i) for i in range(self.DIMENSION))
        elif len(args) != self.DIMENSION:
            raise TypeError(
                f"{type(self).__name__} takes {self.DIMENSION} components, got {len(args)}"
            )
        super().__init__(*args)

    def _like(self, values: list[Any]) -> Vector:
        if len(values) == self.DIMENSION:
            return type(self)(*values)
        return Vector(*values)

    def _display_size(self) -> int:
        return self.DIMENSION


class Vector2(_FixedVector):
    """A two-dimensional integer vector."""

    DIMENSION = 2
    _COERCE = int

    def x(self) -> int:
        return self._values[0]

    def y(self) -> int:
        return self._values[1]


class Vector3(Vector2):
    """A three-dimensional integer vector."""

    DIMENSION = 3

    def z(self) -> int:
        return self._values[2]

    def get_vector2(self) -> Vector2:
        return Vector2(self.x(), self.y())


class Vector4(Vector3):
    """A four-dimensional integer vector."""

    DIMENSION = 4

    def w(self) -> int:
        return self._values[3]

    def get_vector3(self) -> Vector3:
        return Vector3(self.x(), self.y(), self.z())


class Vector2d(_FixedVector):
    """A two-dimensional floating-point vector."""

    DIMENSION = 2
    _COERCE = float

    def x(self) -> float:
        return self._values[0]

    def y(self) -> float:
        return self._values[1]


class Vector3d(Vector2d):
    """A three-dimensional floating-point vector."""

    DIMENSION = 3

    def z(self) -> float:
        return self._values[2]


class Vector4d(Vector3d):
    """A four-dimensional floating-point vector."""

    DIMENSION = 4

    def w(self) -> float:
        return self._values[3]


Vector2.Up = Vector2(0, 1)
Vector2.Down = Vector2(0, -1)
Vector2.Left = Vector2(-1, 0)
Vector2.Right = Vector2(1, 0)

Vector3.Up = Vector3(0, 1, 0)
Vector3.Down = Vector3(0, -1, 0)
Vector3.Left = Vector3(-1, 0, 0)
Vector3.Right = Vector3(1, 0, 0)
Vector3.One = Vector3(1, 1, 1)
Vector3.Zero = Vector3(0, 0, 0)
Vector3.Forward = Vector3(0, 0, -1)
Vector3.Back = Vector3(0, 0, 1)