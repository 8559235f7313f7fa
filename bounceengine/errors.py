"""Engine error codes and the exceptions that carry them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Runtime error codes reported by the engine."""

    NERROR = 0
    # Raised when getting or setting an out of bounds value.
    OUT_OF_BOUNDS = 1
    # Raised when the graphics driver is older than the engine supports.
    EARLY_GL_VERSION = 2
    # Raised when the renderer meets an error.
    GL_ERROR = 3


class BounceError(Exception):
    """Base exception of the engine, tagged with an ErrorCode."""

    default_code = ErrorCode.NERROR

    def __init__(self, message: str = "", code: ErrorCode | int | None = None) -> None:
        self.code = self.default_code if code is None else ErrorCode(code)
        super().__init__(message or f"{self.code.name} (error code {self.code.value})")


class OutOfBoundsError(BounceError, IndexError):
    """An index lies outside the valid range."""

    default_code = ErrorCode.OUT_OF_BOUNDS