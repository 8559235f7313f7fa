"""Resource availability flags and a simple append-only file logger."""

from __future__ import annotations

import os
import stat
from enum import IntFlag


class ResourceFlag(IntFlag):
    """Bit flags describing a resource: availability, kind and proximity."""

    UNAVAILABLE = 0b000
    AVAILABLE = 0b001
    FILE = 0b010
    # Distant resources are not supported yet.
    DISTANT = 0b100
    DIRECTORY = 0b000
    LOCAL = 0b000


def look_up_resource(uri: str | os.PathLike[str]) -> ResourceFlag:
    """Return the flags for a resource path; UNAVAILABLE (0) if it cannot be reached."""
    try:
        info = os.stat(uri)
    except (OSError, ValueError):
        return ResourceFlag.UNAVAILABLE
    if stat.S_ISDIR(info.st_mode):
        return ResourceFlag.AVAILABLE | ResourceFlag.DIRECTORY
    return ResourceFlag.AVAILABLE | ResourceFlag.FILE


def log(uri: str | os.PathLike[str], message: str) -> None:
    """Append message to the file at uri."""
    with open(uri, "a", encoding="utf-8") as handle:
        handle.write(message)