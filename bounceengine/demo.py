"""Demonstrations of the engine's building blocks, printed to standard output."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Callable, Sequence

from .components import TransformComponent
from .event import Event
from .objects import Body, GameObject
from .quaternion import Quaternion
from .serial import (
    QWORD_SIZE,
    create_string,
    create_table,
    dword_to_int,
    int_to_xword,
    parse_string,
    parse_table,
    qword_to_int,
    word_to_int,
)
from .vectors import Vector, Vector2, Vector3, Vector3d, Vector4
from .world import World


def vectors_demo() -> None:
    vec = Vector(4.0, 5.0, 6.0)
    print(vec)
    print(vec.zero())
    v3 = Vector(5.0, 2.0, 6.0)
    v3_2 = Vector(3.0, 2.0, 4.0)
    print(f"{v3.magnitude():g}")
    print(f"{v3.distance(v3_2):g}")
    print(Vector(*(float(n) for n in (5, 7, 8, 9, 5, 8, 3, 5, 7, 8, 3, 4, 5, 7, 8))))
    print(Vector2(1, 2))
    print(Vector3(1, 2, 3))
    print(Vector4(Vector3.Up))
    print(Vector4(5, 4, 3, 2).get_vector2())
    vec3 = Vector()
    print(vec3.set(0, 1).set(1, 2).set(2, 8))
    vec3.set(3, 5)
    print(vec3)


def quaternions_demo() -> None:
    inverted = Vector3d(5, 7, 8).invert()
    identity = Quaternion.from_euler(Vector3d(0, 0, 0))
    norm = Quaternion.from_euler(Vector3d(54, 178, 3)).norm()
    rotated = Quaternion.from_euler(Vector3d(0, 90, 90)).rotate(Vector3d(0, 1, 1))
    long_vector = Vector(5, 6, 78, 8, 8, 7, 9, 6, 63)
    lines = ["", str(inverted), str(identity), f"{norm:g}", str(rotated), str(long_vector)]
    print("\n".join(lines))


def components_demo() -> None:
    transform = TransformComponent(Vector3.Zero, Vector3.Zero)
    print(f"Transform position: {transform.position}")


def world_demo() -> None:
    world = World()
    obj = GameObject(name="A test object", id=1)
    body = Body(name="A test body", id=2)
    print(f"Attaching object: {world.attach_object(obj, True)}")
    print(f"Attaching body (renderable object): {world.attach_object(body, True)}")
    print(f"Detaching object: {world.detach_object(obj, True)}")
    print(f"Detaching body (renderable object): {world.detach_object(body, True)}")


def serialization_demo() -> None:
    sample = b"\xbe\xef\xbe\xef\xbe\xef\xaa\xbb\xcc\xdd\xee\xff"
    print(f"{qword_to_int(sample):x}")
    print(f"{dword_to_int(sample):x}")
    print(f"{word_to_int(sample):x}")
    print(int_to_xword((ord("A") << 8) + ord("B"), 2).decode("latin-1"))
    table = parse_table(create_table([b"this", b"is", b"element"]))
    print(table.describe())
    print()
    print(table.element(1).decode("utf-8"))
    print()
    print(table.element(2).decode("utf-8"))
    print(parse_string(create_string("I eat pastas")).decode("utf-8"))
    shortened = bytes([0, 0, 0, 0, 0, 0, 0, 0xA]) + create_string("I eat pastas")[QWORD_SIZE:]
    print(parse_string(shortened).decode("utf-8"))


def delegates_demo() -> None:
    event = Event(lambda: print("This is a lambda, so I guess it works !"))
    to_remove = partial(print, "This lambda is not supposed to show up.")
    event.add_method(to_remove)
    event.remove_method(to_remove)
    event.add_method(
        lambda: print("This is another lambda, and I'm really glad everything works fine.")
    )
    event.fire()


DEMOS: dict[str, Callable[[], None]] = {
    "vectors": vectors_demo,
    "quaternions": quaternions_demo,
    "components": components_demo,
    "delegates": delegates_demo,
    "serialization": serialization_demo,
    "world": world_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected demonstrations in their fixed order."""
    parser = argparse.ArgumentParser(
        prog="bounceengine", description="Run demonstrations of the engine."
    )
    parser.add_argument(
        "-d", "--demo", action="append", choices=list(DEMOS), default=[],
        help="demonstration to run (may be repeated)",
    )
    parser.add_argument("--all", action="store_true", help="run every demonstration")
    args = parser.parse_args(argv)
    selected = set(DEMOS) if args.all else set(args.demo)
    for name, demo in DEMOS.items():
        if name in selected:
            demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())