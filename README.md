# bounceengine

The core of a small game engine. It has no third-party dependencies.

## Modules

- `bounceengine.errors`: `ErrorCode`, `BounceError` and `OutOfBoundsError`. `OutOfBoundsError` is also an `IndexError`.
- `bounceengine.vectors`: `Vector`, which can hold any number of values, and the fixed-size integer vectors `Vector2`, `Vector3` and `Vector4` and float vectors `Vector2d`, `Vector3d` and `Vector4d`. These support `+`, `-`, `*` and `/`, as well as `magnitude`, `distance`, `normalize`, `invert`, `zero` and `one`. Using `set(index, value)` with an index equal to the size appends a value. Any index past that raises `OutOfBoundsError`.
- `bounceengine.quaternion`: `Quaternion`. `Quaternion.from_euler` builds one from Euler angles given in degrees. It also has `rotate`, `conjugate`, `norm` and multiplication. The module also provides `degrees_to_radians` and `radians_to_degrees`.
- `bounceengine.serial`: big-endian integer packing with `word_to_int`, `dword_to_int`, `qword_to_int` and `int_to_xword`. It also handles strings with an 8-byte length prefix (`create_string`, `parse_string`) and indexed tables (`create_table`, `parse_table`, `Table`).
  - `parse_string` raises `ValueError` on an invalid buffer.
  - `Table.element` raises `OutOfBoundsError` for an index that is not in the table.
- `bounceengine.resources`: `look_up_resource` returns a `ResourceFlag` (`AVAILABLE | FILE`, `AVAILABLE | DIRECTORY`, or `UNAVAILABLE`). `log` appends text to a file.
- `bounceengine.event`: `Event`, a list of callbacks that `fire()` calls in order.
- `bounceengine.components`: `ComponentClass`, `ComponentStage`, `Component`, `TransformComponent` and `PhysicsComponent`.
  - `TransformComponent` holds a position and a rotation given in degrees.
- `bounceengine.player_stats`: `PlayerStats`, which tracks health, stamina, mana and level. It has `on_level_up` and `on_level_down` events.
- `bounceengine.objects`: `GameObject`, `Renderable`, `Body`, `Being` and `Player`.
- `bounceengine.world`: `World`, which holds objects and keeps a separate list of the ones that are renderable.
- `bounceengine.inventory`: `Item` and `InventoryComponent`. Two `Item`s compare equal when their `id` values match. `InventoryComponent` is bounded by `capacity` when it receives items through transfers.
- `bounceengine.quest`: `Quest`, `Objective` and `ObjectiveState`.
- `bounceengine.color`: `Color`, an RGBA colour packed into one integer as `0xRRGGBBAA`.
- `bounceengine.ui`: `UIElement`, `Panel`, `UIHolder`, `MessageType` and the developer `Console`.
  - `UIElement.render_pixels` returns the element's RGBA pixels as bytes.
  - `Console.flush` appends the collected logs to a file (`./console_out.log` by default) and then clears them.

## Installation

```
pip install .
```

## Example

```python
from bounceengine.vectors import Vector3d
from bounceengine.quaternion import Quaternion
from bounceengine.serial import create_table, parse_table

q = Quaternion.from_euler(Vector3d(0, 90, 90))
print(q.rotate(Vector3d(0, 1, 1)))

table = parse_table(create_table([b"this", b"is", b"element"]))
print(table.element(1))  # b'is'
```

## Demo

The `bounceengine-demo` command prints short demonstrations of the engine's parts. If you give it no options, it runs nothing. Choose the demonstrations with `-d`/`--demo`, which may be repeated. The choices are `vectors`, `quaternions`, `components`, `delegates`, `serialization` and `world`. Use `--all` to run every demonstration:

```
bounceengine-demo --all
bounceengine-demo -d vectors -d world
```

## What it does not do

- There is no window, graphics context or rendering loop.
  - `Body.draw` does nothing.
  - `UIElement.draw` only stores its pixels in `frame`.
- Worlds are not saved to or read from disk. `World.load` and `World.create` both return an empty world for the given URI, and `World.reload` returns the world unchanged.
- `GameObject.serialize` returns empty bytes.

## Tests

```
pip install .[test]
pytest
```