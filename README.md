# rubikscube

A sticker-level model of a 3x3 Rubik's cube that follows standard move
notation. It also has the geometry for placing, turning and viewing the cube's
pieces in 3D: camera matrices, piece transforms and the starting layout.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with `pytest`.

## The cube

```python
from rubikscube.cube import Cube3

cube = Cube3()
cube.is_solved()          # True

cube.turn("RUR'U'")       # quarter turns, primes and doubles such as "F2"
cube.state()              # 54 sticker letters, face by face: U, R, F, D, L, B
cube.face_ids("F")        # piece ids of the nine stickers now on the front face

cube.turn("URU'R'")
cube.is_solved()          # True again
```

- In a move string a face letter (`U`, `D`, `F`, `R`, `B`, `L`) may be followed
  by `'` for an anticlockwise turn or by a digit for that many clockwise turns.
  An unknown face letter raises `ValueError`.
- A solved cube's `state()` reads
  `UUUUUUUUURRRRRRRRRFFFFFFFFFDDDDDDDDDLLLLLLLLLBBBBBBBBB`.
- `face_ids` returns an empty list for an unknown face.

`Color`, `Direction`, `Cubie` and `Side` are the parts `Cube3` is built from.
A `Side` is a square grid of `Cubie` stickers; `Side.turn(direction)` rotates
it and then calls the callback it was given, if any.

## 3D geometry

All vectors and matrices are numpy arrays.

- `rubikscube.camera.Camera` holds a `projection` and a `view` matrix (4x4,
  acting on column vectors, depth mapped to 0..1):
  - `set_view_direction`, `set_view_target` and `set_view_yxz` set the view;
    the default up vector is `(0, -1, 0)`.
  - `set_perspective_projection` (field of view in radians) and
    `set_orthographic_projection` set the projection. An invalid aspect ratio
    raises `ValueError`.
- `rubikscube.transform` holds the state of each piece:
  - `CoordSystem` tracks a piece's local axes; `get_axis` says which world axis
    a local axis lies along, and with what sign.
  - `Transform` holds translation, scale and a `(w, x, y, z)` quaternion, and
    gives the model matrix through `matrix()`.
  - `CubeObject.create()` makes a piece with the next free id;
    `CubeObject.rotate(plane, angle, to_round)` turns it about a world axis and,
    with `to_round`, snaps the result back to exact quarter-turn values.
- `rubikscube.layout`:
  - `load_3x3(scaler, base_path)` returns a `Placement` (model file path and
    translation) for each of the 26 visible pieces, indexed by piece id.
  - `load_4x4(scaler, base_path)` does the same for the 56 visible pieces of a
    4x4x4 cube.

## What it does not do

The package computes state and geometry only. It opens no window, draws
nothing, reads no model files (`layout` only builds their paths), has no
keyboard controls or animation loop, does not solve the cube, and provides no
command-line program.