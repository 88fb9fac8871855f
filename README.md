# blockrender

A small OpenGL renderer. It opens a window and draws a lit cube that you look at
through a free-flying first-person camera. It also holds the beginnings of a block
world: chunks of 16 × 128 × 16 blocks, filled with dirt up to height 4.

## Install

```
pip install .
```

Running the window needs a display that supports OpenGL 4.1.

## Run

```
blockrender
```

This opens a 1920 × 1080 window titled "Cool Program", captures the mouse cursor
and draws frames until the window is closed.

Controls:

- `W` / `S`: move forward / back
- `A` / `D`: strafe left / right
- `Space` / `Left Shift`: move up / down
- mouse: look around
- `Escape`: release the mouse cursor

The shader program is read from `../resources/shaders/vertex.glsl` and
`../resources/shaders/fragment.frag`, relative to the working directory. A missing
file raises `FileNotFoundError`.

## Modules

- `blockrender.app`: `App`, `Window`, `Graphics`, `FrameClock` and `main`, the
  command's entry point.
- `blockrender.camera`: `Camera`, with `view_matrix()` and `update(delta_time, input)`.
- `blockrender.input`: `Input`, which tracks held keys and a cursor position from
  window events, and the `Key` codes the controls use.
- `blockrender.transforms`: `normalize`, `look_at` and `perspective` (field of view in
  radians), returning numpy arrays.
- `blockrender.light`: the `Light` dataclass (colour and position).
- `blockrender.shader`: `load_source` and the `Shaders` program.
- `blockrender.objects`: `cube_mesh()`, `Cube` and `Icosphere`.
- `blockrender.chunk`: `ChunkBlockData`, `block_for_position`, `CHUNK_SIZE`, `CHUNK_HEIGHT`.
- `blockrender.blocks`: the `BlockType` enum (`AIR`, `DIRT`).
- `blockrender.chunk_renderer`: `build_chunk_mesh` and `ChunkRenderer`.

## Using the pieces without a window

The maths, input state and world data need no OpenGL context:

```python
import math

from blockrender.blocks import BlockType
from blockrender.camera import Camera
from blockrender.chunk import ChunkBlockData
from blockrender.input import Input, Key
from blockrender.objects import cube_mesh
from blockrender.transforms import perspective

camera = Camera((0.0, 0.0, 3.0), (0.0, 1.0, 0.0), -90.0, 0.0)
controls = Input()
controls.on_key_press(Key.W, 0)
camera.update(0.1, controls)   # moves 0.25 units forward
view = camera.view_matrix()
projection = perspective(math.radians(45.0), 16 / 9, 0.1, 100.0)

vertices, indices = cube_mesh()  # 24 rows of position + normal, 36 indices

chunk = ChunkBlockData()
chunk.generate()
assert chunk.block_at(0, 0, 0) is BlockType.DIRT
assert chunk.block_at(0, 5, 0) is BlockType.AIR
```

`ChunkBlockData.block_at` raises `IndexError` for coordinates outside the chunk or
before `generate()` has been called.

## What it does not do

- No shader files come with the package; the command needs them at the paths above.
- Chunks are not drawn. `build_chunk_mesh` returns an empty mesh, and
  `ChunkRenderer.render` draws nothing.
- `Icosphere` uploads cube geometry and its `render` draws nothing.
- There is no world beyond a single chunk's block data, and nothing is saved.

## Tests

```
pip install .[test]
pytest
```