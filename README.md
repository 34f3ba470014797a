# spellhaven

Game logic for a voxel world, written in plain Python with no runtime
dependencies. The package has no rendering or engine code. It covers the
decisions a voxel game makes each frame: which chunks to split into finer
detail, which generation tasks to start, how the player moves, and how
objects rise and sink.

## Modules

- `spellhaven.utils`
  - `div_floor(x, y)` divides `x` by `y` and subtracts one whenever exactly
    one operand is negative. For integers it truncates first. The subtraction
    happens even when the quotient is exact, so `div_floor(-8, 2)` is `-5`.
  - `rotate_around(pos, pivot, angle, direction)` rotates a point around a
    pivot by `angle` degrees about the axis given by `RotationDirection`
    (`X`, `Y` or `Z`).
  - `vec_round_to_int(vec)` rounds each component half away from zero and
    clamps the result to the 32-bit integer range.
- `spellhaven.animations`
  - `SpawnAnimation` and `DespawnAnimation` move an object's height by 40
    units over one second, easing out when rising and easing in when sinking.
  - `advance(y, delta)` returns an `AnimationStep` holding the new `y` and
    whether the animation has finished.
- `spellhaven.blocks`
  - `BlockType`: `AIR`, `STONE`, `GRASS`, `PATH` and `SNOW`.
  - `texture_index()` gives the block's atlas tile and `texture_id()` its
    texture layer.
  - Also defines `CHUNK_SIZE` (64) and `VOXEL_SIZE` (1.0).
- `spellhaven.quad_tree`
  - `QuadTreeBuilder` builds a level-of-detail tree of `Leaf` and `Branch`
    nodes. A node is split while any `ChunkLoader` is within that loader's
    `lod_range` of it.
  - `upgrade` refines or merges an existing tree to match where the loaders
    are now.
  - `collect_entities` lists every entity a subtree holds.
  - `filter_for_deletion` despawns entities that still exist but never
    finished generating, and keeps the rest.
- `spellhaven.wave_function_collapse`
  - `Flags` lists the possible contents of a tile.
  - `WfcTile.remove_state` rules states out of a tile and narrows the tiles
    above and below it.
  - `build_tilemap()` lays out the demo tileset as a 4×4 grid of tiles, each
    open to every state.
- `spellhaven.chunk_tasks`
  - `TaskScheduler.schedule(requests, running)` starts `ChunkTaskRequest`s in
    order of finest level of detail first, up to `max_tasks` running tasks
    (default 5).
  - When a request's country cache is missing, the scheduler asks for it
    once and marks it `GenerationState.GENERATING`.
  - `complete_country` stores a finished cache.
  - `ChunkTriangles` counts triangles per level of detail.
  - `country_position`, `chunk_name` and `subchunk_name` are helpers.
- `spellhaven.debug`
  - `DebugSettings` holds the debug switches: `unlock_camera`,
    `show_path_debug`, `path_circle_radius` and `path_show_range`.
- `spellhaven.hud`
  - Text for the statistics panel: `format_fps`, `format_triangles`,
    `format_country_tasks` and `format_chunk_tasks`.
  - `group_thousands` writes a number with its digits grouped by apostrophes.
- `spellhaven.player`
  - `Player.update(keys, delta, grounded, camera_yaw)` moves the player one
    frame from a `KeyState`. It handles flying, sprinting, gravity and
    jumping, and returns a `PlayerStep` with the translation and the new
    facing.
  - `follow_body` and `follow_camera` move the body and the camera focus a
    quarter of the way towards the player each call.
- `spellhaven.main_menu`
  - `MainMenu.start()` turns the seed phrase into a 64-bit world seed with
    `hash_seed` (SipHash-1-3 with zero keys), hides the menu and calls
    `on_start`.

## What it does not do

The package does not include:

- terrain or structure generation
- meshing
- physics
- rendering, a window, or anything that draws on screen

The scheduler and the quad tree decide which work to start. The caller
supplies the functions that spawn entities and the caches that the work
produces.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from spellhaven.hud import format_triangles
from spellhaven.utils import div_floor

print(div_floor(-7, 2))                   # -4
print(format_triangles([1234567, 0, 42]))  # Triangles: 1'234'567, 0, 42, Total: 1234609
```