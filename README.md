# tilequest

A small tile-based platformer built on pygame, together with the pieces for
laying out a world of rooms.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing

```
tilequest
tilequest --map-dir path/to/maps
```

The game loads the first `.txt` or `.map` file (in name order) it finds in the
map directory, `game/src/maps` relative to the current directory unless
`--map-dir` says otherwise, and falls back to an empty 10×10 map if none is
found or it cannot be read.

Controls:

- Left / Right arrows: run (slower acceleration while airborne)
- Space: jump; press again in the air for a double jump
- C: switch between explore mode (the camera follows the player) and combat
  mode (the arrow keys move the camera freely)

### Map files

Maps are plain text, one line per row, with the top row first:

| Character | Tile       |
|-----------|------------|
| `#`       | floor: solid and walkable |
| `-`       | platform: walkable from above only |
| `*`       | decoration |
| `.`       | empty (any other character is empty too) |

## Library use

The core pieces work without opening a window:

```python
from tilequest.tilemap import TileMap, tile_to_world
from tilequest.tile import GridPos

level = TileMap.load_from_file("level.map")
print(level.width, level.height)
print(tile_to_world(GridPos(0, 0), level.height))
```

- `tilequest.physics.update_physics` advances an `Entity`
  (`tilequest.entity`) through one frame of gravity and collision against a
  `TileMap`; `Entity.update` adds jumping and horizontal steering.
- `tilequest.world.World` manages `Room`s (`tilequest.room`), keeps their
  adjacency lists up to date and links exits between rooms that adjoin.
- `tilequest.world_editor.WorldEditor` is a world overview you can drive from
  your own pygame loop: feed it a `tilequest.view.FrameInput` (for example
  `FrameInput.from_pygame(events, dt)`) through `update`, which returns the
  index of a room the user clicked on, and call `draw(surface)`. In it,
  W/A/S/D or the arrows pan, the mouse wheel zooms, C toggles room placement
  (drag with the left button; rooms may not overlap), X toggles deletion and
  G toggles the grid. Exits are drawn green when linked and red when not.
- `tilequest.tile_palette.TilePalette` and
  `tilequest.resize_button.ResizeButton` are widgets that pick a tile and grow
  or shrink a map by one row or column, acting on a `tilequest.view.EditContext`.

## What is not included

There is no editor command: the package does not provide a window for painting
tiles inside a room, placing exits by hand or saving a map back to a file. The
world overview and the widgets above are parts you can build such a tool from.