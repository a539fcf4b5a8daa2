"""Tile maps: loading, lookup, range queries and drawing."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Tuple, Union

import pygame
from pygame.math import Vector2

from tilequest.tile import LIGHTGRAY, TILE_SIZE, Color, GridPos, Tile, TileType

DEFAULT_MAP_DIR = Path("game/src/maps")
MAP_SUFFIXES = (".txt", ".map")

_CHAR_TILES = {
    "#": Tile.floor,
    "-": Tile.platform,
    "*": Tile.decoration,
    ".": Tile.none,
}


class WorldToScreen(Protocol):
    def world_to_screen(self, point: Sequence[float]) -> Sequence[float]: ...


def _tile_for_char(char: str) -> Tile:
    return _CHAR_TILES.get(char, Tile.none)()


def _split_lines(text: str) -> List[str]:
    *terminated, last = text.split("\n")
    lines = [line.removesuffix("\r") for line in terminated]
    if last:
        lines.append(last)
    return lines


def _fill_world_rect(
    surface: "pygame.Surface",
    camera: WorldToScreen,
    x: float,
    y: float,
    w: float,
    h: float,
    color: Color,
) -> None:
    x0, y0 = camera.world_to_screen((x, y))
    x1, y1 = camera.world_to_screen((x + w, y + h))
    left, right = sorted((round(x0), round(x1)))
    top, bottom = sorted((round(y0), round(y1)))
    pygame.draw.rect(surface, color, pygame.Rect(left, top, right - left, bottom - top))


@dataclass
class TileMap:
    """A grid of tiles; row 0 of ``tiles`` is the bottom row of the map."""

    width: int
    height: int
    tiles: List[List[Tile]] = field(default_factory=list)
    background: Color = LIGHTGRAY

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [[Tile.none()] * self.width for _ in range(self.height)]

    @classmethod
    def load_from_file(cls, path: Union[str, Path]) -> TileMap:
        """Read a map whose first text line is the top row of the map."""
        with open(path, encoding="utf-8", newline="") as fh:
            text = fh.read()
        rows = [[_tile_for_char(c) for c in line] for line in _split_lines(text)]
        width = len(rows[0]) if rows else 0
        return cls(width, len(rows), list(reversed(rows)))

    def draw(self, surface: "pygame.Surface", camera: WorldToScreen) -> None:
        """Draw the background and every non-empty tile, top row first on screen."""
        _fill_world_rect(
            surface,
            camera,
            0.0,
            0.0,
            self.width * TILE_SIZE,
            self.height * TILE_SIZE,
            self.background,
        )
        for y, row in enumerate(reversed(self.tiles)):
            for x, tile in enumerate(row):
                if tile.tile_type is not TileType.NONE:
                    _fill_world_rect(
                        surface,
                        camera,
                        x * TILE_SIZE,
                        y * TILE_SIZE,
                        TILE_SIZE,
                        TILE_SIZE,
                        tile.color,
                    )

    def get_tile(self, pos: GridPos) -> Optional[Tile]:
        """The tile at a position, or None if there is none there."""
        indices = pos.as_indices()
        if indices is None:
            return None
        x, y = indices
        if y >= len(self.tiles) or x >= len(self.tiles[y]):
            return None
        return self.tiles[y][x]

    @staticmethod
    def pixel_to_grid(pixel: float) -> int:
        return math.floor(pixel / TILE_SIZE)

    def any_tiles_in_range(
        self,
        x_range: Iterable[int],
        y_range: Iterable[int],
        predicate: Callable[[Tile], bool],
    ) -> bool:
        """Whether any in-bounds tile over the given columns and rows matches."""
        rows = tuple(y_range)
        for x in x_range:
            for y in rows:
                pos = GridPos(x, y)
                if not pos.is_in_bounds(self.width, self.height):
                    continue
                tile = self.get_tile(pos)
                if tile is not None and predicate(tile):
                    return True
        return False


def get_current_map(map_dir: Union[str, Path] = DEFAULT_MAP_DIR) -> TileMap:
    """Load the first map file in a directory, or an empty 10x10 map."""
    map_dir = Path(map_dir)
    try:
        entries = sorted(map_dir.iterdir())
    except OSError:
        entries = []
    path = next((p for p in entries if p.suffix in MAP_SUFFIXES), None)

    if path is None:
        print(f"No map files found in {str(map_dir)!r}", file=sys.stderr)
    else:
        try:
            return TileMap.load_from_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Failed to load map from {str(path)!r}: {exc}", file=sys.stderr)

    return TileMap(10, 10)


def tile_to_world(grid_position: GridPos, map_height: int) -> Vector2:
    """Top-left world position of a tile given in bottom-up grid coordinates."""
    return Vector2(
        grid_position.x * TILE_SIZE,
        (map_height - 1.0 - grid_position.y) * TILE_SIZE,
    )


Point = Tuple[float, float]