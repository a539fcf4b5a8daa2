import pygame
import pytest

from tilequest.tile import BLACK, LIGHTGRAY, TILE_SIZE, YELLOW, GridPos, Tile, TileType
from tilequest.tilemap import TileMap, get_current_map, tile_to_world


class _IdentityCamera:
    def world_to_screen(self, point):
        return point


def test_new_map_is_empty():
    tilemap = TileMap(3, 2)
    assert len(tilemap.tiles) == tilemap.height
    assert all(len(row) == tilemap.width for row in tilemap.tiles)
    assert all(t == Tile.none() for row in tilemap.tiles for t in row)
    assert tilemap.background == LIGHTGRAY


def test_load_from_file_reverses_rows(tmp_path):
    path = tmp_path / "level.map"
    path.write_text("#-\n*.\n", encoding="utf-8")
    tilemap = TileMap.load_from_file(path)
    assert (tilemap.width, tilemap.height) == (2, 2)
    assert tilemap.tiles[0][0].tile_type is TileType.DECORATION
    assert tilemap.tiles[0][1].tile_type is TileType.NONE
    assert tilemap.tiles[1][0].tile_type is TileType.FLOOR
    assert tilemap.tiles[1][1].tile_type is TileType.PLATFORM


def test_load_handles_crlf_and_unknown_chars(tmp_path):
    path = tmp_path / "level.txt"
    path.write_bytes(b"#?\r\n##\r\n")
    tilemap = TileMap.load_from_file(path)
    assert tilemap.width == 2
    assert tilemap.tiles[1][1] == Tile.none()
    assert tilemap.tiles[0] == [Tile.floor(), Tile.floor()]


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.map"
    path.write_text("", encoding="utf-8")
    tilemap = TileMap.load_from_file(path)
    assert (tilemap.width, tilemap.height, tilemap.tiles) == (0, 0, [])


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TileMap.load_from_file(tmp_path / "absent.map")


def test_get_tile():
    tilemap = TileMap(3, 2)
    tilemap.tiles[1][2] = Tile.floor()
    assert tilemap.get_tile(GridPos(2, 1)) == Tile.floor()
    assert tilemap.get_tile(GridPos(3, 1)) is None
    assert tilemap.get_tile(GridPos(0, 2)) is None
    assert tilemap.get_tile(GridPos(-1, 0)) is None


def test_pixel_to_grid_floors():
    assert TileMap.pixel_to_grid(0.0) == 0
    assert TileMap.pixel_to_grid(TILE_SIZE) == 1
    assert TileMap.pixel_to_grid(TILE_SIZE - 0.5) == 0
    assert TileMap.pixel_to_grid(-0.5) == -1


def test_any_tiles_in_range():
    tilemap = TileMap(3, 3)
    tilemap.tiles[1][2] = Tile.platform()
    assert tilemap.any_tiles_in_range(range(0, 3), range(1, 2), lambda t: t.is_walkable)
    assert not tilemap.any_tiles_in_range(range(0, 3), range(1, 2), lambda t: t.is_solid)
    assert not tilemap.any_tiles_in_range(range(0, 2), range(0, 3), lambda t: t.is_walkable)


def test_any_tiles_in_range_skips_out_of_bounds():
    tilemap = TileMap(2, 2)
    assert not tilemap.any_tiles_in_range(range(-5, 10), range(-5, 10), lambda t: True) is False
    assert not tilemap.any_tiles_in_range(range(5, 10), range(-5, 0), lambda t: True)


def test_get_current_map_loads_first_map(tmp_path):
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    (tmp_path / "level.map").write_text("###\n", encoding="utf-8")
    tilemap = get_current_map(tmp_path)
    assert (tilemap.width, tilemap.height) == (3, 1)
    assert tilemap.tiles[0] == [Tile.floor()] * 3


@pytest.mark.parametrize("make_dir", [True, False])
def test_get_current_map_falls_back(tmp_path, make_dir):
    target = tmp_path / "maps"
    if make_dir:
        target.mkdir()
    tilemap = get_current_map(target)
    assert (tilemap.width, tilemap.height) == (10, 10)


def test_tile_to_world_round_trip():
    height = 5
    for x in range(3):
        for y in range(height):
            world = tile_to_world(GridPos(x, y), height)
            assert world.x == x * TILE_SIZE
            assert height - 1 - world.y / TILE_SIZE == y


def test_draw_places_bottom_row_at_bottom():
    tilemap = TileMap(3, 2)
    tilemap.tiles[0][0] = Tile.floor()
    tilemap.tiles[1][2] = Tile.decoration()
    surface = pygame.Surface((int(3 * TILE_SIZE), int(2 * TILE_SIZE)))
    tilemap.draw(surface, _IdentityCamera())
    half = int(TILE_SIZE / 2)
    assert surface.get_at((half, int(TILE_SIZE) + half)) == BLACK
    assert surface.get_at((int(2 * TILE_SIZE) + half, half)) == YELLOW
    assert surface.get_at((half, half)) == LIGHTGRAY