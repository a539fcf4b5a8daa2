import pygame
from pygame.math import Vector2

from tilequest.entity import JUMP_VELOCITY
from tilequest.game import START_POSITION, GameState, Mode
from tilequest.game_camera import CAMERA_SPEED
from tilequest.tile import BLUE, LIGHTGRAY, PLAYER_HEIGHT, PLAYER_WIDTH, Tile
from tilequest.tilemap import TileMap, get_current_map, tile_to_world


def make_game():
    return GameState(TileMap(10, 10))


def test_new_game_starts_exploring_at_start_tile():
    game = make_game()
    assert game.mode is Mode.EXPLORE
    assert game.player.grid_position == START_POSITION
    assert game.player.actual_position == tile_to_world(START_POSITION, 10)
    assert game.camera.position == game.player.actual_position
    assert game.player.color == BLUE


def test_camera_position_is_a_copy():
    game = make_game()
    game.player.actual_position.x += 50
    assert game.camera.position != game.player.actual_position


def test_missing_map_dir_gives_empty_map(tmp_path):
    game = GameState(get_current_map(tmp_path / "nowhere"))
    assert (game.map.width, game.map.height) == (10, 10)


def test_toggle_mode_switches_back_and_forth():
    game = make_game()
    game.toggle_mode()
    assert game.mode is Mode.COMBAT
    game.toggle_mode()
    assert game.mode is Mode.EXPLORE


def test_space_makes_player_jump_and_camera_follows():
    game = make_game()
    game.update(set(), {pygame.K_SPACE})
    assert game.player.velocity_y == JUMP_VELOCITY
    assert game.player.is_airborne
    assert game.camera.position == game.player.actual_position


def test_c_key_toggles_mode():
    game = make_game()
    game.update(set(), {pygame.K_c})
    assert game.mode is Mode.COMBAT


def test_combat_mode_moves_camera_not_player():
    game = make_game()
    game.toggle_mode()
    player_before = Vector2(game.player.actual_position)
    camera_before = Vector2(game.camera.position)
    game.update({pygame.K_RIGHT}, set())
    assert game.camera.position == camera_before + Vector2(CAMERA_SPEED, 0)
    assert game.player.actual_position == player_before


def test_player_lands_on_floor():
    tiles = [[Tile.floor()] * 10] + [[Tile.none()] * 10 for _ in range(9)]
    game = GameState(TileMap(10, 10, tiles))
    for _ in range(300):
        game.update(set(), set())
    assert not game.player.is_airborne
    assert game.player.velocity_y == 0.0
    assert game.player.grid_position.y == 1


def test_draw_shows_player_and_map():
    game = make_game()
    surface = pygame.Surface((800, 600))
    game.draw(surface)
    view = game.camera.view(surface.get_size())
    pos = game.player.actual_position
    centre = view.world_to_screen((pos.x + PLAYER_WIDTH / 2, pos.y + PLAYER_HEIGHT / 2))
    assert tuple(surface.get_at((int(centre.x), int(centre.y)))) == BLUE
    inside_map = view.world_to_screen((500, 500))
    assert tuple(surface.get_at((int(inside_map.x), int(inside_map.y)))) == LIGHTGRAY