"""The overview of all rooms: selecting, placing and deleting rooms."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable, Optional, Sequence, Tuple

import pygame
from pygame.math import Vector2

from tilequest.room import ExitDirection, Room
from tilequest.tile import BLACK, BLUE, GREEN, LIGHTGRAY, RED, Color
from tilequest.view import DEFAULT_SCREEN_SIZE, LEFT_BUTTON, Camera2D, FrameInput
from tilequest.world import World

ROOM_SCALE_FACTOR = 8.0
WORLD_EDITOR_ZOOM_FACTOR = 1.0
HIGHLIGHT_COLOR: Color = (0, 255, 0, 128)
HIGHLIGHT_ERROR_COLOR: Color = (255, 0, 0, 128)
LINE_THICKNESS_MULTIPLIER = 0.02
ROOM_LINE_INSET = 0.5
GRID_LINE_COLOR: Color = (128, 128, 128, 51)
HOVER_LINE_THICKNESS = 0.05
PAN_SPEED = 500.0
ZOOM_SPEED_FACTOR = 0.1
MIN_ZOOM = 0.003
MAX_ZOOM = 0.01
BASE_FONT_SIZE = 50.0
EXIT_MARKER_THICKNESS = 2.0
EXIT_MARKER_OFFSET = 1.0

Rect = Tuple[float, float, float, float]


class WorldEditorMode(Enum):
    """What a left click does in the world view."""

    SELECTING = auto()
    PLACING_ROOM = auto()
    DELETING_ROOM = auto()


def scaled_room_rect(room: Room) -> Rect:
    """The room's (x, y, width, height) in drawing units."""
    size = room.size()
    return (
        room.position.x * ROOM_SCALE_FACTOR,
        room.position.y * ROOM_SCALE_FACTOR,
        size.x * ROOM_SCALE_FACTOR,
        size.y * ROOM_SCALE_FACTOR,
    )


def rect_from_points(p1: Sequence[float], p2: Sequence[float]) -> Tuple[Vector2, Vector2]:
    """Top-left corner and size of the cells spanned by two cell positions."""
    top_left = Vector2(min(p1[0], p2[0]), min(p1[1], p2[1]))
    size = Vector2(abs(p1[0] - p2[0]) + 1.0, abs(p1[1] - p2[1]) + 1.0)
    return top_left, size


def _contains(rect: Rect, point: Sequence[float]) -> bool:
    x, y, w, h = rect
    return x <= point[0] < x + w and y <= point[1] < y + h


def _camera_for_room(room: Room, screen_size: Tuple[float, float]) -> Camera2D:
    size = room.size()
    scaled = size * ROOM_SCALE_FACTOR
    zoom = WORLD_EDITOR_ZOOM_FACTOR / max(scaled.x, scaled.y)
    return Camera2D(
        target=(room.position + size / 2.0) * ROOM_SCALE_FACTOR,
        zoom=Vector2(zoom, zoom),
        screen_size=screen_size,
    )


def _paint(
    surface: "pygame.Surface", color: Color, paint: Callable[["pygame.Surface", Color], None]
) -> None:
    if len(color) < 4 or color[3] == 255:
        paint(surface, color)
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    paint(overlay, color)
    surface.blit(overlay, (0, 0))


class WorldEditor:
    """Shows every room of a world and lets the user pick, add or remove rooms."""

    def __init__(self, width: int, height: int) -> None:
        self.world = World()
        first = self.world.create_room("1", (0.0, 0.0), (float(width), float(height)))
        self.camera = _camera_for_room(self.world.rooms[first], DEFAULT_SCREEN_SIZE)
        self.mode = WorldEditorMode.SELECTING
        self.show_grid = True
        self.placing_start: Optional[Vector2] = None
        self.placing_end: Optional[Vector2] = None
        self._mouse_pos: Optional[Tuple[float, float]] = None

    def update(self, frame: FrameInput) -> Optional[int]:
        """Handle one frame; return the index of a room the user opened, if any."""
        self.camera.screen_size = frame.screen_size
        self._mouse_pos = frame.mouse_position
        self.update_camera(frame)

        self.world.link_all_exits()

        if pygame.K_c in frame.keys_pressed:
            self.toggle_placing_room()
        if pygame.K_x in frame.keys_pressed:
            self.toggle_delete_room()
        if pygame.K_g in frame.keys_pressed:
            self.show_grid = not self.show_grid

        if self.mode is WorldEditorMode.SELECTING:
            return self._update_selecting(frame)
        if self.mode is WorldEditorMode.PLACING_ROOM:
            return self._update_placing(frame)
        return self._update_deleting(frame)

    def _room_under(self, screen_pos: Sequence[float]) -> Optional[int]:
        point = self.camera.screen_to_world(screen_pos)
        return next(
            (i for i, room in enumerate(self.world.rooms) if _contains(scaled_room_rect(room), point)),
            None,
        )

    def _mouse_tile(self, screen_pos: Sequence[float]) -> Vector2:
        world = self.camera.screen_to_world(screen_pos) / ROOM_SCALE_FACTOR
        return Vector2(math.floor(world.x), math.floor(world.y))

    def _update_selecting(self, frame: FrameInput) -> Optional[int]:
        if LEFT_BUTTON in frame.buttons_pressed:
            return self._room_under(frame.mouse_position)
        return None

    def _update_deleting(self, frame: FrameInput) -> Optional[int]:
        if LEFT_BUTTON in frame.buttons_pressed:
            idx = self._room_under(frame.mouse_position)
            if idx is not None:
                self.world.delete_room(idx)
        return None

    def _update_placing(self, frame: FrameInput) -> Optional[int]:
        tile = self._mouse_tile(frame.mouse_position)

        if LEFT_BUTTON in frame.buttons_pressed:
            self.placing_start = Vector2(tile)
            self.placing_end = Vector2(tile)
        if LEFT_BUTTON in frame.buttons_down:
            self.placing_end = Vector2(tile)

        if LEFT_BUTTON in frame.buttons_released:
            if self.placing_start is not None and self.placing_end is not None:
                top_left, size = rect_from_points(self.placing_start, self.placing_end)
                self._reset_placing()
                if not self.intersects_existing_room(top_left, size):
                    idx = self.world.create_room("NewRoom", top_left, size)
                    self.mode = WorldEditorMode.SELECTING
                    return idx
        return None

    def intersects_existing_room(self, top_left: Sequence[float], size: Sequence[float]) -> bool:
        """Whether a rectangle of cells overlaps any room (touching is allowed)."""
        a_left, a_top = top_left[0], top_left[1]
        a_right, a_bottom = a_left + size[0], a_top + size[1]
        for room in self.world.rooms:
            room_size = room.size()
            b_left, b_top = room.position.x, room.position.y
            b_right, b_bottom = b_left + room_size.x, b_top + room_size.y
            if a_left < b_right and a_right > b_left and a_top < b_bottom and a_bottom > b_top:
                return True
        return False

    def _reset_placing(self) -> None:
        self.placing_start = None
        self.placing_end = None

    def toggle_placing_room(self) -> None:
        self.mode = (
            WorldEditorMode.SELECTING
            if self.mode is WorldEditorMode.PLACING_ROOM
            else WorldEditorMode.PLACING_ROOM
        )

    def toggle_delete_room(self) -> None:
        self.mode = (
            WorldEditorMode.SELECTING
            if self.mode is WorldEditorMode.DELETING_ROOM
            else WorldEditorMode.DELETING_ROOM
        )

    def update_camera(self, frame: FrameInput) -> None:
        """Pan with WASD or the arrows and zoom with the mouse wheel."""
        keys = frame.keys_down
        direction = Vector2(0.0, 0.0)
        if pygame.K_w in keys or pygame.K_UP in keys:
            direction.y -= 1.0
        if pygame.K_s in keys or pygame.K_DOWN in keys:
            direction.y += 1.0
        if pygame.K_a in keys or pygame.K_LEFT in keys:
            direction.x -= 1.0
        if pygame.K_d in keys or pygame.K_RIGHT in keys:
            direction.x += 1.0
        if direction.length_squared() > 0.0:
            self.camera.target += direction.normalize() * PAN_SPEED * frame.dt

        if frame.wheel != 0.0:
            zoom_speed = ZOOM_SPEED_FACTOR * self.camera.zoom.x
            new_zoom = max(MIN_ZOOM, min(self.camera.zoom.x + frame.wheel * zoom_speed, MAX_ZOOM))
            self.show_grid = new_zoom >= MAX_ZOOM / 2.0
            self.camera.zoom = Vector2(new_zoom, new_zoom)

    def center_on_room(self, room_idx: int) -> None:
        """Point the camera at a room, zoomed to fit it."""
        self.camera = _camera_for_room(self.world.rooms[room_idx], self.camera.screen_size)

    def draw(self, surface: "pygame.Surface") -> None:
        """Draw the grid, rooms, exits, highlights and room names."""
        self.camera.screen_size = surface.get_size()
        surface.fill(LIGHTGRAY)
        if self.show_grid:
            self._draw_grid(surface)
        self._draw_rooms(surface)
        self._draw_exits(surface)
        if self.mode in (WorldEditorMode.SELECTING, WorldEditorMode.DELETING_ROOM):
            self._draw_hovered_room(surface)
        if self.mode is WorldEditorMode.PLACING_ROOM:
            self._draw_placing_preview(surface)
        self._draw_room_names(surface)

    def _screen_rect(self, x: float, y: float, w: float, h: float) -> pygame.Rect:
        x0, y0 = self.camera.world_to_screen((x, y))
        x1, y1 = self.camera.world_to_screen((x + w, y + h))
        left, right = sorted((round(x0), round(x1)))
        top, bottom = sorted((round(y0), round(y1)))
        return pygame.Rect(left, top, right - left, bottom - top)

    def _pixels(self, world_length: float) -> int:
        scale = abs(self.camera.zoom.x) * self.camera.screen_size[0] / 2.0
        return max(1, round(world_length * scale))

    def _inset_rect(self, rect: Rect) -> pygame.Rect:
        x, y, w, h = rect
        inset = ROOM_LINE_INSET * ROOM_SCALE_FACTOR
        return self._screen_rect(x + inset / 2.0, y + inset / 2.0, w - inset, h - inset)

    def _draw_grid(self, surface: "pygame.Surface") -> None:
        step = ROOM_SCALE_FACTOR
        width = self._pixels(LINE_THICKNESS_MULTIPLIER / 2.0 / self.camera.zoom.x)
        target = self.camera.target
        half_w = 1.0 / abs(self.camera.zoom.x)
        half_h = 1.0 / abs(self.camera.zoom.y)
        start_x = math.floor((target.x - half_w) / step) * step
        start_y = math.floor((target.y - half_h) / step) * step
        end_x = target.x + half_w + step
        end_y = target.y + half_h + step

        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for i in range(int((end_x - start_x) // step) + 1):
            x = start_x + i * step
            a = self.camera.world_to_screen((x, start_y))
            b = self.camera.world_to_screen((x, end_y))
            pygame.draw.line(overlay, GRID_LINE_COLOR, a, b, width)
        for i in range(int((end_y - start_y) // step) + 1):
            y = start_y + i * step
            a = self.camera.world_to_screen((start_x, y))
            b = self.camera.world_to_screen((end_x, y))
            pygame.draw.line(overlay, GRID_LINE_COLOR, a, b, width)
        surface.blit(overlay, (0, 0))

    def _draw_rooms(self, surface: "pygame.Surface") -> None:
        width = self._pixels(LINE_THICKNESS_MULTIPLIER / self.camera.zoom.x)
        for room in self.world.rooms:
            pygame.draw.rect(surface, BLUE, self._inset_rect(scaled_room_rect(room)), width)

    def _draw_exits(self, surface: "pygame.Surface") -> None:
        for room in self.world.rooms:
            for exit, (world_pos, direction) in zip(room.exits, room.world_exit_positions()):
                color = GREEN if exit.target_room_id is not None else RED
                self._draw_exit_marker(surface, world_pos, direction, color)

    def _draw_exit_marker(
        self, surface: "pygame.Surface", pos: Vector2, direction: ExitDirection, color: Color
    ) -> None:
        s = ROOM_SCALE_FACTOR
        t = EXIT_MARKER_THICKNESS
        o = EXIT_MARKER_OFFSET
        if direction is ExitDirection.UP:
            rect = (pos.x * s, pos.y * s - o, s, t)
        elif direction is ExitDirection.DOWN:
            rect = (pos.x * s, pos.y * s + s - t + o, s, t)
        elif direction is ExitDirection.LEFT:
            rect = ((pos.x + 1.0) * s - o, pos.y * s, t, s)
        else:
            rect = ((pos.x - 1.0) * s + s - t + o, pos.y * s, t, s)
        pygame.draw.rect(surface, color, self._screen_rect(*rect))

    def _draw_hovered_room(self, surface: "pygame.Surface") -> None:
        if self._mouse_pos is None:
            return
        idx = self._room_under(self._mouse_pos)
        if idx is None:
            return
        color = (
            HIGHLIGHT_ERROR_COLOR if self.mode is WorldEditorMode.DELETING_ROOM else HIGHLIGHT_COLOR
        )
        rect = self._inset_rect(scaled_room_rect(self.world.rooms[idx]))
        _paint(surface, color, lambda target, c: pygame.draw.rect(target, c, rect))

    def _draw_placing_preview(self, surface: "pygame.Surface") -> None:
        s = ROOM_SCALE_FACTOR
        if self.placing_start is not None and self.placing_end is not None:
            top_left, size = rect_from_points(self.placing_start, self.placing_end)
            color = HIGHLIGHT_ERROR_COLOR if self.intersects_existing_room(top_left, size) else HIGHLIGHT_COLOR
            rect = self._inset_rect((top_left.x * s, top_left.y * s, size.x * s, size.y * s))
            width = self._pixels(HOVER_LINE_THICKNESS / self.camera.zoom.x)
            _paint(surface, color, lambda target, c: pygame.draw.rect(target, c, rect, width))
        elif self._mouse_pos is not None:
            tile = self._mouse_tile(self._mouse_pos)
            color = (
                HIGHLIGHT_ERROR_COLOR
                if self.intersects_existing_room(tile, (1.0, 1.0))
                else HIGHLIGHT_COLOR
            )
            rect = self._screen_rect(tile.x * s, tile.y * s, s, s)
            _paint(surface, color, lambda target, c: pygame.draw.rect(target, c, rect))

    def _draw_room_names(self, surface: "pygame.Surface") -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        for room in self.world.rooms:
            if not room.name:
                continue
            x, y, w, h = scaled_room_rect(room)
            center = self.camera.world_to_screen((x + w / 2.0, y + h / 2.0))
            room_scale = (w + h) / 2.0 / 60.0
            font_size = int(BASE_FONT_SIZE * room_scale * (self.camera.zoom.x * 100.0))
            if font_size < 1:
                continue
            text = pygame.font.Font(None, font_size).render(room.name, True, BLACK)
            if h > w:
                text = pygame.transform.rotate(text, -90)
            surface.blit(text, text.get_rect(center=(round(center.x), round(center.y))))