"""Buttons around a tile map that grow or shrink it by one row or column."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Sequence, Tuple

import pygame
from pygame.math import Vector2

from tilequest.text_button import TextButton
from tilequest.tile import BLACK, GREEN, RED, TILE_SIZE, Color, Tile
from tilequest.tilemap import TileMap
from tilequest.view import Camera2D, EditContext, UiElement

BUTTON_SIZE = 30.0
BUTTON_FONT_SIZE = 50.0


class ResizeAction(Enum):
    """Which side of the map changes, and whether it grows or shrinks."""

    ADD_TOP = auto()
    REMOVE_TOP = auto()
    ADD_BOTTOM = auto()
    REMOVE_BOTTOM = auto()
    ADD_LEFT = auto()
    REMOVE_LEFT = auto()
    ADD_RIGHT = auto()
    REMOVE_RIGHT = auto()


# (change of room position, change of map size) for each action.
_RESIZE: Dict[ResizeAction, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    ResizeAction.ADD_TOP: ((0.0, -1.0), (0.0, 1.0)),
    ResizeAction.REMOVE_TOP: ((0.0, 1.0), (0.0, -1.0)),
    ResizeAction.ADD_BOTTOM: ((0.0, 0.0), (0.0, 1.0)),
    ResizeAction.REMOVE_BOTTOM: ((0.0, 0.0), (0.0, -1.0)),
    ResizeAction.ADD_LEFT: ((-1.0, 0.0), (1.0, 0.0)),
    ResizeAction.REMOVE_LEFT: ((1.0, 0.0), (-1.0, 0.0)),
    ResizeAction.ADD_RIGHT: ((0.0, 0.0), (1.0, 0.0)),
    ResizeAction.REMOVE_RIGHT: ((0.0, 0.0), (-1.0, 0.0)),
}


def _overlaps(
    pos_a: Sequence[float], size_a: Sequence[float], pos_b: Sequence[float], size_b: Sequence[float]
) -> bool:
    return (
        pos_a[0] < pos_b[0] + size_b[0]
        and pos_a[0] + size_a[0] > pos_b[0]
        and pos_a[1] < pos_b[1] + size_b[1]
        and pos_a[1] + size_a[1] > pos_b[1]
    )


def _resize(action: ResizeAction, map: TileMap, room_position: Vector2) -> bool:
    if action is ResizeAction.ADD_TOP:
        map.tiles.insert(0, [Tile.none()] * map.width)
        map.height += 1
        room_position.y -= 1.0
    elif action is ResizeAction.REMOVE_TOP:
        if map.height <= 1:
            return False
        del map.tiles[0]
        map.height -= 1
        room_position.y += 1.0
    elif action is ResizeAction.ADD_BOTTOM:
        map.tiles.append([Tile.none()] * map.width)
        map.height += 1
    elif action is ResizeAction.REMOVE_BOTTOM:
        if map.height <= 1:
            return False
        map.tiles.pop()
        map.height -= 1
    elif action is ResizeAction.ADD_LEFT:
        for row in map.tiles:
            row.insert(0, Tile.none())
        map.width += 1
        room_position.x -= 1.0
    elif action is ResizeAction.REMOVE_LEFT:
        if map.width <= 1:
            return False
        for row in map.tiles:
            del row[0]
        map.width -= 1
        room_position.x += 1.0
    elif action is ResizeAction.ADD_RIGHT:
        for row in map.tiles:
            row.append(Tile.none())
        map.width += 1
    elif action is ResizeAction.REMOVE_RIGHT:
        if map.width <= 1:
            return False
        for row in map.tiles:
            row.pop()
        map.width -= 1
    return True


@dataclass
class ResizeButton(UiElement):
    """A button placed in world space next to the map it resizes."""

    action: ResizeAction
    button: TextButton

    def draw(self, surface: "pygame.Surface", camera: Camera2D) -> None:
        try:
            mouse = pygame.mouse.get_pos()
        except pygame.error:
            hovered = False
        else:
            hovered = self.button.is_hovered(camera.screen_to_world(mouse))

        x, y, w, h = self.button.rect
        x0, y0 = camera.world_to_screen((x, y))
        x1, y1 = camera.world_to_screen((x + w, y + h))
        left, right = sorted((x0, x1))
        top, bottom = sorted((y0, y1))
        on_screen = TextButton(
            rect=(left, top, right - left, bottom - top),
            label=self.button.label,
            background_color=self.button.background_color,
            text_color=self.button.text_color,
            font_size=self.button.font_size,
        )
        on_screen.draw(surface, hovered)

    def is_mouse_over(self, mouse_pos: Sequence[float], camera: Camera2D) -> bool:
        return self.button.is_hovered(camera.screen_to_world(mouse_pos))

    def on_click(self, context: EditContext, mouse_pos: Sequence[float], camera: Camera2D) -> None:
        """Resize the map if the button was clicked this frame."""
        world = camera.screen_to_world(mouse_pos)
        if self.button.is_clicked(world, context.mouse_pressed):
            self.apply(context)

    def apply(self, context: EditContext) -> bool:
        """Resize unless the result would overlap another room; return whether it changed."""
        (dx, dy), (dw, dh) = _RESIZE[self.action]
        proposed = context.room_position + Vector2(dx, dy)
        new_size = (context.map.width + dw, context.map.height + dh)
        if any(_overlaps(proposed, new_size, pos, size) for pos, size in context.other_bounds):
            return False
        return _resize(self.action, context.map, context.room_position)

    @classmethod
    def build_all(cls, map: TileMap) -> List[ResizeButton]:
        """One button of each action, laid out around the map's edges."""
        margin = TILE_SIZE / 4.0
        width = map.width * TILE_SIZE
        height = map.height * TILE_SIZE

        layout: List[Tuple[ResizeAction, Tuple[float, float], str, Color]] = [
            (ResizeAction.ADD_TOP, (width / 2.0, height + margin + 60.0), "+", GREEN),
            (ResizeAction.REMOVE_TOP, (width / 2.0, height + margin + 20.0), "-", RED),
            (ResizeAction.REMOVE_BOTTOM, (width / 2.0, -margin - 20.0), "-", RED),
            (ResizeAction.ADD_BOTTOM, (width / 2.0, -margin - 60.0), "+", GREEN),
            (ResizeAction.ADD_LEFT, (-margin - 60.0, height / 2.0), "+", GREEN),
            (ResizeAction.REMOVE_LEFT, (-margin - 20.0, height / 2.0), "-", RED),
            (ResizeAction.ADD_RIGHT, (width + margin + 60.0, height / 2.0), "+", GREEN),
            (ResizeAction.REMOVE_RIGHT, (width + margin + 20.0, height / 2.0), "-", RED),
        ]
        return [
            cls(
                action,
                TextButton(
                    rect=(
                        cx - BUTTON_SIZE / 2.0,
                        cy - BUTTON_SIZE / 2.0,
                        BUTTON_SIZE,
                        BUTTON_SIZE,
                    ),
                    label=label,
                    background_color=color,
                    text_color=BLACK,
                    font_size=BUTTON_FONT_SIZE,
                ),
            )
            for action, (cx, cy), label, color in layout
        ]