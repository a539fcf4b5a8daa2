"""Cameras, per-frame input snapshots and the interface of editor widgets."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Container, FrozenSet, Iterable, List, Sequence, Tuple

import pygame
from pygame.math import Vector2

from tilequest.tile import Tile
from tilequest.tilemap import TileMap

LEFT_BUTTON = 1
MIDDLE_BUTTON = 2
RIGHT_BUTTON = 3
DEFAULT_SCREEN_SIZE: Tuple[int, int] = (800, 600)

Bounds = Tuple[Vector2, Vector2]


@dataclass
class Camera2D:
    """A 2D camera; positive zoom keeps world y pointing down the screen."""

    target: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    zoom: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    offset: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    screen_size: Tuple[float, float] = DEFAULT_SCREEN_SIZE

    def world_to_screen(self, point: Sequence[float]) -> Vector2:
        """Screen pixel position of a world point."""
        width, height = self.screen_size
        ndc_x = (point[0] - self.target.x) * self.zoom.x + self.offset.x
        ndc_y = (point[1] - self.target.y) * self.zoom.y + self.offset.y
        return Vector2((ndc_x + 1.0) / 2.0 * width, (ndc_y + 1.0) / 2.0 * height)

    def screen_to_world(self, point: Sequence[float]) -> Vector2:
        """World position under a screen pixel."""
        width, height = self.screen_size
        ndc_x = point[0] / width * 2.0 - 1.0
        ndc_y = point[1] / height * 2.0 - 1.0
        return Vector2(
            (ndc_x - self.offset.x) / self.zoom.x + self.target.x,
            (ndc_y - self.offset.y) / self.zoom.y + self.target.y,
        )


class _HeldKeys:
    """Membership test over pygame's key state plus keys pressed this frame."""

    def __init__(self, state: Any, extra: Iterable[int] = ()) -> None:
        self._state = state
        self._extra = frozenset(extra)

    def __contains__(self, key: object) -> bool:
        if key in self._extra:
            return True
        try:
            return bool(self._state[key])
        except (IndexError, KeyError, TypeError, ValueError):
            return False


@dataclass(frozen=True)
class FrameInput:
    """What the keyboard and mouse did during one frame."""

    keys_down: Container[int] = frozenset()
    keys_pressed: FrozenSet[int] = frozenset()
    mouse_position: Tuple[float, float] = (0.0, 0.0)
    mouse_delta: Tuple[float, float] = (0.0, 0.0)
    buttons_down: FrozenSet[int] = frozenset()
    buttons_pressed: FrozenSet[int] = frozenset()
    buttons_released: FrozenSet[int] = frozenset()
    wheel: float = 0.0
    dt: float = 0.0
    screen_size: Tuple[float, float] = DEFAULT_SCREEN_SIZE

    @classmethod
    def from_pygame(cls, events: Iterable[Any], dt: float) -> FrameInput:
        """Build a snapshot from this frame's events and pygame's current state."""
        keys_pressed = set()
        buttons_pressed = set()
        buttons_released = set()
        wheel = 0.0
        for event in events:
            if event.type == pygame.KEYDOWN:
                keys_pressed.add(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
                buttons_pressed.add(event.button)
            elif event.type == pygame.MOUSEBUTTONUP and event.button in (1, 2, 3):
                buttons_released.add(event.button)
            elif event.type == pygame.MOUSEWHEEL:
                wheel += event.y

        held = pygame.mouse.get_pressed(3)
        buttons_down = {
            button
            for button, down in zip((LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON), held)
            if down
        } | buttons_pressed
        surface = pygame.display.get_surface()
        screen_size = surface.get_size() if surface is not None else DEFAULT_SCREEN_SIZE
        mx, my = pygame.mouse.get_pos()
        dx, dy = pygame.mouse.get_rel()
        return cls(
            keys_down=_HeldKeys(pygame.key.get_pressed(), keys_pressed),
            keys_pressed=frozenset(keys_pressed),
            mouse_position=(float(mx), float(my)),
            mouse_delta=(float(dx), float(dy)),
            buttons_down=frozenset(buttons_down),
            buttons_pressed=frozenset(buttons_pressed),
            buttons_released=frozenset(buttons_released),
            wheel=wheel,
            dt=dt,
            screen_size=screen_size,
        )


@dataclass
class EditContext:
    """The state an editor widget may change when clicked."""

    map: TileMap
    room_position: Vector2
    selected_tile: Tile
    other_bounds: List[Bounds] = field(default_factory=list)
    mouse_pressed: bool = True


class UiElement(abc.ABC):
    """A clickable piece of editor interface."""

    @abc.abstractmethod
    def draw(self, surface: "pygame.Surface", camera: Camera2D) -> None:
        """Draw the element."""

    @abc.abstractmethod
    def is_mouse_over(self, mouse_pos: Sequence[float], camera: Camera2D) -> bool:
        """Whether the screen position lies over the element."""

    @abc.abstractmethod
    def on_click(self, context: EditContext, mouse_pos: Sequence[float], camera: Camera2D) -> None:
        """React to a click at a screen position."""