"""A rectangular button with a centred text label."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame

from tilequest.tile import BLACK, Color

HOVER_BRIGHTNESS = 1.2

Rect = Tuple[float, float, float, float]


def brighten(color: Color, factor: float) -> Color:
    """Scale the red, green and blue channels, capped at full intensity."""
    r, g, b, a = color
    return (
        min(255, round(r * factor)),
        min(255, round(g * factor)),
        min(255, round(b * factor)),
        a,
    )


def _contains(rect: Rect, point: Sequence[float]) -> bool:
    x, y, w, h = rect
    return x <= point[0] < x + w and y <= point[1] < y + h


@dataclass
class TextButton:
    """A button given as (x, y, width, height) in the coordinates it is drawn in."""

    rect: Rect
    label: str
    background_color: Color
    text_color: Color = BLACK
    font_size: float = 50.0

    def draw(self, surface: "pygame.Surface", hovered: bool) -> None:
        """Fill the button, brighter when hovered, and draw its label centred."""
        background = brighten(self.background_color, HOVER_BRIGHTNESS) if hovered else self.background_color
        x, y, w, h = self.rect
        area = pygame.Rect(round(x), round(y), round(w), round(h))
        pygame.draw.rect(surface, background, area)
        if not self.label:
            return
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, max(1, int(self.font_size)))
        text = font.render(self.label, True, self.text_color)
        surface.blit(text, text.get_rect(center=area.center))

    def is_hovered(self, mouse_pos: Sequence[float]) -> bool:
        return _contains(self.rect, mouse_pos)

    def is_clicked(self, mouse_pos: Sequence[float], pressed: bool) -> bool:
        """Whether the button was pressed this frame with the mouse over it."""
        return pressed and _contains(self.rect, mouse_pos)