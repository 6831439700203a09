"""Draws the sprites and texts of a game state onto a window."""

from __future__ import annotations

import math
from typing import Protocol, Tuple

import pygame

from .components import SpriteComponent, TextComponent, TransformComponent
from .state import GameState


class _Canvas(Protocol):
    def blit(self, surface: pygame.Surface, position: Tuple[float, float]) -> None: ...


def _sprite_surface(
    sprite: SpriteComponent, transform: TransformComponent
) -> Tuple[pygame.Surface, Tuple[float, float]]:
    surface = sprite.texture.surface
    placement = transform.transformable
    (px, py), (sx, sy), (ox, oy) = placement.position, placement.scale, placement.origin
    width, height = surface.get_size()
    target = (round(abs(width * sx)), round(abs(height * sy)))
    if target != (width, height):
        surface = pygame.transform.scale(surface, target)
    if sx < 0 or sy < 0:
        surface = pygame.transform.flip(surface, sx < 0, sy < 0)
    left = min(px - ox * sx, px + (width - ox) * sx)
    top = min(py - oy * sy, py + (height - oy) * sy)
    return surface, (left, top)


def _text_surface(
    text: TextComponent, transform: TransformComponent
) -> Tuple[pygame.Surface, Tuple[float, float]]:
    font = text.font.sized(text.character_size)
    fill = font.render(text.contents, True, text.fill_color)
    radius = math.ceil(text.outline_thickness) if text.outline_thickness > 0 else 0
    if radius:
        outline = font.render(text.contents, True, text.outline_color)
        width, height = fill.get_size()
        canvas = pygame.Surface((width + 2 * radius, height + 2 * radius), pygame.SRCALPHA)
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx * dx + dy * dy <= radius * radius:
                    canvas.blit(outline, (radius + dx, radius + dy))
        canvas.blit(fill, (radius, radius))
        fill = canvas
    (px, py), (ox, oy) = transform.transformable.position, transform.transformable.origin
    return fill, (px - ox - radius, py - oy - radius)


class RenderSystem:
    """Draws every enabled sprite or text that has a transform."""

    def __init__(self, window: _Canvas) -> None:
        self.window = window

    def update(self, game_state: GameState) -> None:
        """Draw the entities of ``game_state`` in id order; a sprite wins over a text."""
        for sprite, text, transform in zip(
            game_state.sprites[: game_state.num_entities],
            game_state.texts,
            game_state.transforms,
        ):
            if not transform.enabled:
                continue
            if sprite.enabled:
                self.window.blit(*_sprite_surface(sprite, transform))
            elif text.enabled:
                self.window.blit(*_text_surface(text, transform))