"""Deck drawing: title bar, one tile per unit, resource bars, selection frames."""

import logging
from pathlib import Path

import pygame

from starship.deck import Deck
from starship.unit import Resource
from ui.colors import (
    BACKGROUND, DRAG_FRAME, EDIT_FRAME, RULE, TEXT, TILE_PLACEHOLDER, resource_color,
)

CELL = 32
TITLE_H = 32
BAR_W = 4
BAR_STEP = 6
BAR_MAX = 28
FRAME_PX = 2

logger = logging.getLogger(__name__)


def load_sprites(blocks_dir: Path) -> dict[str, pygame.Surface]:
    """Kind tag -> image, from <blocks_dir>/<Kind>/image.png. Missing dir = no sprites."""
    sprites: dict[str, pygame.Surface] = {}
    if not blocks_dir.is_dir():
        return sprites
    for entry in sorted(blocks_dir.iterdir()):
        image_path = entry / "image.png"
        if entry.is_dir() and image_path.is_file():
            try:
                sprites[entry.name] = pygame.image.load(str(image_path))
            except pygame.error as e:
                logger.warning("Skipping sprite %s: %s", image_path, e)
    return sprites


def cell_at(px: int, py: int, cell: int = CELL, title_h: int = TITLE_H) -> tuple[int, int]:
    """Grid cell under a window pixel; clamped at 0 like the title bar."""
    return max(px // cell, 0), max((py - title_h) // cell, 0)


def cell_origin(x: int, y: int, cell: int = CELL, title_h: int = TITLE_H) -> tuple[int, int]:
    return x * cell, y * cell + title_h


def bar_height(res: Resource, max_h: int = BAR_MAX) -> int:
    """Bar height in px proportional to pressure, capped at max_h; 0 when capacity is zero."""
    p = res.pressure()
    if p is None:
        return 0
    return int(max_h * min(p, 1.0))


def _frame(surface: pygame.Surface, x: int, y: int, cell: int, color) -> None:
    pygame.draw.rect(surface, color, (x, y, cell, FRAME_PX))
    pygame.draw.rect(surface, color, (x, y, FRAME_PX, cell))
    pygame.draw.rect(surface, color, (x, y + cell - FRAME_PX, cell, FRAME_PX))
    pygame.draw.rect(surface, color, (x + cell - FRAME_PX, y, FRAME_PX, cell))


def draw_deck(
    surface: pygame.Surface,
    deck: Deck,
    title: str,
    sprites: dict[str, pygame.Surface],
    fonts: tuple[pygame.font.Font, pygame.font.Font],
    *,
    show_info: bool = True,
    dragging: int | None = None,
    editing: tuple[int, int] | None = None,
    cell: int = CELL,
    title_h: int = TITLE_H,
) -> None:
    title_font, label_font = fonts
    surface.fill(BACKGROUND)
    text = title_font.render(title, True, TEXT)
    surface.blit(text, ((surface.get_width() - text.get_width()) // 2, 0))
    pygame.draw.rect(surface, RULE, (0, title_h - 6, surface.get_width(), 2))

    bar_max = cell - 4
    for unit in deck.units:
        x, y = cell_origin(unit.x, unit.y, cell, title_h)
        image = sprites.get(unit.kind)
        if image is not None:
            surface.blit(image, (x, y))
        else:
            pygame.draw.rect(surface, TILE_PLACEHOLDER, (x, y, cell, cell))
            surface.blit(label_font.render(unit.kind, True, TEXT), (x, y))

        if show_info:
            for i, (name, res) in enumerate(unit.resources.items()):
                dy = bar_height(res, bar_max)
                if dy > 0:
                    bx = x + 2 + i * BAR_STEP
                    pygame.draw.rect(surface, resource_color(name), (bx, y + 2 + bar_max - dy, BAR_W, dy))

    if dragging is not None and dragging < len(deck.units):
        unit = deck.units[dragging]
        _frame(surface, *cell_origin(unit.x, unit.y, cell, title_h), cell, DRAG_FRAME)
    if editing is not None:
        _frame(surface, *cell_origin(editing[0], editing[1], cell, title_h), cell, EDIT_FRAME)
