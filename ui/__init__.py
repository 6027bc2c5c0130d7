"""UI: deck view and display colors."""

from ui.deck_view import draw_deck, load_sprites, cell_at
from ui.colors import resource_color

__all__ = ["draw_deck", "load_sprites", "cell_at", "resource_color"]
