"""Fixed display colors: one per resource bar, plus frame and tile colors."""

from starship.constants import AIR, ELECTRICITY, FREE_AIR, FUEL, WATER

BACKGROUND = (255, 255, 255)
TEXT = (0, 0, 0)
RULE = (0, 0, 0)
TILE_PLACEHOLDER = (128, 128, 128)
DRAG_FRAME = (255, 0, 0)
EDIT_FRAME = (0, 0, 255)

RESOURCE_COLORS = {
    AIR: (0, 255, 0),
    ELECTRICITY: (255, 255, 0),
    FREE_AIR: (0, 255, 255),
    FUEL: (255, 0, 0),
    WATER: (0, 0, 255),
}
UNKNOWN_RESOURCE = (255, 0, 255)


def resource_color(name: str) -> tuple[int, int, int]:
    return RESOURCE_COLORS.get(name, UNKNOWN_RESOURCE)
