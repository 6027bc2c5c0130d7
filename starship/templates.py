"""Unit templates the editor places, keyed by the letter that places them."""

from starship.constants import AIR, ELECTRICITY, FREE_AIR, FUEL, WATER
from starship.unit import Resource, Unit

# letter -> (kind tag, {resource: (amount, capacity)})
TEMPLATES: dict[str, tuple[str, dict[str, tuple[float, float]]]] = {
    "a": ("Tank", {AIR: (100.0, 100.0)}),
    "e": ("Tank", {ELECTRICITY: (100.0, 100.0)}),
    "f": ("Tank", {FUEL: (100.0, 100.0)}),
    "w": ("Tank", {WATER: (100.0, 100.0)}),
    "c": ("Conduit", {AIR: (0.0, 5.0), ELECTRICITY: (0.0, 5.0), FUEL: (0.0, 5.0), WATER: (0.0, 5.0)}),
    "d": ("Deck", {FREE_AIR: (0.0, 5.0)}),
    "h": ("Hull", {}),
    "m": ("Man", {FREE_AIR: (0.0, 5.0)}),
    "v": ("Vent", {AIR: (0.0, 5.0), FREE_AIR: (0.0, 5.0)}),
}


def make_unit(key: str, x: int, y: int) -> Unit | None:
    """Fresh unit for an editor key (case-insensitive); None if the key places nothing."""
    template = TEMPLATES.get(key.lower()) if key else None
    if template is None:
        return None
    kind, pools = template
    resources = {name: Resource(amount, capacity) for name, (amount, capacity) in pools.items()}
    return Unit(x, y, kind, resources)
