"""Starship: deck units, resource diffusion, and the editor acting on them."""

from starship.unit import Kind, Resource, Unit
from starship.deck import Deck, Ship
from starship.diffusion import tick
from starship.simulation import Simulation
from starship.editor import Editor
from starship.constants import RESOURCE_NAMES, TICK_INTERVAL_MS

__all__ = [
    "Kind", "Resource", "Unit", "Deck", "Ship", "tick", "Simulation", "Editor",
    "RESOURCE_NAMES", "TICK_INTERVAL_MS",
]
