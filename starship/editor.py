"""
Editor commands between ticks: select a cell, place a template, remove, drag,
switch deck, toggle resource bars. Every command returns True if the view is stale.
"""

import logging

from starship.simulation import Simulation
from starship.templates import make_unit

logger = logging.getLogger(__name__)


class Editor:
    """Selection state over the simulation's current deck."""

    def __init__(self, simulation: Simulation, show_info: bool = True) -> None:
        self.simulation = simulation
        self.editing: tuple[int, int] | None = None
        self.dragging: int | None = None
        self.show_info = show_info

    @property
    def deck(self):
        return self.simulation.ship.deck

    def reset(self) -> None:
        """Drop selection, e.g. after the ship was reloaded."""
        self.editing = None
        self.dragging = None

    def select(self, x: int, y: int) -> bool:
        if self.editing == (x, y):
            return False
        self.editing = (x, y)
        logger.debug("Editing %d, %d: %s", x, y, self.deck.unit_at(x, y))
        return True

    def cancel(self) -> bool:
        if self.editing is None:
            return False
        self.editing = None
        return True

    def place(self, key: str) -> bool:
        """Place the template for key on the editing cell. Unknown keys keep the selection."""
        if self.editing is None:
            return False
        x, y = self.editing
        unit = make_unit(key, x, y)
        if unit is None:
            return False
        self.editing = None
        self.deck.units.append(unit)
        logger.debug("Placed %s at %d, %d", unit.kind, x, y)
        return True

    def remove(self) -> bool:
        if self.editing is None:
            return False
        x, y = self.editing
        self.editing = None
        i = self.deck.unit_index_at(x, y)
        if i is None:
            return False
        unit = self.deck.units.pop(i)
        # Dragged index shifts with the removal
        if self.dragging is not None:
            if self.dragging == i:
                self.dragging = None
            elif self.dragging > i:
                self.dragging -= 1
        logger.debug("Removed %s at %d, %d", unit.kind, x, y)
        return True

    def start_drag(self, x: int, y: int) -> bool:
        i = self.deck.unit_index_at(x, y)
        if i is None:
            return False
        self.dragging = i
        logger.debug("Dragging %s", self.deck.units[i])
        return True

    def drag_to(self, x: int, y: int) -> bool:
        if self.dragging is None or self.dragging >= len(self.deck.units):
            return False
        unit = self.deck.units[self.dragging]
        if unit.cell == (x, y):
            return False
        unit.x, unit.y = x, y
        return True

    def end_drag(self) -> bool:
        if self.dragging is None:
            return False
        self.dragging = None
        return True

    def switch_deck(self, step: int) -> bool:
        """Move current deck up (+1) or down (-1); stays put at either end."""
        ship = self.simulation.ship
        target = ship.current_deck + step
        if not 0 <= target < len(ship.decks):
            return False
        ship.current_deck = target
        self.dragging = None
        logger.info("Deck %d: %s", target, ship.deck.name)
        return True

    def set_show_info(self, show: bool) -> bool:
        if self.show_info == show:
            return False
        self.show_info = show
        return True
