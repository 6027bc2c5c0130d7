"""Decks (units sharing one grid) and the ship that stacks them."""

from starship.diffusion import tick as diffuse
from starship.unit import Unit


class Deck:
    """Ordered units on one 2D grid. Order is iteration order only."""

    __slots__ = ("name", "units")

    def __init__(self, name: str, units: list[Unit] | None = None) -> None:
        self.name = name
        self.units = units if units is not None else []

    def unit_index_at(self, x: int, y: int) -> int | None:
        """Index of the last unit placed on (x, y); the topmost one when stacked."""
        found = None
        for i, unit in enumerate(self.units):
            if unit.x == x and unit.y == y:
                found = i
        return found

    def unit_at(self, x: int, y: int) -> Unit | None:
        i = self.unit_index_at(x, y)
        return None if i is None else self.units[i]

    def occupied_cells(self) -> set[tuple[int, int]]:
        return {unit.cell for unit in self.units}

    def total(self, resource: str) -> float:
        """Sum of one resource over every unit holding it."""
        return sum(u.resources[resource].amount for u in self.units if resource in u.resources)

    def tick(self) -> bool:
        return diffuse(self)


class Ship:
    __slots__ = ("name", "width", "height", "decks", "current_deck")

    def __init__(
        self,
        name: str,
        width: int,
        height: int,
        decks: list[Deck] | None = None,
        current_deck: int = 0,
    ) -> None:
        self.name = name
        self.width = width
        self.height = height
        self.decks = decks if decks is not None else []
        self.current_deck = current_deck

    @property
    def deck(self) -> Deck:
        return self.decks[self.current_deck]

    def title(self) -> str:
        return f"{self.name} - {self.current_deck} - {self.deck.name}"

    def tick(self) -> bool:
        """Tick every deck; True if any of them changed."""
        changed = [deck.tick() for deck in self.decks]
        return any(changed)
