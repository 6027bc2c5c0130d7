"""
Per-tick resource diffusion over a deck's units.
Each unit exposes one node per resource pool, after kind pre-processing (vents turn
stored air into free air). Connected same-resource nodes with a pressure gap record a
change; every change is found from the extracted amounts, then changes are applied in
discovery order against live amounts. Free air then decays near empty cells, and the
node amounts are written back into the units.
"""

from typing import Callable, NamedTuple

from starship.constants import AIR, FREE_AIR, PRESSURE_DAMPING
from starship.unit import Kind, Unit
from starship.vacuum import decay_free_air


class Node:
    """One (unit, resource) pair for one tick; unit_index points back into the deck."""

    __slots__ = ("unit_index", "x", "y", "resource", "amount", "capacity")

    def __init__(self, unit_index: int, x: int, y: int, resource: str, amount: float, capacity: float) -> None:
        self.unit_index = unit_index
        self.x = x
        self.y = y
        self.resource = resource
        self.amount = amount
        self.capacity = capacity

    def pressure(self) -> float | None:
        if self.capacity == 0:
            return None
        return self.amount / self.capacity

    def __repr__(self) -> str:
        return (
            f"Node({self.unit_index}, ({self.x}, {self.y}), {self.resource!r}, "
            f"{self.amount}/{self.capacity})"
        )


class Change(NamedTuple):
    source: int
    target: int
    factor: float


def _vent_transfer(unit: Unit) -> None:
    """Move as much stored air into free air as free air can hold."""
    air = unit.resources.get(AIR)
    free_air = unit.resources.get(FREE_AIR)
    if air is None or free_air is None:
        return
    space = free_air.free_space()
    if air.amount > 0 and space > 0:
        moved = min(air.amount, space)
        air.amount -= moved
        free_air.amount += moved


# Kinds without an entry expose their pools unchanged.
PREPROCESS: dict[Kind, Callable[[Unit], None]] = {
    Kind.VENT: _vent_transfer,
}


def extract_nodes(units: list[Unit]) -> list[Node]:
    nodes = []
    for i, unit in enumerate(units):
        preprocess = PREPROCESS.get(unit.variant)
        if preprocess is not None:
            preprocess(unit)
        for name, res in unit.resources.items():
            nodes.append(Node(i, unit.x, unit.y, name, res.amount, res.capacity))
    return nodes


def connected(a: Node, b: Node) -> bool:
    """Same resource, and same cell or one cardinal step apart."""
    if a.resource != b.resource:
        return False
    return abs(a.x - b.x) + abs(a.y - b.y) <= 1


def compute_changes(nodes: list[Node]) -> list[Change]:
    """Changes from higher to lower pressure for every connected ordered pair, in node order."""
    pressures = [n.pressure() for n in nodes]
    by_resource: dict[str, list[int]] = {}
    for i, node in enumerate(nodes):
        by_resource.setdefault(node.resource, []).append(i)

    changes = []
    for i, a in enumerate(nodes):
        pa = pressures[i]
        if pa is None:
            continue
        for j in by_resource[a.resource]:
            pb = pressures[j]
            if j == i or pb is None or pa <= pb:
                continue
            if connected(a, nodes[j]):
                changes.append(Change(i, j, (pa - pb) * PRESSURE_DAMPING))
    return changes


def apply_changes(nodes: list[Node], changes: list[Change]) -> None:
    """Apply in order; each change sees the amounts left by the ones before it."""
    for change in changes:
        source = nodes[change.source]
        target = nodes[change.target]
        factor = max(0.0, min(1.0, change.factor))
        moved = factor * min(source.amount, target.capacity - target.amount)
        source.amount -= moved
        target.amount += moved


def write_back(units: list[Unit], nodes: list[Node]) -> None:
    for node in nodes:
        units[node.unit_index].resources[node.resource].amount = node.amount


def tick(deck) -> bool:
    """One tick over a deck. Returns True if any flow was recorded (redraw needed)."""
    units = deck.units
    nodes = extract_nodes(units)
    changes = compute_changes(nodes)
    apply_changes(nodes, changes)
    decay_free_air(nodes, deck.occupied_cells())
    write_back(units, nodes)
    return bool(changes)
