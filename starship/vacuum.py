"""
Vacuum decay: free air bleeds into empty neighboring cells.
Exposure of a cell = sum over its 8 neighbors that hold no unit of 1 / distance
(cardinal 1, diagonal 1/sqrt(2)): the 3x3 empty-cell mask around the cell weighted
by a fixed kernel. Only the window around each exposed node is ever built.
"""

import numpy as np

from starship.constants import FREE_AIR, VACUUM_DIVISOR, VACUUM_WEIGHTS

_WINDOW = (-1, 0, 1)

# Center is the unit itself and never counts.
EXPOSURE_3X3 = np.array(
    [[VACUUM_WEIGHTS.get((dx, dy), 0.0) for dy in _WINDOW] for dx in _WINDOW],
    dtype=np.float64,
)


def _empty_mask(occupied, x: int, y: int) -> np.ndarray:
    """3x3 mask around (x, y): 1 where no unit sits, indexed [dx + 1, dy + 1]."""
    return np.array(
        [[0.0 if (x + dx, y + dy) in occupied else 1.0 for dy in _WINDOW] for dx in _WINDOW],
        dtype=np.float64,
    )


def exposure(occupied, x: int, y: int) -> float:
    """Exposure of cell (x, y) given the set of occupied (x, y) cells."""
    return float(np.sum(EXPOSURE_3X3 * _empty_mask(occupied, x, y)))


def decay_free_air(nodes, occupied) -> None:
    """Attenuate positive free_air nodes in place: amount *= 1 - exposure / 100."""
    for node in nodes:
        if node.resource != FREE_AIR or node.amount <= 0:
            continue
        w = exposure(occupied, node.x, node.y)
        if w > 0:
            node.amount *= 1.0 - w / VACUUM_DIVISOR
