"""Simulation constants. Resource names are fixed; cadence and decay tuned for a 32 px grid."""

import math

AIR = "air"
ELECTRICITY = "electricity"
FREE_AIR = "free_air"
FUEL = "fuel"
WATER = "water"
RESOURCE_NAMES = (AIR, ELECTRICITY, FREE_AIR, FUEL, WATER)

# Flow factor is half the pressure gap so one tick never overshoots equality.
PRESSURE_DAMPING = 0.5

# Neighbor offsets (dx, dy): cardinals first, then diagonals.
CARDINAL_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONAL_OFFSETS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
# Exposure to an empty neighbor falls off with distance; divided by this per tick.
VACUUM_DIVISOR = 100.0
VACUUM_WEIGHTS = {off: 1.0 / math.hypot(*off) for off in CARDINAL_OFFSETS + DIAGONAL_OFFSETS}

TICK_INTERVAL_MS = 10
