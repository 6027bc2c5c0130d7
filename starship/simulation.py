"""
Simulation driver: owns the ship and ticks it. tick() is synchronous; advance(dt_s)
turns elapsed wall time into a bounded number of ticks at a fixed cadence, so the
caller's frame loop is the only thing that ever touches the ship.
"""

from starship.constants import TICK_INTERVAL_MS
from starship.deck import Ship


class Simulation:
    def __init__(
        self,
        ship: Ship,
        tick_interval_ms: float = TICK_INTERVAL_MS,
        max_ticks_per_frame: int = 20,
    ) -> None:
        self.ship = ship
        self.tick_interval_ms = max(1.0, float(tick_interval_ms))
        self.max_ticks_per_frame = max(1, int(max_ticks_per_frame))
        self.tick_count = 0
        self._accum = 0.0

    def replace(self, ship: Ship) -> None:
        """Swap in a reloaded ship; pending time is dropped."""
        self.ship = ship
        self._accum = 0.0

    def tick(self) -> bool:
        """One tick over every deck. True if displayed state is stale."""
        self.tick_count += 1
        return self.ship.tick()

    def advance(self, dt_s: float) -> bool:
        """Run the ticks due after dt_s seconds. True if any of them changed state."""
        self._accum += dt_s * 1000.0 / self.tick_interval_ms
        # Cap ticks per frame so a slow frame never snowballs
        num_ticks = min(int(self._accum), self.max_ticks_per_frame)
        self._accum -= num_ticks
        self._accum = min(self._accum, float(self.max_ticks_per_frame))
        redraw = False
        for _ in range(num_ticks):
            if self.tick():
                redraw = True
        return redraw
