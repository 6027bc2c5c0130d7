"""Pytest fixtures for deck simulation tests."""

import pytest

from starship import Deck, Resource, Ship, Simulation, Unit


@pytest.fixture
def make_unit():
    """Factory: make_unit(x, y, kind, air=(amount, capacity), ...)."""

    def _make(x, y, kind="Tank", **pools):
        return Unit(x, y, kind, {name: Resource(float(a), float(c)) for name, (a, c) in pools.items()})

    return _make


@pytest.fixture
def two_tanks(make_unit):
    """Full and empty air tanks side by side."""
    return Deck("test", [make_unit(0, 0, air=(100, 100)), make_unit(1, 0, air=(0, 100))])


@pytest.fixture
def simulation():
    """One-deck ship with nothing on it, plus an empty second deck."""
    ship = Ship("Test", 16, 16, [Deck("Lower"), Deck("Upper")])
    return Simulation(ship, tick_interval_ms=10, max_ticks_per_frame=20)
