"""Tests for resource pools, unit kinds, and templates."""

from starship.templates import TEMPLATES, make_unit
from starship.unit import Kind, Resource, Unit


class TestResource:
    def test_pressure_is_fill_ratio(self):
        assert Resource(25.0, 100.0).pressure() == 0.25

    def test_zero_capacity_has_no_pressure(self):
        assert Resource(5.0, 0.0).pressure() is None
        assert Resource(0.0, 0.0).pressure() is None

    def test_free_space(self):
        assert Resource(2.0, 5.0).free_space() == 3.0


class TestKind:
    def test_known_tags(self):
        assert Kind.of("Tank") is Kind.TANK
        assert Kind.of("Conduit") is Kind.CONDUIT
        assert Kind.of("Vent") is Kind.VENT
        assert Kind.of("Hull") is Kind.HULL
        assert Kind.of("Man") is Kind.MAN

    def test_floor_saved_as_deck(self):
        assert Kind.of("Deck") is Kind.FLOOR
        assert Kind.of("Floor") is Kind.FLOOR

    def test_unknown_tag_is_other(self):
        assert Kind.of("Reactor") is Kind.OTHER
        assert Unit(0, 0, "Reactor").variant is Kind.OTHER


class TestTemplates:
    def test_air_tank(self):
        unit = make_unit("A", 3, 4)
        assert (unit.x, unit.y, unit.kind) == (3, 4, "Tank")
        assert unit.resources == {"air": Resource(100.0, 100.0)}

    def test_conduit_carries_four_resources(self):
        unit = make_unit("c", 0, 0)
        assert list(unit.resources) == ["air", "electricity", "fuel", "water"]
        assert all(r == Resource(0.0, 5.0) for r in unit.resources.values())

    def test_vent_and_hull(self):
        assert set(make_unit("v", 0, 0).resources) == {"air", "free_air"}
        assert make_unit("h", 0, 0).resources == {}

    def test_unknown_key(self):
        assert make_unit("z", 0, 0) is None
        assert make_unit("", 0, 0) is None

    def test_units_do_not_share_pools(self):
        a = make_unit("a", 0, 0)
        b = make_unit("a", 1, 0)
        a.resources["air"].amount = 1.0
        assert b.resources["air"].amount == 100.0

    def test_every_template_has_a_kind(self):
        for key in TEMPLATES:
            assert make_unit(key, 0, 0).kind
