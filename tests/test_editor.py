"""Tests for editor commands on the current deck."""

from starship import Editor


class TestPlacement:
    def test_select_then_place(self, simulation):
        editor = Editor(simulation)
        assert editor.select(2, 3) is True
        assert editor.select(2, 3) is False
        assert editor.place("A") is True
        unit = simulation.ship.deck.unit_at(2, 3)
        assert unit.kind == "Tank"
        assert unit.resources["air"].amount == 100.0
        assert editor.editing is None

    def test_place_without_selection(self, simulation):
        editor = Editor(simulation)
        assert editor.place("a") is False
        assert simulation.ship.deck.units == []

    def test_unknown_key_keeps_selection(self, simulation):
        editor = Editor(simulation)
        editor.select(1, 1)
        assert editor.place("q") is False
        assert editor.editing == (1, 1)

    def test_cancel(self, simulation):
        editor = Editor(simulation)
        assert editor.cancel() is False
        editor.select(0, 0)
        assert editor.cancel() is True
        assert editor.editing is None

    def test_remove_topmost(self, simulation):
        editor = Editor(simulation)
        for key in ("h", "d"):
            editor.select(4, 4)
            editor.place(key)
        editor.select(4, 4)
        assert editor.remove() is True
        assert [u.kind for u in simulation.ship.deck.units] == ["Hull"]

    def test_remove_empty_cell(self, simulation):
        editor = Editor(simulation)
        editor.select(9, 9)
        assert editor.remove() is False
        assert editor.editing is None


class TestDragging:
    def test_drag_moves_unit(self, simulation):
        editor = Editor(simulation)
        editor.select(1, 1)
        editor.place("v")
        assert editor.start_drag(1, 1) is True
        assert editor.drag_to(1, 1) is False
        assert editor.drag_to(3, 2) is True
        assert simulation.ship.deck.units[0].cell == (3, 2)
        assert editor.end_drag() is True
        assert editor.end_drag() is False

    def test_drag_empty_cell(self, simulation):
        editor = Editor(simulation)
        assert editor.start_drag(0, 0) is False
        assert editor.drag_to(1, 0) is False

    def test_removal_shifts_drag_index(self, simulation):
        editor = Editor(simulation)
        for x, key in ((0, "a"), (1, "c")):
            editor.select(x, 0)
            editor.place(key)
        editor.start_drag(1, 0)
        editor.select(0, 0)
        editor.remove()
        assert editor.dragging == 0
        assert simulation.ship.deck.units[editor.dragging].kind == "Conduit"


class TestView:
    def test_switch_deck_within_bounds(self, simulation):
        editor = Editor(simulation)
        assert editor.switch_deck(-1) is False
        assert editor.switch_deck(1) is True
        assert simulation.ship.current_deck == 1
        assert editor.switch_deck(1) is False

    def test_edits_follow_current_deck(self, simulation):
        editor = Editor(simulation)
        editor.switch_deck(1)
        editor.select(0, 0)
        editor.place("w")
        assert simulation.ship.decks[0].units == []
        assert len(simulation.ship.decks[1].units) == 1

    def test_show_info_toggle(self, simulation):
        editor = Editor(simulation)
        assert editor.set_show_info(True) is False
        assert editor.set_show_info(False) is True
        assert editor.show_info is False
