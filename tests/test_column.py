"""Tests for TickerColumn and LineCursor."""

from __future__ import annotations

from pi.ticker.alphabet import EMPTY, ScrollAlphabet
from pi.ticker.column import LineCursor, TickerColumn


def settled_column(alphabet: ScrollAlphabet, unit: str) -> TickerColumn:
    column = TickerColumn(alphabet)
    column.set_target_unit(unit)
    column.on_animation_settled()
    return column


class TestTickerColumnLifecycle:
    """A column scrolls toward its target and settles there."""

    def test_new_column_is_empty_and_settled(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        assert column.current_unit == EMPTY
        assert column.target_unit == EMPTY
        assert column.current_width == 0.0
        assert column.minimum_required_width == 0.0
        assert column.is_settled

    def test_set_target_starts_animation(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        column.set_target_unit("3")
        assert column.is_animating
        assert column.target_unit == "3"
        assert column.scroll_path == (EMPTY, "0", "1", "2", "3")
        assert column.minimum_required_width == 1.0

    def test_advance_walks_scroll_path(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        column.set_target_unit("3")
        column.advance_animation(0.5)
        assert column.current_unit == "1"
        assert column.current_width == 0.5
        column.advance_animation(1.0)
        assert column.current_unit == "3"
        assert column.current_width == 1.0

    def test_settle_finalizes_target(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        column.set_target_unit("8")
        column.on_animation_settled()
        assert column.current_unit == "8"
        assert column.current_width == 1.0
        assert column.is_settled

    def test_advance_on_settled_column_is_noop(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "4")
        column.advance_animation(0.25)
        assert column.current_unit == "4"
        assert column.current_width == 1.0

    def test_same_target_on_settled_column_is_noop(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "4")
        column.set_target_unit("4")
        assert column.is_settled
        assert column.scroll_path == ("4",)


class TestTickerColumnRedirect:
    """Retargeting mid-animation continues from the visible unit."""

    def test_redirect_starts_from_current_unit(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "5")
        column.set_target_unit("9")
        column.advance_animation(0.5)
        assert column.current_unit == "7"

        column.set_target_unit("2")
        assert column.scroll_path == ("7", "6", "5", "4", "3", "2")
        column.advance_animation(0.0)
        assert column.current_unit == "7"

    def test_same_target_while_animating_rebases(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "0")
        column.set_target_unit("4")
        column.advance_animation(0.5)
        assert column.current_unit == "2"

        column.set_target_unit("4")
        assert column.scroll_path == ("2", "3", "4")
        column.advance_animation(1.0)
        assert column.current_unit == "4"


class TestTickerColumnCollapse:
    """A column targeting EMPTY shrinks to zero width."""

    def test_collapse_shrinks_width(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "2")
        column.set_target_unit(EMPTY)
        assert column.scroll_path == ("2", "1", "0", EMPTY)
        column.advance_animation(0.25)
        assert column.current_width == 0.75
        assert column.minimum_required_width == 1.0
        column.advance_animation(1.0)
        assert column.current_width == 0.0
        assert column.current_unit == EMPTY

    def test_collapsed_column_settles_at_zero(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "2")
        column.set_target_unit(EMPTY)
        column.on_animation_settled()
        assert column.current_width == 0.0
        assert column.minimum_required_width == 0.0


class TestTickerColumnSettleListeners:
    """once_settled listeners fire exactly once."""

    def test_listener_fires_on_settle(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        seen: list[str] = []
        column.once_settled(lambda c: seen.append(c.current_unit))
        column.set_target_unit("6")
        column.on_animation_settled()
        assert seen == ["6"]

    def test_listener_is_one_shot(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        calls: list[TickerColumn] = []
        column.once_settled(calls.append)
        column.set_target_unit("1")
        column.on_animation_settled()
        column.set_target_unit("2")
        column.on_animation_settled()
        assert calls == [column]

    def test_listener_may_retarget_column(self, digits: ScrollAlphabet) -> None:
        column = TickerColumn(digits)
        column.once_settled(lambda c: c.set_target_unit("9"))
        column.set_target_unit("1")
        column.on_animation_settled()
        assert column.current_unit == "1"
        assert column.target_unit == "9"
        assert column.is_animating


class TestLineCursor:
    """Columns tile the line without gaps or overlaps."""

    def test_contiguous_units(self) -> None:
        cursor = LineCursor()
        for unit in "42":
            cursor.draw(unit, 1.0)
            cursor.advance(1.0)
        assert cursor.line == "42"
        assert cursor.cells == 2
        assert cursor.offset == 2.0

    def test_narrow_width_draws_nothing(self) -> None:
        cursor = LineCursor()
        cursor.draw("7", 0.4)
        assert cursor.line == ""

    def test_partially_grown_unit_is_shown(self) -> None:
        cursor = LineCursor()
        cursor.draw("7", 0.6)
        assert cursor.line == "7"

    def test_wide_unit_in_narrow_slot_is_blank(self) -> None:
        cursor = LineCursor()
        cursor.draw("中", 1.0)
        assert cursor.line == " "

    def test_empty_unit_draws_blank_cells(self) -> None:
        cursor = LineCursor()
        cursor.draw(EMPTY, 1.0)
        assert cursor.line == " "

    def test_max_cells_clips(self) -> None:
        cursor = LineCursor(max_cells=2)
        for unit in "1234":
            cursor.draw(unit, 1.0)
            cursor.advance(1.0)
        assert cursor.line == "12"
        assert cursor.cells == 2

    def test_column_renders_current_unit(self, digits: ScrollAlphabet) -> None:
        column = settled_column(digits, "5")
        cursor = LineCursor()
        column.render(cursor)
        assert cursor.line == "5"
        # Drawing never moves the cursor
        assert cursor.offset == 0.0
