"""Ticker columns and the render sink they draw into.

In a ticker each display unit of the rendered text is a column: a vertical
strip that scrolls from one unit to the next along the scroll alphabet. The
``Column`` protocol is what ``ColumnManager`` relies on; ``TickerColumn`` is
the terminal implementation, measuring widths in character cells.
"""

from __future__ import annotations

from typing import Callable, Protocol

from pi.ticker.alphabet import EMPTY, ScrollAlphabet
from pi.ticker.utils import unit_width

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class RenderSink(Protocol):
    """Destination for column drawing with a horizontal cursor."""

    def draw(self, unit: str, width: float) -> None:
        """Draw *unit* at the current offset within *width* cells."""
        ...

    def advance(self, width: float) -> None:
        """Move the cursor right by *width*."""
        ...


class Column(Protocol):
    """One animated display slot, as seen by ``ColumnManager``."""

    @property
    def target_unit(self) -> str: ...

    @property
    def current_unit(self) -> str: ...

    @property
    def current_width(self) -> float: ...

    @property
    def minimum_required_width(self) -> float: ...

    def set_target_unit(self, unit: str) -> None: ...

    def advance_animation(self, progress: float) -> None: ...

    def on_animation_settled(self) -> None: ...

    def render(self, sink: RenderSink) -> None: ...


# ---------------------------------------------------------------------------
# TickerColumn
# ---------------------------------------------------------------------------


class TickerColumn:
    """Terminal column that scrolls through the alphabet toward its target.

    A new column starts out as ``EMPTY`` with zero width. Setting a target
    snapshots whatever the column shows right now, so redirecting a column
    mid-animation continues from the visible unit instead of jumping back.
    """

    def __init__(
        self,
        alphabet: ScrollAlphabet,
        measure: Callable[[str], int] = unit_width,
    ) -> None:
        self._alphabet = alphabet
        self._measure = measure

        self._current_unit = EMPTY
        self._target_unit = EMPTY
        self._path: list[str] = [EMPTY]

        self._start_width = 0.0
        self._current_width = 0.0
        self._target_width = 0.0
        self._minimum_width = 0.0

        self._animating = False
        self._settle_listeners: list[Callable[[TickerColumn], None]] = []

    @property
    def target_unit(self) -> str:
        return self._target_unit

    @property
    def current_unit(self) -> str:
        return self._current_unit

    @property
    def current_width(self) -> float:
        return self._current_width

    @property
    def minimum_required_width(self) -> float:
        # While animating, room is kept for whichever end is wider.
        return self._minimum_width

    @property
    def scroll_path(self) -> tuple[str, ...]:
        return tuple(self._path)

    @property
    def is_animating(self) -> bool:
        return self._animating

    @property
    def is_settled(self) -> bool:
        return not self._animating

    def set_target_unit(self, unit: str) -> None:
        # Retargeting an animating column to the same unit rebases it on what
        # is visible now, so a restarted animation clock continues from here.
        if unit == self._target_unit and not self._animating:
            return

        self._target_unit = unit
        self._start_width = self._current_width
        self._target_width = float(self._measure(unit))
        self._minimum_width = max(self._start_width, self._target_width)
        self._path = self._alphabet.scroll_path(self._current_unit, unit)
        self._animating = True

    def advance_animation(self, progress: float) -> None:
        if not self._animating:
            return
        index = round(progress * (len(self._path) - 1))
        self._current_unit = self._path[index]
        self._current_width = self._start_width + (self._target_width - self._start_width) * progress

    def on_animation_settled(self) -> None:
        self._current_unit = self._target_unit
        self._start_width = self._target_width
        self._current_width = self._target_width
        self._minimum_width = self._target_width
        self._path = [self._target_unit]
        self._animating = False

        listeners = self._settle_listeners
        self._settle_listeners = []
        for listener in listeners:
            listener(self)

    def once_settled(self, listener: Callable[[TickerColumn], None]) -> None:
        """Call *listener* the next time this column settles, then forget it."""
        self._settle_listeners.append(listener)

    def render(self, sink: RenderSink) -> None:
        sink.draw(self._current_unit, self._current_width)

    def __repr__(self) -> str:
        return (
            f"TickerColumn(current={self._current_unit!r}, target={self._target_unit!r}, "
            f"width={self._current_width:g})"
        )


# ---------------------------------------------------------------------------
# LineCursor
# ---------------------------------------------------------------------------


class LineCursor:
    """Render sink that lays columns out on a single terminal line.

    Offsets are fractional while widths animate; each draw covers the cells
    between the rounded start and end offsets so that adjacent columns tile
    without gaps or overlaps.
    """

    def __init__(
        self,
        max_cells: int | None = None,
        measure: Callable[[str], int] = unit_width,
    ) -> None:
        self._max_cells = max_cells
        self._measure = measure
        self._offset = 0.0
        self._written = 0
        self._parts: list[str] = []

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def cells(self) -> int:
        """Number of cells written so far."""
        return self._written

    @property
    def line(self) -> str:
        return "".join(self._parts)

    def draw(self, unit: str, width: float) -> None:
        left = round(self._offset)
        right = round(self._offset + width)
        if self._max_cells is not None:
            left = min(left, self._max_cells)
            right = min(right, self._max_cells)
        if left > self._written:
            self._parts.append(" " * (left - self._written))
            self._written = left
        cells = right - self._written
        if cells <= 0:
            return

        unit_cells = self._measure(unit)
        if unit and unit_cells <= cells:
            self._parts.append(unit + " " * (cells - unit_cells))
        else:
            # Unit does not fit yet (growing) or any more (collapsing)
            self._parts.append(" " * cells)
        self._written = right

    def advance(self, width: float) -> None:
        self._offset += width
