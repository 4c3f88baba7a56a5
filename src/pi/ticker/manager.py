"""Column collection manager.

Each unit of the rendered text is represented by a column that can animate
from one unit to the next. ``ColumnManager`` owns the ordered list of
columns that together make up the label: it reconciles the list against
each newly requested text with a Levenshtein edit script, prunes columns
that have fully collapsed, and fans animation and draw calls out to every
column.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from pi.ticker.alphabet import EMPTY, ScrollAlphabet
from pi.ticker.column import Column, RenderSink, TickerColumn
from pi.ticker.errors import CorruptScriptError, NotConfiguredError
from pi.ticker.levenshtein import compute_edit_script
from pi.ticker.utils import split_units

logger = logging.getLogger(__name__)

ColumnFactory = Callable[[ScrollAlphabet], Column]


class ColumnManager:
    """Owns and reconciles the columns of one ticker label."""

    def __init__(
        self,
        alphabet: ScrollAlphabet | str | Iterable[str] | None = None,
        column_factory: ColumnFactory = TickerColumn,
    ) -> None:
        self._columns: list[Column] = []
        self._column_factory = column_factory
        self._alphabet: ScrollAlphabet | None = None
        if alphabet is not None:
            self.configure_alphabet(alphabet)

    # -- Alphabet -----------------------------------------------------------

    @property
    def alphabet(self) -> ScrollAlphabet | None:
        return self._alphabet

    def configure_alphabet(self, units: ScrollAlphabet | str | Iterable[str]) -> None:
        """Replace the scroll alphabet.

        Existing columns were built against the old alphabet's scroll paths,
        so the collection is cleared. A rejected alphabet leaves the previous
        one (and the columns) untouched.
        """
        alphabet = units if isinstance(units, ScrollAlphabet) else ScrollAlphabet(units)
        self._alphabet = alphabet
        if self._columns:
            logger.debug("Alphabet replaced, dropping %d columns", len(self._columns))
        self._columns.clear()

    # -- Text ---------------------------------------------------------------

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    def should_debounce(self, text: str | Iterable[str]) -> bool:
        """Whether *text* equals the current target text, making an update a no-op."""
        units = split_units(text)
        targets = [c.target_unit for c in self._columns if c.target_unit != EMPTY]
        return units == targets

    def set_text(self, text: str | Iterable[str]) -> None:
        """Reconcile the columns toward *text*."""
        if self._alphabet is None:
            raise NotConfiguredError()

        units = split_units(text)
        self._alphabet.validate(units)

        self._prune()

        old_units = [column.target_unit for column in self._columns]
        actions = compute_edit_script(old_units, units)
        logger.debug(
            "Reconciling %d columns toward %d units: %s",
            len(old_units),
            len(units),
            actions,
        )

        column_index = 0
        text_index = 0
        for action in actions:
            match action:
                case "insert":
                    self._columns.insert(column_index, self._column_factory(self._alphabet))
                    self._retarget(column_index, units, text_index)
                    column_index += 1
                    text_index += 1
                case "same":
                    self._retarget(column_index, units, text_index)
                    column_index += 1
                    text_index += 1
                case "delete":
                    if column_index >= len(self._columns):
                        raise CorruptScriptError("Delete past the last column")
                    self._columns[column_index].set_target_unit(EMPTY)
                    column_index += 1
                case _:
                    raise CorruptScriptError(f"Unknown action: {action!r}")

        if column_index != len(self._columns) or text_index != len(units):
            raise CorruptScriptError(
                f"Script ended at column {column_index}/{len(self._columns)}, "
                f"unit {text_index}/{len(units)}"
            )

    def _retarget(self, column_index: int, units: list[str], text_index: int) -> None:
        if column_index >= len(self._columns) or text_index >= len(units):
            raise CorruptScriptError("Script ran past the end of the columns or text")
        self._columns[column_index].set_target_unit(units[text_index])

    def _prune(self) -> None:
        # Only fully collapsed columns go; a column still shrinking keeps its slot.
        kept = [
            column
            for column in self._columns
            if column.current_width > 0 or column.target_unit != EMPTY
        ]
        removed = len(self._columns) - len(kept)
        if removed:
            logger.debug("Pruned %d collapsed columns", removed)
            self._columns[:] = kept

    def target_text(self) -> str:
        return "".join(column.target_unit for column in self._columns)

    def current_rendered_text(self) -> str:
        return "".join(column.current_unit for column in self._columns)

    # -- Measurement --------------------------------------------------------

    def minimum_required_width(self) -> float:
        return sum((column.minimum_required_width for column in self._columns), 0.0)

    def current_width(self) -> float:
        return sum((column.current_width for column in self._columns), 0.0)

    # -- Animation ----------------------------------------------------------

    def advance_animation(self, progress: float) -> None:
        if not 0.0 <= progress <= 1.0:
            raise ValueError(f"Animation progress must be within [0, 1], got {progress}")
        for column in self._columns:
            column.advance_animation(progress)

    def on_animation_settled(self) -> None:
        for column in self._columns:
            column.on_animation_settled()

    # -- Drawing ------------------------------------------------------------

    def render(self, sink: RenderSink) -> None:
        """Draw every column left to right, advancing *sink* by each column's width."""
        for column in self._columns:
            column.render(sink)
            sink.advance(column.current_width)
