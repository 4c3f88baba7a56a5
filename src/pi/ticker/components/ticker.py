"""Ticker component: a single-line label whose characters scroll into place."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Iterable, Protocol

from pi.ticker.alphabet import ScrollAlphabet
from pi.ticker.column import LineCursor
from pi.ticker.config import TickerOptions
from pi.ticker.manager import ColumnManager
from pi.ticker.utils import split_units

logger = logging.getLogger(__name__)


class _UI(Protocol):
    def request_render(self) -> None: ...


class Ticker:
    """Ticker component that animates between texts.

    Unchanged characters stay put while changed ones scroll along the
    configured alphabet. Frames are scheduled on the running asyncio loop;
    without one, callers drive the animation by calling ``step()``.

    Example::

        ticker = Ticker(tui, TickerOptions(gravity="right"), text="1234")
        ticker.set_text("1299")
    """

    def __init__(
        self,
        ui: _UI | None = None,
        options: TickerOptions | None = None,
        text: str = "",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ui = ui
        self._options = options or TickerOptions()
        self._clock = clock
        self._manager = ColumnManager(self._options.alphabet)

        self._animation_start: float | None = None
        self._timer_handle: asyncio.TimerHandle | None = None
        self.on_settled: Callable[[], None] | None = None

        # Cache
        self._cached_width: int | None = None
        self._cached_lines: list[str] | None = None

        if text:
            self.set_text(text, animate=False)

    @property
    def manager(self) -> ColumnManager:
        return self._manager

    @property
    def options(self) -> TickerOptions:
        return self._options

    @property
    def text(self) -> str:
        """The target text, i.e. what the ticker shows once settled."""
        return self._manager.target_text()

    @property
    def is_animating(self) -> bool:
        return self._animation_start is not None

    def set_text(self, text: str | Iterable[str], animate: bool = True) -> None:
        units = split_units(text)
        if self._manager.should_debounce(units):
            return

        self._manager.set_text(units)
        if animate and self._options.animation_duration_ms > 0:
            self._start_animation()
        else:
            self._finish_animation(text_changed=True)

    def set_alphabet(self, units: ScrollAlphabet | str | Iterable[str]) -> None:
        """Switch alphabets, re-applying the current text without animation.

        The current text is checked against the new alphabet first; a
        rejected switch leaves the old alphabet and columns untouched.
        """
        alphabet = units if isinstance(units, ScrollAlphabet) else ScrollAlphabet(units)
        targets = [c.target_unit for c in self._manager.columns if c.target_unit]
        alphabet.validate(targets)

        self._manager.configure_alphabet(alphabet)
        if targets:
            self._manager.set_text(targets)
        self._finish_animation()

    def step(self) -> None:
        """Advance the running animation to the clock's current time."""
        if self._animation_start is None:
            return

        elapsed_ms = (self._clock() - self._animation_start) * 1000.0
        duration_ms = self._options.animation_duration_ms
        t = elapsed_ms / duration_ms if duration_ms > 0 else 1.0
        if t >= 1.0:
            self._finish_animation()
            return

        progress = min(1.0, max(0.0, self._options.easing(t)))
        self._manager.advance_animation(progress)
        self._changed()
        self._schedule_next()

    def stop(self) -> None:
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None

    def _start_animation(self) -> None:
        self.stop()
        self._animation_start = self._clock()
        self._manager.advance_animation(0.0)
        logger.debug("Animating toward %r", self._manager.target_text())
        self._changed()
        self._schedule_next()

    def _finish_animation(self, text_changed: bool = False) -> None:
        self.stop()
        was_animating = self._animation_start is not None
        self._animation_start = None
        self._manager.advance_animation(1.0)
        self._manager.on_animation_settled()
        self._changed()
        if was_animating:
            logger.debug("Settled on %r", self._manager.target_text())
        if self.on_settled and (was_animating or text_changed):
            self.on_settled()

    def _schedule_next(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._timer_handle = loop.call_later(self._options.frame_interval_ms / 1000.0, self._tick)

    def _tick(self) -> None:
        self._timer_handle = None
        self.step()

    def _changed(self) -> None:
        self.invalidate()
        if self._ui is not None:
            self._ui.request_render()

    # -- Component ----------------------------------------------------------

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_lines = None

    def render(self, width: int) -> list[str]:
        if self._cached_lines is not None and self._cached_width == width:
            return self._cached_lines

        padding_x = min(self._options.padding_x, max(0, width) // 2)
        available_width = max(0, width - padding_x * 2)

        cursor = LineCursor(max_cells=available_width)
        self._manager.render(cursor)

        slack = available_width - cursor.cells
        gravity = self._options.gravity
        if gravity == "right":
            left_fill = slack
        elif gravity == "center":
            left_fill = slack // 2
        else:
            left_fill = 0
        right_fill = slack - left_fill

        margin = " " * padding_x
        line = margin + " " * left_fill + cursor.line + " " * right_fill + margin

        self._cached_width = width
        self._cached_lines = [line]
        return self._cached_lines
