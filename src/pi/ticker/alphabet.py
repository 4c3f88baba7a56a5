"""Scroll alphabet: the ordered set of units a column may scroll through."""

from __future__ import annotations

from typing import Iterable, Iterator

from pi.ticker.errors import InvalidAlphabetError, UnknownUnitError
from pi.ticker.utils import split_units

# Sentinel target for a column that is collapsing out of the label.
EMPTY = ""

NUMBER_LIST = "0123456789"
ALPHABETICAL_LIST = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class ScrollAlphabet:
    """Ordered, duplicate-free sequence of display units with index lookup.

    The order is the visual scroll order: a column animating from one unit to
    another passes through every unit between them. ``EMPTY`` sits just
    before the first unit so that appearing and collapsing columns scroll in
    from / out to the start of the alphabet.

    Instances are immutable and may be shared between managers.
    """

    __slots__ = ("_units", "_indices")

    def __init__(self, units: str | Iterable[str]) -> None:
        unit_list = split_units(units)
        if not unit_list:
            raise InvalidAlphabetError("Scroll alphabet must contain at least one unit")

        indices: dict[str, int] = {}
        for i, unit in enumerate(unit_list):
            if unit == EMPTY:
                raise InvalidAlphabetError("Scroll alphabet cannot contain the empty unit")
            if unit in indices:
                raise InvalidAlphabetError(f"Duplicate unit {unit!r} in scroll alphabet")
            indices[unit] = i

        self._units: tuple[str, ...] = tuple(unit_list)
        self._indices = indices

    @property
    def units(self) -> tuple[str, ...]:
        return self._units

    def index_of(self, unit: str) -> int:
        """Return the position of *unit*, raising ``UnknownUnitError`` if absent."""
        try:
            return self._indices[unit]
        except KeyError:
            raise UnknownUnitError(unit) from None

    def validate(self, units: Iterable[str]) -> None:
        """Raise ``UnknownUnitError`` for the first unit not in the alphabet."""
        for unit in units:
            if unit not in self._indices:
                raise UnknownUnitError(unit)

    def scroll_path(self, start: str, end: str) -> list[str]:
        """Units shown while scrolling from *start* to *end*, both inclusive.

        Units outside the alphabet cannot be scrolled to, so the path
        degenerates into a direct jump.
        """
        if start == end:
            return [end]

        start_index = self._scroll_index(start)
        end_index = self._scroll_index(end)
        if start_index is None or end_index is None:
            return [start, end]

        step = 1 if end_index > start_index else -1
        return [self._unit_at(i) for i in range(start_index, end_index + step, step)]

    def _scroll_index(self, unit: str) -> int | None:
        # EMPTY occupies scroll position 0; real units are shifted by one.
        if unit == EMPTY:
            return 0
        index = self._indices.get(unit)
        return None if index is None else index + 1

    def _unit_at(self, scroll_index: int) -> str:
        return EMPTY if scroll_index == 0 else self._units[scroll_index - 1]

    def __contains__(self, unit: object) -> bool:
        return unit in self._indices

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScrollAlphabet):
            return NotImplemented
        return self._units == other._units

    def __hash__(self) -> int:
        return hash(self._units)

    def __repr__(self) -> str:
        return f"ScrollAlphabet({''.join(self._units)!r})"


def number_alphabet() -> ScrollAlphabet:
    """Alphabet of the decimal digits ``0``-``9``."""
    return ScrollAlphabet(NUMBER_LIST)


def alphabetical_alphabet() -> ScrollAlphabet:
    """Alphabet of ``a``-``z`` followed by ``A``-``Z``."""
    return ScrollAlphabet(ALPHABETICAL_LIST)
