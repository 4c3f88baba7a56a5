"""Display-unit helpers: splitting text into units and measuring cell widths.

A display unit is one grapheme cluster. Widths are terminal cells, measured
with ``wcwidth`` the same way ``pi.tui`` measures visible text.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Unit splitting
# ---------------------------------------------------------------------------


def split_units(text: str | Iterable[str]) -> list[str]:
    """Split *text* into display units.

    Strings are segmented into grapheme clusters. Any other iterable is taken
    to already be a sequence of units and is copied as-is.
    """
    if isinstance(text, str):
        return list(grapheme.graphemes(text))
    return list(text)


# ---------------------------------------------------------------------------
# Width cache (capped at 256 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 256


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def unit_width(unit: str) -> int:
    """Return the terminal display width of a single display unit.

    Rules:
    1. The empty unit and control characters -> 0
    2. Emoji sequences (VS16, ZWJ, skin tones, flags) -> 2
    3. Otherwise wcwidth of the first non-mark codepoint.
    """
    if not unit:
        return 0

    # Fast ASCII path
    if len(unit) == 1:
        cp = ord(unit)
        if 0x20 <= cp <= 0x7E:
            return 1
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(unit), 0)

    cached = _width_cache.get(unit)
    if cached is not None:
        return cached

    for ch in unit:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return _cache_width(unit, 2)

    first = unit[0]
    if unicodedata.category(first).startswith("M"):
        return _cache_width(unit, 0)
    return _cache_width(unit, max(_wcwidth.wcwidth(first), 0))
