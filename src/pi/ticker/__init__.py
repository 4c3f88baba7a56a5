"""pi-ticker: scrolling ticker labels with column reconciliation."""

# Scroll alphabets
from pi.ticker.alphabet import (
    ALPHABETICAL_LIST,
    EMPTY,
    NUMBER_LIST,
    ScrollAlphabet,
    alphabetical_alphabet,
    number_alphabet,
)

# Columns and render sinks
from pi.ticker.column import Column, LineCursor, RenderSink, TickerColumn

# Components
from pi.ticker.components import Ticker

# Configuration
from pi.ticker.config import Gravity, TickerOptions

# Easing curves
from pi.ticker.easing import Easing, ease_in_out, ease_out, linear

# Errors
from pi.ticker.errors import (
    CorruptScriptError,
    InvalidAlphabetError,
    NotConfiguredError,
    TickerError,
    UnknownUnitError,
)

# Edit scripts
from pi.ticker.levenshtein import (
    DELETE,
    INSERT,
    SAME,
    EditAction,
    apply_edit_script,
    compute_edit_script,
    edit_distance,
)

# Column collection
from pi.ticker.manager import ColumnFactory, ColumnManager

# Utilities
from pi.ticker.utils import split_units, unit_width

__all__ = [
    # Scroll alphabets
    "ALPHABETICAL_LIST",
    "EMPTY",
    "NUMBER_LIST",
    "ScrollAlphabet",
    "alphabetical_alphabet",
    "number_alphabet",
    # Columns and render sinks
    "Column",
    "LineCursor",
    "RenderSink",
    "TickerColumn",
    # Components
    "Ticker",
    # Configuration
    "Gravity",
    "TickerOptions",
    # Easing curves
    "Easing",
    "ease_in_out",
    "ease_out",
    "linear",
    # Errors
    "CorruptScriptError",
    "InvalidAlphabetError",
    "NotConfiguredError",
    "TickerError",
    "UnknownUnitError",
    # Edit scripts
    "DELETE",
    "INSERT",
    "SAME",
    "EditAction",
    "apply_edit_script",
    "compute_edit_script",
    "edit_distance",
    # Column collection
    "ColumnFactory",
    "ColumnManager",
    # Utilities
    "split_units",
    "unit_width",
]
