"""Exceptions raised by the ticker engine."""

from __future__ import annotations


class TickerError(Exception):
    """Base class for all ticker errors."""


class NotConfiguredError(TickerError, RuntimeError):
    """Text was set before a scroll alphabet was configured."""

    def __init__(self, message: str = "Need to configure a scroll alphabet first.") -> None:
        super().__init__(message)


class UnknownUnitError(TickerError, ValueError):
    """A display unit is not part of the configured scroll alphabet."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unit {unit!r} is not in the scroll alphabet")
        self.unit = unit


class InvalidAlphabetError(TickerError, ValueError):
    """A scroll alphabet was rejected at configuration time."""


class CorruptScriptError(TickerError, RuntimeError):
    """An edit script could not be replayed.

    Indicates a bug in the diff engine, never bad input.
    """
