"""Ticker components."""

from pi.ticker.components.ticker import Ticker

__all__ = [
    "Ticker",
]
