"""Shared fixtures for ticker tests."""

from __future__ import annotations

import pytest

from pi.ticker.alphabet import ScrollAlphabet, number_alphabet


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeUI:
    """Records render requests in place of a real TUI."""

    def __init__(self) -> None:
        self.render_requests = 0

    def request_render(self) -> None:
        self.render_requests += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ui() -> FakeUI:
    return FakeUI()


@pytest.fixture
def digits() -> ScrollAlphabet:
    return number_alphabet()
