"""Clock implementations."""

from __future__ import annotations

from datetime import date

from bizdash.domain.service.clock import Clock


class SystemClock(Clock):
    """Local calendar day from the wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Always reports the same day.  Used for reproducible reports."""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day

    def set(self, day: date) -> None:
        self._day = day
