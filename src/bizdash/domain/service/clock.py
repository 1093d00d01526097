"""Abstract clock.

Everything that needs "today" receives a Clock instead of reading the
wall clock inline, so reports can be computed for any reference day.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar day."""
