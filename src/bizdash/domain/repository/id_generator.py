"""Abstract source of entity identifiers.

Repositories delegate ``next_id()`` here so the id scheme can be swapped
(counter, UUID) without touching the repositories themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IdGenerator(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Return an identifier never handed out before."""
