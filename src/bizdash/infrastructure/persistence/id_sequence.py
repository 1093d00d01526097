"""Monotonic counter implementation of IdGenerator."""

from __future__ import annotations

import itertools
import threading

from bizdash.domain.repository.id_generator import IdGenerator


class IdSequence(IdGenerator):
    """Hands out "1", "2", "3", ... and never repeats within a process.

    ``start`` lets a store seeded with existing ids continue after the
    highest one.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            return str(next(self._counter))

    @staticmethod
    def after(existing_ids: list[str]) -> IdSequence:
        """A sequence starting past every numeric id in *existing_ids*."""
        numeric = [int(i) for i in existing_ids if i.isdigit()]
        return IdSequence(max(numeric, default=0) + 1)
