"""Abstract repository for Sale records.

Sales are append-only: there is no update and no delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bizdash.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique sale ID."""

    @abstractmethod
    def get_by_id(self, sale_id: str) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, most recently recorded first."""

    @abstractmethod
    def add(self, sale: Sale) -> None:
        """Record a new sale."""
