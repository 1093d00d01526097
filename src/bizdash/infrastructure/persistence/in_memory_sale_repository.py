"""In-memory implementation of SaleRepository.

New sales go to the front so ``list_all()`` reads most-recent-first.
"""

from __future__ import annotations

from bizdash.domain.model.sale import Sale
from bizdash.domain.repository.id_generator import IdGenerator
from bizdash.domain.repository.sale_repository import SaleRepository


class InMemorySaleRepository(SaleRepository):

    def __init__(self, ids: IdGenerator, sales: list[Sale] | None = None) -> None:
        self._ids = ids
        self._sales: list[Sale] = list(sales or [])

    def next_id(self) -> str:
        return self._ids.next_id()

    def get_by_id(self, sale_id: str) -> Sale | None:
        for sale in self._sales:
            if sale.id == sale_id:
                return sale
        return None

    def list_all(self) -> list[Sale]:
        return list(self._sales)

    def add(self, sale: Sale) -> None:
        self._sales.insert(0, sale)
