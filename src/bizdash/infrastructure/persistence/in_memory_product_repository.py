"""In-memory implementation of ProductRepository.

Products are kept in a dict, which preserves insertion order; saving an
existing product updates it in place without moving it.
"""

from __future__ import annotations

from bizdash.domain.model.product import Product
from bizdash.domain.repository.id_generator import IdGenerator
from bizdash.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, ids: IdGenerator, products: list[Product] | None = None) -> None:
        self._ids = ids
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        return self._ids.next_id()

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None
