"""Application service: Sell Product use case.

The point-of-sale flow: pick a catalog product, a quantity and an
optional discount.  The name and price are snapshotted from the product
and the total is computed here before handing off to RecordSaleHandler.
"""

from __future__ import annotations

from typing import Any

from bizdash.application.dto import SaleSpec
from bizdash.application.record_sale import RecordSaleHandler
from bizdash.domain.exceptions import EntityNotFoundError
from bizdash.domain.model.sale import Sale
from bizdash.domain.repository.product_repository import ProductRepository
from bizdash.domain.service.clock import Clock


class SellProductHandler:

    def __init__(
        self,
        record_sale: RecordSaleHandler,
        product_repo: ProductRepository,
        clock: Clock,
    ) -> None:
        self._record_sale = record_sale
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: str, quantity: int, discount: Any = 0) -> Sale:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        spec = SaleSpec(
            date=self._clock.today(),
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=product.sale_price,
            discount=discount,
            total=Sale.compute_total(product.sale_price, quantity, discount),
        )
        return self._record_sale.handle(spec)
