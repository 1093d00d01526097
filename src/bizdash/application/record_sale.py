"""Application service: Record Sale use case.

Recording a sale and deducting the sold units from stock are one
logical step.  The handler validates everything first and only then
writes, so a rejected sale leaves neither the sale list nor the stock
changed.
"""

from __future__ import annotations

import logging

from bizdash.application.dto import SaleSpec
from bizdash.domain.model.sale import Sale
from bizdash.domain.repository.product_repository import ProductRepository
from bizdash.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        product_repo: ProductRepository,
        enforce_stock: bool = False,
    ) -> None:
        self._sale_repo = sale_repo
        self._product_repo = product_repo
        self._enforce_stock = enforce_stock

    def handle(self, spec: SaleSpec) -> Sale:
        """Record a sale and decrement the referenced product's stock.

        Steps:
        1. Resolve the product (it may have been deleted).
        2. Build the Sale, letting it validate its own fields, and refuse
           overselling when stock enforcement is on.
        3. Store the sale, then deduct stock if the product still exists.
        """
        product = self._product_repo.get_by_id(spec.product_id)

        sale = Sale.create(
            sale_id=self._sale_repo.next_id(),
            sale_date=spec.date,
            product_id=spec.product_id,
            product_name=spec.product_name,
            quantity=spec.quantity,
            unit_price=spec.unit_price,
            discount=spec.discount,
            total=spec.total,
            unit_cost=product.cost_price if product is not None else None,
        )

        if product is not None and self._enforce_stock:
            product.ensure_in_stock(sale.quantity.value)

        self._sale_repo.add(sale)

        if product is None:
            logger.warning(
                "Sale #%s references unknown product #%s; stock left unchanged",
                sale.id, spec.product_id,
            )
        else:
            product.remove_stock(sale.quantity.value)
            self._product_repo.save(product)

        logger.info(
            "Recorded sale #%s: %s x %s for %s",
            sale.id, sale.quantity, sale.product_name, sale.total,
        )
        return sale
