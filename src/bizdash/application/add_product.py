"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Any

from bizdash.domain.model.product import Product, ProductStatus
from bizdash.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        code: str,
        name: str,
        cost_price: Any,
        sale_price: Any,
        stock: int,
        status: ProductStatus | str = ProductStatus.ACTIVE,
    ) -> Product:
        """Add a new product to the end of the catalog.

        Product codes are not required to be unique.
        """
        product = Product.create(
            product_id=self._product_repo.next_id(),
            code=code,
            name=name,
            cost_price=cost_price,
            sale_price=sale_price,
            stock=stock,
            status=status,
        )
        self._product_repo.save(product)
        logger.info("Added product #%s '%s' (%s)", product.id, product.name, product.code)
        return product
