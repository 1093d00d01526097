"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from typing import Any

from bizdash.domain.exceptions import EntityNotFoundError
from bizdash.domain.model.product import Product
from bizdash.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, strict: bool = False) -> None:
        self._product_repo = product_repo
        self._strict = strict

    def handle(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Merge *changes* into an existing product.

        Existing sales keep their own name and price snapshot.  An unknown
        id raises EntityNotFoundError in strict mode and is otherwise
        ignored (returns None).
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            if self._strict:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            logger.warning("Ignoring update of unknown product #%s", product_id)
            return None

        product.apply_patch(changes)
        self._product_repo.save(product)
        logger.debug("Updated product #%s: %s", product_id, sorted(changes))
        return product
