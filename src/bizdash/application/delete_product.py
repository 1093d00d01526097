"""Application service: Delete Product use case.

Sales that reference the product are left alone; their ``product_id``
simply stops resolving.
"""

from __future__ import annotations

import logging

from bizdash.domain.exceptions import EntityNotFoundError
from bizdash.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, strict: bool = False) -> None:
        self._product_repo = product_repo
        self._strict = strict

    def handle(self, product_id: str) -> bool:
        if self._product_repo.delete(product_id):
            logger.info("Deleted product #%s", product_id)
            return True

        if self._strict:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        logger.warning("Ignoring delete of unknown product #%s", product_id)
        return False
