"""Application service: Search Products use case (query)."""

from __future__ import annotations

from bizdash.application.dto import ProductDTO
from bizdash.domain.model.product import Product, ProductStatus, parse_status
from bizdash.domain.model.session import Session
from bizdash.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository, session: Session) -> None:
        self._product_repo = product_repo
        self._session = session

    def handle(
        self,
        query: str = "",
        status: ProductStatus | str | None = None,
        low_stock_only: bool = False,
    ) -> list[ProductDTO]:
        """Filter the catalog by name/code substring and status.

        Matching is case-insensitive; an empty query matches everything.
        """
        needle = query.strip().lower()
        wanted = parse_status(status) if status is not None else None

        results = []
        for product in self._product_repo.list_all():
            if needle and needle not in product.name.lower() and needle not in product.code.lower():
                continue
            if wanted is not None and product.status != wanted:
                continue
            if low_stock_only and not product.is_low_stock:
                continue
            results.append(self._to_dto(product))
        return results

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, product: Product) -> ProductDTO:
        symbol = self._session.currency
        return ProductDTO(
            id=product.id,
            code=product.code,
            name=product.name,
            cost_price=product.cost_price.format(symbol),
            sale_price=product.sale_price.format(symbol),
            stock=product.stock,
            status=product.status.value,
            low_stock=product.is_low_stock,
        )
