"""Application service: Search Sales use case (query)."""

from __future__ import annotations

from datetime import date

from bizdash.application.dto import SaleDTO, SalesListingDTO, format_amount
from bizdash.domain.model.sale import Sale
from bizdash.domain.model.session import Session
from bizdash.domain.repository.sale_repository import SaleRepository
from bizdash.domain.service.metrics import total_revenue


class SearchSalesHandler:

    def __init__(self, sale_repo: SaleRepository, session: Session) -> None:
        self._sale_repo = sale_repo
        self._session = session

    def handle(self, query: str = "", on: date | None = None) -> SalesListingDTO:
        """Filter sales by product name substring and exact day.

        The footer figures (amount and items sold) cover the filtered
        rows only.
        """
        needle = query.strip().lower()
        matches = [
            sale
            for sale in self._sale_repo.list_all()
            if needle in sale.product_name.lower() and (on is None or sale.date == on)
        ]

        return SalesListingDTO(
            sales=[self._to_dto(sale) for sale in matches],
            total_amount=format_amount(total_revenue(matches), self._session.currency),
            items_sold=sum(sale.quantity.value for sale in matches),
        )

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, sale: Sale) -> SaleDTO:
        symbol = self._session.currency
        return SaleDTO(
            id=sale.id,
            date=sale.date.isoformat(),
            product_name=sale.product_name,
            quantity=sale.quantity.value,
            unit_price=sale.unit_price.format(symbol),
            discount=sale.discount.format(symbol) if sale.discount.amount > 0 else "-",
            total=format_amount(sale.total, symbol),
        )
