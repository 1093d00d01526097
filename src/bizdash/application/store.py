"""The business store: facade over products, sales, documents and the session.

``BusinessStore`` owns the session and the repositories, wires the
use-case handlers together and serialises every mutation behind one
lock.  Recording a sale and deducting its stock therefore happen as one
step: no reader can observe the sale without the stock change or the
other way round.

Create one store per process (see ``infrastructure.bootstrap``) rather
than sharing module-level state.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any

from bizdash.application.add_document import AddDocumentHandler
from bizdash.application.add_product import AddProductHandler
from bizdash.application.authenticate import LoginHandler, LogoutHandler
from bizdash.application.delete_document import DeleteDocumentHandler
from bizdash.application.delete_product import DeleteProductHandler
from bizdash.application.dto import (
    BucketDTO,
    DocumentListingDTO,
    ProductDTO,
    ProductRevenueDTO,
    SaleSpec,
    SalesListingDTO,
    SummaryDTO,
)
from bizdash.application.record_sale import RecordSaleHandler
from bizdash.application.search_documents import SearchDocumentsHandler
from bizdash.application.search_products import SearchProductsHandler
from bizdash.application.search_sales import SearchSalesHandler
from bizdash.application.sell_product import SellProductHandler
from bizdash.application.show_report import (
    ShowChartHandler,
    ShowProductRevenueHandler,
    ShowSummaryHandler,
)
from bizdash.application.update_product import UpdateProductHandler
from bizdash.application.update_settings import (
    ToggleThemeHandler,
    UpdateCompanyLogoHandler,
    UpdateCurrencyHandler,
)
from bizdash.domain.model.document import Document
from bizdash.domain.model.product import Product, ProductStatus
from bizdash.domain.model.sale import Sale
from bizdash.domain.model.session import Session, Theme, User
from bizdash.domain.repository.document_repository import DocumentRepository
from bizdash.domain.repository.product_repository import ProductRepository
from bizdash.domain.repository.sale_repository import SaleRepository
from bizdash.domain.service import metrics
from bizdash.domain.service.clock import Clock


class BusinessStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        document_repo: DocumentRepository,
        clock: Clock,
        session: Session | None = None,
        strict_lookups: bool = False,
        enforce_stock: bool = False,
        use_snapshot_cost: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._document_repo = document_repo
        self._clock = clock
        self._session = session or Session()
        self._use_snapshot_cost = use_snapshot_cost
        self._lock = threading.RLock()

        self._add_product = AddProductHandler(product_repo)
        self._update_product = UpdateProductHandler(product_repo, strict=strict_lookups)
        self._delete_product = DeleteProductHandler(product_repo, strict=strict_lookups)
        self._record_sale = RecordSaleHandler(sale_repo, product_repo, enforce_stock=enforce_stock)
        self._sell_product = SellProductHandler(self._record_sale, product_repo, clock)
        self._add_document = AddDocumentHandler(document_repo, clock)
        self._delete_document = DeleteDocumentHandler(document_repo, strict=strict_lookups)
        self._login = LoginHandler(self._session)
        self._logout = LogoutHandler(self._session)
        self._toggle_theme = ToggleThemeHandler(self._session)
        self._update_currency = UpdateCurrencyHandler(self._session)
        self._update_logo = UpdateCompanyLogoHandler(self._session)

    # --- Snapshot reads -------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        """Copies of the catalog, in insertion order."""
        with self._lock:
            return [replace(p) for p in self._product_repo.list_all()]

    @property
    def sales(self) -> list[Sale]:
        """Every sale, most recently recorded first."""
        with self._lock:
            return self._sale_repo.list_all()

    @property
    def documents(self) -> list[Document]:
        with self._lock:
            return self._document_repo.list_all()

    def get_product(self, product_id: str) -> Product | None:
        with self._lock:
            product = self._product_repo.get_by_id(product_id)
            return replace(product) if product is not None else None

    @property
    def session(self) -> Session:
        with self._lock:
            return replace(self._session)

    @property
    def user(self) -> User | None:
        return self._session.user

    @property
    def theme(self) -> Theme:
        return self._session.theme

    @property
    def currency(self) -> str:
        return self._session.currency

    @property
    def company_logo(self) -> str:
        return self._session.company_logo

    @property
    def today(self) -> date:
        return self._clock.today()

    # --- Products -------------------------------------------------------------

    def add_product(
        self,
        code: str,
        name: str,
        cost_price: Any,
        sale_price: Any,
        stock: int,
        status: ProductStatus | str = ProductStatus.ACTIVE,
    ) -> Product:
        with self._lock:
            return self._add_product.handle(code, name, cost_price, sale_price, stock, status)

    def update_product(self, product_id: str, **changes: Any) -> Product | None:
        with self._lock:
            return self._update_product.handle(product_id, changes)

    def delete_product(self, product_id: str) -> bool:
        with self._lock:
            return self._delete_product.handle(product_id)

    # --- Sales ----------------------------------------------------------------

    def add_sale(
        self,
        date: date,
        product_id: str,
        product_name: str,
        quantity: int,
        unit_price: Any,
        discount: Any,
        total: Any,
    ) -> Sale:
        """Record a sale exactly as given and deduct its units from stock."""
        spec = SaleSpec(
            date=date,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            unit_price=unit_price,
            discount=discount,
            total=total,
        )
        with self._lock:
            return self._record_sale.handle(spec)

    def sell(self, product_id: str, quantity: int, discount: Any = 0) -> Sale:
        """Sell a catalog product today at its current sale price."""
        with self._lock:
            return self._sell_product.handle(product_id, quantity, discount)

    # --- Documents ------------------------------------------------------------

    def add_document(
        self,
        name: str,
        url: str,
        type: str,
        category: str | None = None,
        created_on: date | None = None,
    ) -> Document:
        with self._lock:
            return self._add_document.handle(name, url, type, category, created_on)

    def delete_document(self, document_id: str) -> bool:
        with self._lock:
            return self._delete_document.handle(document_id)

    # --- Session & settings ---------------------------------------------------

    def login(self, email: str, password: str) -> bool:
        with self._lock:
            return self._login.handle(email, password)

    def logout(self) -> None:
        with self._lock:
            self._logout.handle()

    def toggle_theme(self) -> Theme:
        with self._lock:
            return self._toggle_theme.handle()

    def update_currency(self, currency: str) -> None:
        with self._lock:
            self._update_currency.handle(currency)

    def update_company_logo(self, logo: str) -> None:
        with self._lock:
            self._update_logo.handle(logo)

    # --- Queries --------------------------------------------------------------

    def profit_of(self, sale: Sale) -> Decimal:
        with self._lock:
            return metrics.profit_of(
                sale, self._product_repo.list_all(), self._use_snapshot_cost
            )

    def search_products(
        self,
        query: str = "",
        status: ProductStatus | str | None = None,
        low_stock_only: bool = False,
    ) -> list[ProductDTO]:
        with self._lock:
            handler = SearchProductsHandler(self._product_repo, self._session)
            return handler.handle(query, status, low_stock_only)

    def search_sales(self, query: str = "", on: date | None = None) -> SalesListingDTO:
        with self._lock:
            return SearchSalesHandler(self._sale_repo, self._session).handle(query, on)

    def search_documents(self, query: str = "") -> DocumentListingDTO:
        with self._lock:
            return SearchDocumentsHandler(self._document_repo).handle(query)

    def summary(self) -> SummaryDTO:
        with self._lock:
            handler = ShowSummaryHandler(
                self._product_repo, self._sale_repo, self._session, self._clock,
                use_snapshot_cost=self._use_snapshot_cost,
            )
            return handler.handle()

    def chart(self, period: str = "month", count: int | None = None) -> list[BucketDTO]:
        with self._lock:
            handler = ShowChartHandler(
                self._product_repo, self._sale_repo, self._session, self._clock,
                use_snapshot_cost=self._use_snapshot_cost,
            )
            return handler.handle(period, count)

    def product_revenue(self, top: int | None = None) -> list[ProductRevenueDTO]:
        with self._lock:
            handler = ShowProductRevenueHandler(self._product_repo, self._sale_repo, self._session)
            return handler.handle(top)
