"""Application service: reporting queries.

Thin wrappers that read the current snapshot, hand it to the metrics
service and format the result for display.  Nothing is cached; every
call recomputes from the repositories.
"""

from __future__ import annotations

from bizdash.application.dto import BucketDTO, ProductRevenueDTO, SummaryDTO, format_amount
from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.session import Session
from bizdash.domain.repository.product_repository import ProductRepository
from bizdash.domain.repository.sale_repository import SaleRepository
from bizdash.domain.service import metrics
from bizdash.domain.service.clock import Clock

# period name -> (bucketing function, default number of buckets)
PERIODS = {
    "day": (metrics.bucket_by_day, 7),
    "week": (metrics.bucket_by_week, 4),
    "month": (metrics.bucket_by_month, 12),
    "year": (metrics.bucket_by_year, 3),
}


class ShowSummaryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        session: Session,
        clock: Clock,
        use_snapshot_cost: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._session = session
        self._clock = clock
        self._use_snapshot_cost = use_snapshot_cost

    def handle(self) -> SummaryDTO:
        summary = metrics.dashboard_summary(
            self._sale_repo.list_all(),
            self._product_repo.list_all(),
            self._clock.today(),
            use_snapshot_cost=self._use_snapshot_cost,
        )
        symbol = self._session.currency
        return SummaryDTO(
            today_revenue=format_amount(summary.today_revenue, symbol),
            week_revenue=format_amount(summary.week_revenue, symbol),
            month_revenue=format_amount(summary.month_revenue, symbol),
            total_revenue=format_amount(summary.total_revenue, symbol),
            total_profit=format_amount(summary.total_profit, symbol),
            profit_margin=f"{summary.profit_margin:.2f}%",
            sales_count=summary.sales_count,
            best_product=summary.best_product_name or "N/A",
            best_product_quantity=summary.best_product_quantity,
        )


class ShowChartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        session: Session,
        clock: Clock,
        use_snapshot_cost: bool = False,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._session = session
        self._clock = clock
        self._use_snapshot_cost = use_snapshot_cost

    def handle(self, period: str = "month", count: int | None = None) -> list[BucketDTO]:
        """Revenue and profit per period, oldest bucket first.

        ``count`` defaults to 7 days, 4 weeks, 12 months or 3 years.
        """
        if period not in PERIODS:
            raise ValidationError(
                f"Unknown period '{period}', expected one of {', '.join(PERIODS)}"
            )
        bucket_fn, default_count = PERIODS[period]

        buckets = bucket_fn(
            self._sale_repo.list_all(),
            self._product_repo.list_all(),
            default_count if count is None else count,
            self._clock.today(),
            use_snapshot_cost=self._use_snapshot_cost,
        )
        symbol = self._session.currency
        return [
            BucketDTO(
                label=b.label,
                revenue=format_amount(b.revenue, symbol),
                profit=format_amount(b.profit, symbol),
            )
            for b in buckets
        ]


class ShowProductRevenueHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        session: Session,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._session = session

    def handle(self, top: int | None = None) -> list[ProductRevenueDTO]:
        """Revenue per product in catalog order, or the best ``top`` by revenue."""
        products = self._product_repo.list_all()
        sales = self._sale_repo.list_all()
        if top is None:
            rows = metrics.revenue_by_product(products, sales)
        else:
            rows = metrics.top_products(products, sales, limit=top)

        symbol = self._session.currency
        return [ProductRevenueDTO(name=r.name, value=format_amount(r.value, symbol)) for r in rows]
