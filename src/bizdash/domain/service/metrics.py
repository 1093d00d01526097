"""Domain service: sales metrics.

Pure, read-only aggregation over a snapshot of products and sales.  No
function here keeps state or caches anything; every figure is derived
again from the collections passed in, and "today" is always an explicit
argument.

Profit is computed against the product's *current* cost price unless the
caller asks for the cost snapshot recorded on the sale.  Editing a cost
price therefore changes historical profit figures in the default mode.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.product import Product
from bizdash.domain.model.sale import Sale

ZERO = Decimal("0")
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Bucket:
    """Revenue and profit for one calendar period (both bounds inclusive)."""

    label: str
    start: date
    end: date
    revenue: Decimal
    profit: Decimal


@dataclass(frozen=True)
class ProductRevenue:
    product_id: str
    name: str
    value: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    today_revenue: Decimal
    week_revenue: Decimal
    month_revenue: Decimal
    total_revenue: Decimal
    total_profit: Decimal
    profit_margin: Decimal  # percent
    sales_count: int
    best_product_id: str | None
    best_product_name: str | None
    best_product_quantity: int


# ---------------------------------------------------------------------------
# Profit
# ---------------------------------------------------------------------------


def find_product(products: Iterable[Product], product_id: str) -> Product | None:
    """Resolve a weak product reference; None when it no longer exists."""
    for product in products:
        if product.id == product_id:
            return product
    return None


def profit_of(
    sale: Sale,
    products: Iterable[Product],
    use_snapshot_cost: bool = False,
) -> Decimal:
    """``sale.total - cost_price * quantity``.

    Returns 0 when the product is gone, unless ``use_snapshot_cost`` is set
    and the sale carries its own unit cost.
    """
    return _profit(sale, _index(products), use_snapshot_cost)


def total_revenue(sales: Iterable[Sale]) -> Decimal:
    return sum((s.total for s in sales), ZERO)


def total_profit(
    sales: Iterable[Sale],
    products: Iterable[Product],
    use_snapshot_cost: bool = False,
) -> Decimal:
    by_id = _index(products)
    return sum((_profit(s, by_id, use_snapshot_cost) for s in sales), ZERO)


def profit_margin(
    sales: Sequence[Sale],
    products: Iterable[Product],
    use_snapshot_cost: bool = False,
) -> Decimal:
    """Profit as a percentage of revenue, 0 when there is no revenue."""
    revenue = total_revenue(sales)
    if revenue <= ZERO:
        return ZERO
    profit = total_profit(sales, products, use_snapshot_cost)
    return (profit / revenue * 100).quantize(_CENTS)


def revenue_between(sales: Iterable[Sale], start: date, end: date) -> Decimal:
    return total_revenue(s for s in sales if start <= s.date <= end)


# ---------------------------------------------------------------------------
# Time buckets
# ---------------------------------------------------------------------------


def bucket_by_day(
    sales: Sequence[Sale],
    products: Iterable[Product],
    n: int,
    today: date,
    use_snapshot_cost: bool = False,
) -> list[Bucket]:
    """The last ``n`` calendar days ending with ``today``, oldest first."""
    periods = []
    for offset in range(_check_count(n) - 1, -1, -1):
        day = today - timedelta(days=offset)
        periods.append((day.isoformat(), day, day))
    return _aggregate(sales, products, periods, use_snapshot_cost)


def bucket_by_week(
    sales: Sequence[Sale],
    products: Iterable[Product],
    n: int,
    today: date,
    use_snapshot_cost: bool = False,
) -> list[Bucket]:
    """The last ``n`` Monday-to-Sunday weeks ending with the current one."""
    monday = today - timedelta(days=today.weekday())
    periods = []
    for offset in range(_check_count(n) - 1, -1, -1):
        start = monday - timedelta(weeks=offset)
        iso_year, iso_week, _ = start.isocalendar()
        periods.append((f"{iso_year}-W{iso_week:02d}", start, start + timedelta(days=6)))
    return _aggregate(sales, products, periods, use_snapshot_cost)


def bucket_by_month(
    sales: Sequence[Sale],
    products: Iterable[Product],
    n: int,
    today: date,
    use_snapshot_cost: bool = False,
) -> list[Bucket]:
    """The last ``n`` calendar months ending with the current one."""
    current = today.year * 12 + today.month - 1
    periods = []
    for offset in range(_check_count(n) - 1, -1, -1):
        year, month_index = divmod(current - offset, 12)
        month = month_index + 1
        last_day = calendar.monthrange(year, month)[1]
        periods.append(
            (f"{year}-{month:02d}", date(year, month, 1), date(year, month, last_day))
        )
    return _aggregate(sales, products, periods, use_snapshot_cost)


def bucket_by_year(
    sales: Sequence[Sale],
    products: Iterable[Product],
    n: int,
    today: date,
    use_snapshot_cost: bool = False,
) -> list[Bucket]:
    """The last ``n`` calendar years ending with the current one."""
    periods = []
    for offset in range(_check_count(n) - 1, -1, -1):
        year = today.year - offset
        periods.append((str(year), date(year, 1, 1), date(year, 12, 31)))
    return _aggregate(sales, products, periods, use_snapshot_cost)


# ---------------------------------------------------------------------------
# Rankings
# ---------------------------------------------------------------------------


def best_product(sales: Iterable[Sale]) -> tuple[str, int] | None:
    """Product id with the most units sold, and that unit count.

    Ties go to the product that was sold first in iteration order.
    """
    totals: dict[str, int] = {}
    for sale in sales:
        totals[sale.product_id] = totals.get(sale.product_id, 0) + sale.quantity.value

    best: tuple[str, int] | None = None
    for product_id, quantity in totals.items():
        if best is None or quantity > best[1]:
            best = (product_id, quantity)
    return best


def revenue_by_product(
    products: Iterable[Product],
    sales: Iterable[Sale],
) -> list[ProductRevenue]:
    """Revenue per product in catalog order, zero-sales products included.

    Sales whose product has been deleted are not attributed anywhere.
    """
    totals: dict[str, Decimal] = {}
    for sale in sales:
        totals[sale.product_id] = totals.get(sale.product_id, ZERO) + sale.total

    return [
        ProductRevenue(product_id=p.id, name=p.name, value=totals.get(p.id, ZERO))
        for p in products
    ]


def top_products(
    products: Iterable[Product],
    sales: Iterable[Sale],
    limit: int = 3,
) -> list[ProductRevenue]:
    """Highest-revenue products; equal revenue keeps catalog order."""
    ranked = sorted(revenue_by_product(products, sales), key=lambda r: r.value, reverse=True)
    return ranked[:limit]


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


def dashboard_summary(
    sales: Sequence[Sale],
    products: Sequence[Product],
    today: date,
    use_snapshot_cost: bool = False,
) -> DashboardSummary:
    """Headline figures for the dashboard cards.

    The week figure covers the last seven days, today included; the
    month figure covers sales from the first of the current month.
    """
    week_start = today - timedelta(days=6)
    month_start = today.replace(day=1)

    best = best_product(sales)
    best_name = None
    if best is not None:
        product = find_product(products, best[0])
        best_name = product.name if product is not None else None

    return DashboardSummary(
        today_revenue=total_revenue(s for s in sales if s.date == today),
        week_revenue=total_revenue(s for s in sales if s.date >= week_start),
        month_revenue=total_revenue(s for s in sales if s.date >= month_start),
        total_revenue=total_revenue(sales),
        total_profit=total_profit(sales, products, use_snapshot_cost),
        profit_margin=profit_margin(sales, products, use_snapshot_cost),
        sales_count=len(sales),
        best_product_id=best[0] if best else None,
        best_product_name=best_name,
        best_product_quantity=best[1] if best else 0,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _index(products: Iterable[Product]) -> dict[str, Product]:
    by_id: dict[str, Product] = {}
    for product in products:
        by_id.setdefault(product.id, product)
    return by_id


def _profit(sale: Sale, by_id: dict[str, Product], use_snapshot_cost: bool) -> Decimal:
    if use_snapshot_cost and sale.unit_cost is not None:
        unit_cost = sale.unit_cost.amount
    else:
        product = by_id.get(sale.product_id)
        if product is None:
            return ZERO
        unit_cost = product.cost_price.amount
    return sale.total - unit_cost * sale.quantity.value


def _aggregate(
    sales: Sequence[Sale],
    products: Iterable[Product],
    periods: list[tuple[str, date, date]],
    use_snapshot_cost: bool,
) -> list[Bucket]:
    by_id = _index(products)
    buckets = []
    for label, start, end in periods:
        in_period = [s for s in sales if start <= s.date <= end]
        buckets.append(
            Bucket(
                label=label,
                start=start,
                end=end,
                revenue=sum((s.total for s in in_period), ZERO),
                profit=sum((_profit(s, by_id, use_snapshot_cost) for s in in_period), ZERO),
            )
        )
    return buckets


def _check_count(n: int) -> int:
    if n < 0:
        raise ValidationError(f"Bucket count cannot be negative, got {n}")
    return n
