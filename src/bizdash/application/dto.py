"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Monetary values are
pre-formatted with the session's currency symbol.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class SaleSpec:
    """Input: a sale exactly as the caller assembled it.

    ``product_name`` and ``unit_price`` are the caller's snapshot of the
    product, and ``total`` is stored as given.
    """

    date: date
    product_id: str
    product_name: str
    quantity: int
    unit_price: Any
    discount: Any
    total: Any


@dataclass(frozen=True)
class ProductDTO:
    id: str
    code: str
    name: str
    cost_price: str
    sale_price: str
    stock: int
    status: str
    low_stock: bool


@dataclass(frozen=True)
class SaleDTO:
    id: str
    date: str
    product_name: str
    quantity: int
    unit_price: str
    discount: str  # "-" when no discount was given
    total: str


@dataclass(frozen=True)
class SalesListingDTO:
    """Output: the filtered sales table plus its footer figures."""

    sales: list[SaleDTO]
    total_amount: str
    items_sold: int


@dataclass(frozen=True)
class DocumentDTO:
    id: str
    name: str
    category: str
    date: str
    kind: str
    url: str


@dataclass(frozen=True)
class DocumentListingDTO:
    documents: list[DocumentDTO]
    total: int
    images: int
    pdfs: int


@dataclass(frozen=True)
class BucketDTO:
    label: str
    revenue: str
    profit: str


@dataclass(frozen=True)
class ProductRevenueDTO:
    name: str
    value: str


@dataclass(frozen=True)
class SummaryDTO:
    today_revenue: str
    week_revenue: str
    month_revenue: str
    total_revenue: str
    total_profit: str
    profit_margin: str  # e.g. "47.50%"
    sales_count: int
    best_product: str  # "N/A" when nothing was sold
    best_product_quantity: int


def format_amount(amount: Decimal, symbol: str) -> str:
    """Format a signed amount, e.g. ``-$5.00`` for a loss."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):.2f}"
