"""Demo data the store starts from.

A tiny catalog and a week of sales, enough for every dashboard card and
chart to show something.  Fresh objects are built on each call so two
stores never share mutable products.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from bizdash.domain.model.product import Product, ProductStatus
from bizdash.domain.model.sale import Sale
from bizdash.domain.model.value_objects import Money, Quantity


def seed_products() -> list[Product]:
    return [
        Product(
            id="1",
            code="PROD-001",
            name="Producto Premium A",
            cost_price=Money.of(50),
            sale_price=Money.of(100),
            stock=150,
            status=ProductStatus.ACTIVE,
        ),
        Product(
            id="2",
            code="PROD-002",
            name="Producto Standard B",
            cost_price=Money.of(30),
            sale_price=Money.of(60),
            stock=200,
            status=ProductStatus.ACTIVE,
        ),
    ]


def seed_sales() -> list[Sale]:
    """Most recent first, matching the order the store keeps sales in."""
    rows = [
        ("1", date(2025, 11, 12), "1", "Producto Premium A", 5, 100, 0, 500),
        ("2", date(2025, 11, 11), "2", "Producto Standard B", 10, 60, 5, 595),
        ("3", date(2025, 11, 10), "1", "Producto Premium A", 3, 100, 0, 300),
        ("4", date(2025, 11, 9), "2", "Producto Standard B", 8, 60, 0, 480),
        ("5", date(2025, 11, 8), "1", "Producto Premium A", 12, 100, 10, 1190),
    ]
    return [
        Sale(
            id=sale_id,
            date=day,
            product_id=product_id,
            product_name=name,
            quantity=Quantity(qty),
            unit_price=Money.of(price),
            discount=Money.of(discount),
            total=Decimal(total),
        )
        for sale_id, day, product_id, name, qty, price, discount, total in rows
    ]
