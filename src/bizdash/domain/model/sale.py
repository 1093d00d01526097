"""Sale record.

A sale captures a snapshot of the product at the moment it was sold:
name, unit price and (optionally) unit cost.  Later edits to the product
never rewrite those values.  Sales are immutable; there is no update or
delete.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.value_objects import Money, Quantity, to_amount


@dataclass(frozen=True)
class Sale:
    """A single product sale on a calendar day.

    ``product_id`` is a weak reference: the product may have been deleted
    since, in which case lookups must resolve to nothing.

    ``total`` is stored exactly as the caller supplied it, sign included.
    The usual formula is ``unit_price * quantity - discount`` (see
    ``compute_total``), which goes negative when the discount exceeds the
    subtotal, but the store never recomputes it.
    """

    id: str
    date: date
    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot at sale time
    discount: Money  # currency units, not a percentage
    total: Decimal  # signed
    unit_cost: Money | None = None  # snapshot at sale time, when known

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        sale_id: str,
        sale_date: date,
        product_id: str,
        product_name: str,
        quantity: int | Quantity,
        unit_price: Any,
        discount: Any,
        total: Any,
        unit_cost: Any = None,
    ) -> Sale:
        if not isinstance(sale_date, date):
            raise ValidationError(
                f"Sale date must be a date, got {type(sale_date).__name__}"
            )
        if not product_id:
            raise ValidationError("Sale must reference a product")

        return Sale(
            id=sale_id,
            date=sale_date,
            product_id=str(product_id),
            product_name=product_name,
            quantity=quantity if isinstance(quantity, Quantity) else Quantity(quantity),
            unit_price=Money.of(unit_price),
            discount=Money.of(discount),
            total=to_amount(total),
            unit_cost=None if unit_cost is None else Money.of(unit_cost),
        )

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def compute_total(unit_price: Any, quantity: int, discount: Any = 0) -> Decimal:
        """Caller-side total: ``unit_price * quantity - discount``, unfloored."""
        subtotal = Money.of(unit_price) * Quantity(quantity).value
        return subtotal.amount - Money.of(discount).amount
