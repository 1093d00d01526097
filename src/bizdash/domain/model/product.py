"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices and stock change, products are added and removed from the catalog.
Removing a product never touches the sales that reference it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from bizdash.domain.exceptions import InsufficientStockError, ValidationError
from bizdash.domain.model.value_objects import Money


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


# Stock level below which the catalog flags a product for restocking.
LOW_STOCK_THRESHOLD = 50

_MONEY_FIELDS = ("cost_price", "sale_price")


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price, stock and status updates
    are legitimate mutations on the aggregate.  Use ``Product.create()``
    for new products; ``__init__`` stays simple so repositories and seed
    data can build products without re-validating.
    """

    id: str
    code: str
    name: str
    cost_price: Money
    sale_price: Money
    stock: int
    status: ProductStatus = ProductStatus.ACTIVE

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        product_id: str,
        code: str,
        name: str,
        cost_price: Any,
        sale_price: Any,
        stock: int,
        status: ProductStatus | str = ProductStatus.ACTIVE,
    ) -> Product:
        """Build a new product, coercing and validating every field."""
        if not code or not code.strip():
            raise ValidationError("Product code is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        return Product(
            id=product_id,
            code=code.strip(),
            name=name.strip(),
            cost_price=Money.of(cost_price),
            sale_price=Money.of(sale_price),
            stock=_check_stock(stock),
            status=parse_status(status),
        )

    # --- Mutations ------------------------------------------------------------

    def apply_patch(self, changes: dict[str, Any]) -> None:
        """Merge *changes* into the product.

        The id is immutable; unknown field names are rejected.  Every
        value is validated before anything is assigned, so a bad patch
        leaves the product untouched.
        """
        known = {f.name for f in fields(self)}
        staged: dict[str, Any] = {}

        for key, value in changes.items():
            if key == "id":
                raise ValidationError("Product id cannot be changed")
            if key not in known:
                raise ValidationError(f"Unknown product field: '{key}'")

            if key in _MONEY_FIELDS:
                staged[key] = Money.of(value)
            elif key == "stock":
                staged[key] = _check_stock(value)
            elif key == "status":
                staged[key] = parse_status(value)
            elif key in ("code", "name"):
                if not value or not str(value).strip():
                    raise ValidationError(f"Product {key} is required")
                staged[key] = str(value).strip()

        for key, value in staged.items():
            setattr(self, key, value)

    def ensure_in_stock(self, quantity: int) -> None:
        """Raise InsufficientStockError unless *quantity* units are on hand."""
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock})"
            )

    def remove_stock(self, quantity: int) -> None:
        """Deduct sold units from stock.

        The deduction is unconditional and stock may go below zero; call
        ``ensure_in_stock`` first where overselling must be refused.
        """
        self.stock -= quantity

    # --- Computed properties --------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    @property
    def is_low_stock(self) -> bool:
        return self.stock < LOW_STOCK_THRESHOLD


def _check_stock(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Stock must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError("Stock cannot be negative")
    return value


def parse_status(value: ProductStatus | str) -> ProductStatus:
    if isinstance(value, ProductStatus):
        return value
    try:
        return ProductStatus(str(value).lower())
    except ValueError as exc:
        raise ValidationError(f"Invalid product status: {value!r}") from exc
