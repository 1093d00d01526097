"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from bizdash.application.store import BusinessStore
from bizdash.domain.model.session import Session, Theme
from bizdash.domain.service.clock import Clock
from bizdash.infrastructure.clock import SystemClock
from bizdash.infrastructure.persistence.id_sequence import IdSequence
from bizdash.infrastructure.persistence.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from bizdash.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from bizdash.infrastructure.persistence.in_memory_sale_repository import (
    InMemorySaleRepository,
)
from bizdash.infrastructure.seed import seed_products, seed_sales


@dataclass(frozen=True)
class StoreConfig:
    """How a store behaves.

    ``strict_lookups`` turns update/delete of unknown ids into
    EntityNotFoundError instead of a logged no-op.  ``enforce_stock``
    refuses sales larger than the product's stock.  ``use_snapshot_cost``
    computes profit from the cost recorded on each sale rather than the
    product's current cost.
    """

    strict_lookups: bool = False
    enforce_stock: bool = False
    use_snapshot_cost: bool = False
    seed: bool = True
    currency: str = "$"
    theme: Theme = Theme.DARK


def build_store(config: StoreConfig | None = None, clock: Clock | None = None) -> BusinessStore:
    config = config or StoreConfig()

    products = seed_products() if config.seed else []
    sales = seed_sales() if config.seed else []

    product_repo = InMemoryProductRepository(
        IdSequence.after([p.id for p in products]), products
    )
    sale_repo = InMemorySaleRepository(IdSequence.after([s.id for s in sales]), sales)
    document_repo = InMemoryDocumentRepository(IdSequence())

    return BusinessStore(
        product_repo=product_repo,
        sale_repo=sale_repo,
        document_repo=document_repo,
        clock=clock or SystemClock(),
        session=Session(theme=config.theme, currency=config.currency),
        strict_lookups=config.strict_lookups,
        enforce_stock=config.enforce_stock,
        use_snapshot_cost=config.use_snapshot_cost,
    )
