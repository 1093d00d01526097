"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from bizdash.application.dto import ProductDTO
from bizdash.application.store import BusinessStore
from bizdash.domain.exceptions import DomainException


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Code':<10} {'Name':<22} {'Cost':>10} {'Price':>10} {'Stock':>7} {'Status':<8}"
    )
    click.echo("-" * 79)
    for p in products:
        flag = " !" if p.low_stock else ""
        click.echo(
            f"{p.id:<6} {p.code:<10} {p.name:<22} {p.cost_price:>10} "
            f"{p.sale_price:>10} {p.stock:>7} {p.status:<8}{flag}"
        )


@click.command("list")
@click.option("--search", default="", help="Match against product name or code.")
@click.option("--status", type=click.Choice(["active", "inactive"]), default=None,
              help="Only show products with this status.")
@click.pass_obj
def product_list(store: BusinessStore, search: str, status: str | None) -> None:
    """List products in the catalog."""
    _display_products(store.search_products(query=search, status=status))


@click.command("low-stock")
@click.pass_obj
def product_low_stock(store: BusinessStore) -> None:
    """List products that need restocking."""
    _display_products(store.search_products(low_stock_only=True))


@click.command("add")
@click.option("--code", required=True, help="Product code (e.g. PROD-003).")
@click.option("--name", required=True, help="Product name.")
@click.option("--cost", required=True, help="Cost price (e.g. 12.50).")
@click.option("--price", required=True, help="Sale price (e.g. 25.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(store: BusinessStore, code: str, name: str, cost: str, price: str,
                stock: int) -> None:
    """Add a product to the catalog."""
    try:
        product = store.add_product(code, name, cost, price, stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at "
        f"{product.sale_price.format(store.currency)} ({product.stock} in stock)"
    )
