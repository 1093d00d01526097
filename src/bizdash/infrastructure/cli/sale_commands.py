"""CLI commands for sales."""

from __future__ import annotations

import click

from bizdash.application.dto import format_amount
from bizdash.application.store import BusinessStore
from bizdash.domain.exceptions import DomainException


@click.command("list")
@click.option("--search", default="", help="Match against product name.")
@click.option("--date", "on", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Only show sales from this day (YYYY-MM-DD).")
@click.pass_obj
def sale_list(store: BusinessStore, search: str, on) -> None:
    """List sales, most recent first."""
    listing = store.search_sales(query=search, on=on.date() if on else None)

    if not listing.sales:
        click.echo("No sales found.")
        return

    click.echo(
        f"{'ID':<6} {'Date':<11} {'Product':<22} {'Qty':>5} {'Price':>10} {'Disc.':>9} {'Total':>11}"
    )
    click.echo("-" * 80)
    for s in listing.sales:
        click.echo(
            f"{s.id:<6} {s.date:<11} {s.product_name:<22} {s.quantity:>5} "
            f"{s.unit_price:>10} {s.discount:>9} {s.total:>11}"
        )
    click.echo("-" * 80)
    click.echo(f"{listing.items_sold} items sold, {listing.total_amount} in sales")


@click.command("record")
@click.option("--product-id", required=True, help="ID of the product sold.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@click.option("--discount", default="0", show_default=True, help="Discount amount (not %).")
@click.pass_obj
def sale_record(store: BusinessStore, product_id: str, quantity: int, discount: str) -> None:
    """Sell a product today at its current price."""
    try:
        recorded = store.sell(product_id, quantity, discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    product = store.get_product(product_id)
    click.echo(
        f"Sale #{recorded.id}: {recorded.quantity} x {recorded.product_name} "
        f"= {format_amount(recorded.total, store.currency)}"
    )
    if product is not None:
        click.echo(f"Remaining stock: {product.stock}")
