"""CLI commands for reports."""

from __future__ import annotations

import click

from bizdash.application.show_report import PERIODS
from bizdash.application.store import BusinessStore
from bizdash.domain.exceptions import DomainException


@click.command("summary")
@click.pass_obj
def report_summary(store: BusinessStore) -> None:
    """Headline dashboard figures."""
    s = store.summary()
    click.echo(f"{'Today':<18} {s.today_revenue:>14}")
    click.echo(f"{'Last 7 days':<18} {s.week_revenue:>14}")
    click.echo(f"{'This month':<18} {s.month_revenue:>14}")
    click.echo(f"{'Total revenue':<18} {s.total_revenue:>14}")
    click.echo(f"{'Total profit':<18} {s.total_profit:>14}")
    click.echo(f"{'Profit margin':<18} {s.profit_margin:>14}")
    click.echo(f"{'Sales':<18} {s.sales_count:>14}")
    click.echo(f"Best product: {s.best_product} ({s.best_product_quantity} units)")


@click.command("chart")
@click.option("--period", type=click.Choice(list(PERIODS)), default="month", show_default=True)
@click.option("--count", type=int, default=None, help="Number of periods to show.")
@click.pass_obj
def report_chart(store: BusinessStore, period: str, count: int | None) -> None:
    """Revenue and profit per period, oldest first."""
    try:
        buckets = store.chart(period, count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Period':<12} {'Revenue':>14} {'Profit':>14}")
    click.echo("-" * 42)
    for b in buckets:
        click.echo(f"{b.label:<12} {b.revenue:>14} {b.profit:>14}")


@click.command("products")
@click.option("--top", type=int, default=None, help="Only the N best-selling products.")
@click.pass_obj
def report_products(store: BusinessStore, top: int | None) -> None:
    """Revenue per product."""
    rows = store.product_revenue(top)
    if not rows:
        click.echo("No products found.")
        return

    for rank, row in enumerate(rows, start=1):
        prefix = f"{rank}. " if top is not None else ""
        click.echo(f"{prefix}{row.name:<25} {row.value:>14}")
