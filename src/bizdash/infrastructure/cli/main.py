import logging

import click

from bizdash.domain.model.session import Theme
from bizdash.infrastructure.bootstrap import StoreConfig, build_store
from bizdash.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_low_stock,
)
from bizdash.infrastructure.cli.report_commands import (
    report_chart,
    report_products,
    report_summary,
)
from bizdash.infrastructure.cli.sale_commands import sale_list, sale_record
from bizdash.infrastructure.clock import FixedClock


@click.group()
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    envvar="BIZDASH_TODAY",
    default=None,
    help="Reference day for reports and new sales (YYYY-MM-DD).",
)
@click.option("--currency", envvar="BIZDASH_CURRENCY", default="$", show_default=True,
              help="Currency symbol used when printing amounts.")
@click.option("--strict/--lenient", envvar="BIZDASH_STRICT", default=False,
              help="Fail on unknown ids instead of ignoring them.")
@click.option("--enforce-stock/--allow-oversell", envvar="BIZDASH_ENFORCE_STOCK", default=False,
              help="Refuse sales larger than the available stock.")
@click.option(
    "--log-level",
    envvar="BIZDASH_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, today, currency: str, strict: bool, enforce_stock: bool,
        log_level: str) -> None:
    """bizdash: products, sales and reports for a small retailer."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = StoreConfig(
        strict_lookups=strict,
        enforce_stock=enforce_stock,
        currency=currency,
        theme=Theme.DARK,
    )
    clock = FixedClock(today.date()) if today is not None else None
    ctx.obj = build_store(config, clock=clock)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def sale() -> None:
    """Record and browse sales."""


@cli.group()
def report() -> None:
    """Revenue and profit reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_low_stock)
sale.add_command(sale_list)
sale.add_command(sale_record)
report.add_command(report_chart)
report.add_command(report_products)
report.add_command(report_summary)
