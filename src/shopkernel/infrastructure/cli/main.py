import os

import click

from shopkernel.infrastructure.bootstrap import DATA_DIR_ENV
from shopkernel.infrastructure.cli.basket_commands import (
    basket_add,
    basket_checkout,
    basket_delete,
    basket_set,
    basket_show,
    basket_transfer,
)
from shopkernel.infrastructure.cli.catalog_commands import (
    catalog_add,
    catalog_list,
    catalog_update_price,
)
from shopkernel.infrastructure.cli.order_commands import order_list, order_show
from shopkernel.infrastructure.logging import LOG_LEVEL_ENV, configure_logging


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for diagnostics written to stderr.",
)
def cli(data_dir: str | None, log_level: str) -> None:
    """shopkernel — baskets, checkout and orders"""
    if data_dir:
        os.environ[DATA_DIR_ENV] = data_dir
    configure_logging(log_level)


@cli.group()
def catalog() -> None:
    """Manage the catalog."""


@cli.group()
def basket() -> None:
    """Manage baskets."""


@cli.group()
def order() -> None:
    """Browse placed orders."""


# Register subcommands
catalog.add_command(catalog_add)
catalog.add_command(catalog_list)
catalog.add_command(catalog_update_price)
basket.add_command(basket_add)
basket.add_command(basket_checkout)
basket.add_command(basket_delete)
basket.add_command(basket_set)
basket.add_command(basket_show)
basket.add_command(basket_transfer)
order.add_command(order_list)
order.add_command(order_show)
