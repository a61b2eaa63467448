import logging

import click

from catalog.infrastructure import config
from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_edit,
    product_form,
    product_list,
    product_update,
)
from catalog.infrastructure.cli.seller_commands import login, logout, seller_register
from catalog.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Catalog — seller product management"""
    setup_logging(logging.DEBUG if verbose else config.LOG_LEVEL, config.LOG_DIR)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def seller() -> None:
    """Manage seller accounts."""


# Register subcommands
cli.add_command(login)
cli.add_command(logout)
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_form)
product.add_command(product_list)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_list)
seller.add_command(seller_register)
