"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.manage_categories import AddCategoryHandler, ListCategoriesHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository, session_provider
from catalog.infrastructure.cli.errors import to_click_exception


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a product category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name, session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
def category_list() -> None:
    """List product categories."""
    categories = ListCategoriesHandler(category_repo=category_repository()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    for category in categories:
        click.echo(f"{category.id:<6} {category.name}")
