"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import PictureUpload
from catalog.application.list_products import ListSellerProductsHandler
from catalog.application.product_form import ShowCreateFormHandler, ShowEditFormHandler
from catalog.application.store_product import StoreProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Condition
from catalog.infrastructure.bootstrap import (
    category_repository,
    file_storage,
    product_repository,
    session_provider,
)
from catalog.infrastructure.cli.errors import to_click_exception


def _parse_features(pairs: tuple[str, ...]) -> dict[str, str]:
    features: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--feature")
        features[key.strip()] = value
    return features


def _read_pictures(paths: tuple[Path, ...]) -> list[PictureUpload]:
    return [PictureUpload(filename=path.name, content=path.read_bytes()) for path in paths]


def _product_form_options(func):
    """Options shared by ``create`` and ``update``: the full product form."""
    options = [
        click.option("--category", required=True, help="Category ID."),
        click.option("--name", required=True, help="Product name."),
        click.option("--description", required=True, help="Product description."),
        click.option("--brand", required=True, help="Brand name."),
        click.option("--cost", required=True, help="Cost (e.g. 6.49)."),
        click.option("--price", required=True, help="Price (e.g. 7.49)."),
        click.option("--stock", required=True, type=int, help="Units in stock."),
        click.option("--low-stock", required=True, type=int, help="Low stock threshold."),
        click.option(
            "--condition",
            required=True,
            type=click.Choice([c.value for c in Condition]),
            help="Product condition.",
        ),
        click.option("--published/--unpublished", "status", default=True, help="Publish the product."),
        click.option(
            "--feature",
            "features",
            multiple=True,
            metavar="KEY=VALUE",
            help="Product feature, e.g. --feature weight=1kg (repeatable).",
        ),
        click.option(
            "--picture",
            "pictures",
            multiple=True,
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Image file to upload (repeatable).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _form_data(options: dict) -> dict:
    return {
        "category": options["category"],
        "name": options["name"],
        "description": options["description"],
        "brand": options["brand"],
        "cost": options["cost"],
        "price": options["price"],
        "stock": options["stock"],
        "low_stock": options["low_stock"],
        "condition": options["condition"],
        "status": options["status"],
        "features": _parse_features(options["features"]),
        "pictures": {"storing": _read_pictures(options["pictures"])},
    }


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListSellerProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        rows = handler.handle(session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<16} {'Price':>10} {'Stock':>6}  Status")
    click.echo("-" * 76)
    for row in rows:
        flags = "published" if row.published else "draft"
        if row.low_stock:
            flags += ", low stock"
        click.echo(
            f"{row.id:<6} {row.name:<24} {row.category_name:<16} {row.price:>10} {row.stock:>6}  {flags}"
        )


@click.command("form")
def product_form() -> None:
    """Show what the product creation form needs."""
    handler = ShowCreateFormHandler(category_repo=category_repository())

    try:
        form = handler.handle(session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo("Categories:")
    for category in form.categories:
        click.echo(f"  {category.id:<6} {category.name}")
    if not form.categories:
        click.echo("  (none yet, add one with: catalog category add)")
    click.echo(f"Conditions: {', '.join(form.conditions)}")
    click.echo(f"Required features: {', '.join(form.required_features)}")


@click.command("create")
@_product_form_options
def product_create(**options) -> None:
    """Publish a new product."""
    handler = StoreProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
        storage=file_storage(),
    )

    try:
        product = handler.handle(_form_data(options), session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{product.id} '{product.name}' created with {len(product.pictures)} picture(s)")
    click.echo(f"Edit it with: catalog product edit {product.id}")


@click.command("edit")
@click.argument("product_id")
def product_edit(product_id: str) -> None:
    """Show a product's current values, ready for editing."""
    handler = ShowEditFormHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        form = handler.handle(product_id, session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    values = form.values
    for key in ("category", "name", "description", "brand", "cost", "price",
                "stock", "low_stock", "condition", "status"):
        click.echo(f"{key:<12} {values[key]}")
    for key, value in values["features"].items():
        click.echo(f"{'feature':<12} {key}={value}")
    for path in form.pictures:
        click.echo(f"{'picture':<12} {path}")


@click.command("update")
@click.argument("product_id")
@_product_form_options
@click.option(
    "--delete-picture",
    "delete_pictures",
    multiple=True,
    help="Path of an existing picture to remove (repeatable).",
)
def product_update(product_id: str, delete_pictures: tuple[str, ...], **options) -> None:
    """Overwrite a product with new values."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
        storage=file_storage(),
    )

    data = _form_data(options)
    data["pictures"]["deleting"] = list(delete_pictures)
    try:
        product = handler.handle(product_id, data, session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{product.id} updated ({len(product.pictures)} picture(s))")


@click.command("delete")
@click.argument("product_id")
@click.confirmation_option(prompt="Delete this product and its pictures?")
def product_delete(product_id: str) -> None:
    """Delete a product and its pictures."""
    handler = DeleteProductHandler(product_repo=product_repository(), storage=file_storage())

    try:
        handler.handle(product_id, session_provider().current_actor())
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{product_id} deleted")
