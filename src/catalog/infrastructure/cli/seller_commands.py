"""CLI commands for seller accounts and sessions."""

from __future__ import annotations

import click

from catalog.application.sellers import LoginHandler, RegisterSellerHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import seller_repository, session_provider
from catalog.infrastructure.cli.errors import to_click_exception


@click.command("register")
@click.option("--name", required=True, help="Seller display name.")
@click.option("--email", required=True, help="Login email.")
def seller_register(name: str, email: str) -> None:
    """Register a seller account."""
    handler = RegisterSellerHandler(seller_repo=seller_repository())

    try:
        seller = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Seller #{seller.id} '{seller.email}' registered")


@click.command("login")
@click.argument("email")
def login(email: str) -> None:
    """Log in as a registered seller."""
    handler = LoginHandler(seller_repo=seller_repository(), session=session_provider())

    try:
        seller = handler.handle(email)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Logged in as {seller.name} <{seller.email}>")


@click.command("logout")
def logout() -> None:
    """End the current session."""
    session_provider().logout()
    click.echo("Logged out")
