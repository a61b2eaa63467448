"""Mapping from domain errors to CLI errors."""

from __future__ import annotations

import click

from catalog.domain.exceptions import AuthorizationError, DomainException, ValidationError

LOGIN_HINT = "Please log in first: catalog login <email>"


def to_click_exception(exc: DomainException) -> click.ClickException:
    if isinstance(exc, AuthorizationError):
        return click.ClickException(LOGIN_HINT)
    if isinstance(exc, ValidationError) and exc.errors:
        lines = [str(exc)]
        lines += [f"  {field}: {message}" for field, message in sorted(exc.errors.items())]
        return click.ClickException("\n".join(lines))
    return click.ClickException(str(exc))
