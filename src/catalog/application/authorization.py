"""Seller gate shared by every product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import AuthorizationError
from catalog.domain.model.seller import Seller

logger = logging.getLogger(__name__)


def require_seller(actor: Seller | None, action: str) -> Seller:
    """Return *actor*, or raise AuthorizationError if nobody is logged in.

    Must run before any lookup or validation so anonymous callers learn
    nothing about the catalog.
    """
    if actor is None:
        logger.warning("Rejected anonymous attempt to %s", action)
        raise AuthorizationError(f"You must be logged in to {action}")
    return actor
