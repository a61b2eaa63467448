"""Application services: seller accounts and sessions."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.seller import Seller
from catalog.domain.repository.seller_repository import SellerRepository
from catalog.domain.repository.session_provider import SessionProvider

logger = logging.getLogger(__name__)


class RegisterSellerHandler:

    def __init__(self, seller_repo: SellerRepository) -> None:
        self._seller_repo = seller_repo

    def handle(self, name: str, email: str) -> Seller:
        if not name or not name.strip():
            raise ValidationError("Seller name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")

        email = email.strip().lower()
        if self._seller_repo.get_by_email(email) is not None:
            raise ValidationError(f"Seller '{email}' already exists")

        seller = Seller(id=self._seller_repo.next_id(), name=name.strip(), email=email)
        self._seller_repo.save(seller)
        return seller


class LoginHandler:

    def __init__(self, seller_repo: SellerRepository, session: SessionProvider) -> None:
        self._seller_repo = seller_repo
        self._session = session

    def handle(self, email: str) -> Seller:
        seller = self._seller_repo.get_by_email(email.strip())
        if seller is None:
            raise EntityNotFoundError(f"No seller registered as '{email}'")
        self._session.login(seller)
        logger.info("Seller %s logged in", seller.id)
        return seller
