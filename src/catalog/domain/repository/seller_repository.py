"""Abstract repository for seller accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.seller import Seller


class SellerRepository(ABC):

    @abstractmethod
    def get_by_id(self, seller_id: str) -> Seller | None:
        """Return a seller by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Seller | None:
        """Return a seller by email (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Seller]:
        """Return every registered seller."""

    @abstractmethod
    def next_id(self) -> str:
        """Return the ID the next new seller should receive."""

    @abstractmethod
    def save(self, seller: Seller) -> None:
        """Persist a new or updated seller."""
