"""Abstract session provider: answers "who is logged in?"."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.seller import Seller


class SessionProvider(ABC):

    @abstractmethod
    def current_actor(self) -> Seller | None:
        """Return the logged-in seller, or None for anonymous callers."""

    @abstractmethod
    def login(self, seller: Seller) -> None:
        """Start a session for *seller*."""

    @abstractmethod
    def logout(self) -> None:
        """End the current session, if any."""
