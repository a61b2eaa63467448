"""Abstract repository for categories."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def next_id(self) -> str:
        """Return the ID the next new category should receive."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Persist a new or updated category."""
