"""Application services: Add Category / List Categories use cases."""

from __future__ import annotations

from catalog.application.authorization import require_seller
from catalog.application.dto import CategoryDTO
from catalog.application.mapping import category_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.model.seller import Seller
from catalog.domain.repository.category_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, actor: Seller | None) -> CategoryDTO:
        require_seller(actor, "add categories")

        if not name or not name.strip():
            raise ValidationError("Category name is required")

        for existing in self._category_repo.list_all():
            if existing.name.lower() == name.strip().lower():
                raise ValidationError(f"Category '{name.strip()}' already exists")

        category = Category(id=self._category_repo.next_id(), name=name.strip())
        self._category_repo.save(category)
        return category_to_dto(category)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        return [category_to_dto(c) for c in self._category_repo.list_all()]
