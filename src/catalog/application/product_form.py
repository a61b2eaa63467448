"""Application services: Show Create Form / Show Edit Form use cases (queries)."""

from __future__ import annotations

from catalog.application.authorization import require_seller
from catalog.application.dto import ProductFormDTO
from catalog.application.mapping import category_to_dto, form_values
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import REQUIRED_FEATURES, Condition
from catalog.domain.model.seller import Seller
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class ShowCreateFormHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, actor: Seller | None) -> ProductFormDTO:
        require_seller(actor, "create products")
        return ProductFormDTO(
            categories=[category_to_dto(c) for c in self._category_repo.list_all()],
            conditions=[c.value for c in Condition],
            required_features=list(REQUIRED_FEATURES),
        )


class ShowEditFormHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, product_id: str, actor: Seller | None) -> ProductFormDTO:
        require_seller(actor, "edit products")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        return ProductFormDTO(
            categories=[category_to_dto(c) for c in self._category_repo.list_all()],
            conditions=[c.value for c in Condition],
            required_features=list(REQUIRED_FEATURES),
            product_id=product.id,
            values=form_values(product),
            pictures=product.picture_paths,
        )
