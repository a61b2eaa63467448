"""Application service: List Seller Products use case (query)."""

from __future__ import annotations

from catalog.application.authorization import require_seller
from catalog.application.dto import ProductListingDTO
from catalog.domain.model.seller import Seller
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class ListSellerProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, actor: Seller | None) -> list[ProductListingDTO]:
        require_seller(actor, "see the product listing")

        category_names = {c.id: c.name for c in self._category_repo.list_all()}
        return [
            ProductListingDTO(
                id=product.id,
                name=product.name,
                category_name=category_names.get(product.category_id, "(unknown)"),
                price=str(product.price),
                stock=product.stock,
                low_stock=product.is_low_stock,
                published=product.status,
            )
            for product in self._product_repo.list_all()
        ]
