"""Application service: Store Product use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.authorization import require_seller
from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.application.pictures import PictureStaging
from catalog.application.submission import parse_submission
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.seller import Seller
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.file_storage import FileStorage
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StoreProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        storage: FileStorage,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._storage = storage

    def handle(self, raw: Mapping[str, Any], actor: Seller | None) -> ProductDTO:
        """Publish a new product.

        Steps:
        1. Reject anonymous callers before looking at the input.
        2. Validate and normalize the form (money becomes minor units).
        3. Check the category exists.
        4. Store the pictures, then save the product. If saving fails
           the stored pictures are removed again.
        """
        seller = require_seller(actor, "publish products")
        submission = parse_submission(raw)
        if submission.pictures_to_delete:
            raise ValidationError(
                "A new product has no pictures to delete",
                errors={"pictures.deleting": "Not allowed when creating a product"},
            )

        if self._category_repo.get_by_id(submission.category_id) is None:
            raise EntityNotFoundError(
                f"Category with ID '{submission.category_id}' not found"
            )

        with PictureStaging(self._storage) as staging:
            paths = staging.store(submission.pictures_to_store)
            product = Product(
                id=self._product_repo.next_id(),
                category_id=submission.category_id,
                name=submission.name,
                description=submission.description,
                brand=submission.brand,
                cost=submission.cost,
                price=submission.price,
                stock=submission.stock,
                low_stock=submission.low_stock,
                condition=submission.condition,
                status=submission.status,
                features=submission.features,
            )
            product.add_pictures(paths)
            self._product_repo.save(product)

        logger.info(
            "Seller %s stored product %s with %d picture(s)",
            seller.id, product.id, len(paths),
        )
        return product_to_dto(product)
