"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.authorization import require_seller
from catalog.application.dto import ProductDTO
from catalog.application.mapping import product_to_dto
from catalog.application.pictures import PictureStaging
from catalog.application.submission import parse_submission
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.seller import Seller
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.file_storage import FileStorage
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        storage: FileStorage,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._storage = storage

    def handle(
        self, product_id: str, raw: Mapping[str, Any], actor: Seller | None
    ) -> ProductDTO:
        """Overwrite a product with the submitted form.

        Every editable field is replaced, features included. New
        pictures are appended; pictures listed under
        ``pictures.deleting`` are dropped and their files removed once
        the product has been saved.
        """
        seller = require_seller(actor, "update products")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        submission = parse_submission(raw)
        if self._category_repo.get_by_id(submission.category_id) is None:
            raise EntityNotFoundError(
                f"Category with ID '{submission.category_id}' not found"
            )

        with PictureStaging(self._storage) as staging:
            # Checked before anything is written.
            product.remove_pictures(submission.pictures_to_delete)
            paths = staging.store(submission.pictures_to_store)
            product.revise(
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

        for path in submission.pictures_to_delete:
            self._storage.delete(path)

        logger.info(
            "Seller %s updated product %s (+%d/-%d picture(s))",
            seller.id, product.id, len(paths), len(submission.pictures_to_delete),
        )
        return product_to_dto(product)
