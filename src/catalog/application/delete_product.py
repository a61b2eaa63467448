"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.application.authorization import require_seller
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.seller import Seller
from catalog.domain.repository.file_storage import FileStorage
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, storage: FileStorage) -> None:
        self._product_repo = product_repo
        self._storage = storage

    def handle(self, product_id: str, actor: Seller | None) -> None:
        """Remove a product and the picture files it owns.

        The record goes first: a failure while deleting files leaves
        stray files, never a product pointing at missing pictures.
        """
        seller = require_seller(actor, "delete products")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._product_repo.delete(product.id)
        for path in product.picture_paths:
            self._storage.delete(path)

        logger.info("Seller %s deleted product %s", seller.id, product.id)
