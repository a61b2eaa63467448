"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure import config
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_seller_repository import (
    JsonSellerRepository,
)
from catalog.infrastructure.session import FileSessionProvider
from catalog.infrastructure.storage.local_file_storage import LocalFileStorage


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(config.DATA_DIR / "products.json")


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(config.DATA_DIR / "categories.json")


def seller_repository() -> JsonSellerRepository:
    return JsonSellerRepository(config.DATA_DIR / "sellers.json")


def file_storage() -> LocalFileStorage:
    return LocalFileStorage(config.STORAGE_DIR)


def session_provider() -> FileSessionProvider:
    return FileSessionProvider(config.DATA_DIR / "session.json", seller_repository())
