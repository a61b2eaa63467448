"""Domain → DTO mapping shared by the product use cases."""

from __future__ import annotations

from catalog.application.dto import CategoryDTO, ProductDTO
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        category_id=product.category_id,
        name=product.name,
        description=product.description,
        brand=product.brand,
        cost=product.cost.amount,
        price=product.price.amount,
        stock=product.stock,
        low_stock=product.low_stock,
        condition=product.condition.value,
        status=product.status,
        features=dict(product.features),
        pictures=product.picture_paths,
    )


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(id=category.id, name=category.name)


def form_values(product: Product) -> dict:
    """The product's current values, shaped like a submitted form.

    Money goes back out as decimal strings so an unchanged form
    re-submits the same amounts.
    """
    return {
        "category": product.category_id,
        "name": product.name,
        "description": product.description,
        "brand": product.brand,
        "cost": product.cost.to_input(),
        "price": product.price.to_input(),
        "stock": product.stock,
        "low_stock": product.low_stock,
        "condition": product.condition.value,
        "status": product.status,
        "features": dict(product.features),
    }
