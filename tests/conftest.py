"""Shared fixtures: a category, a seller and a valid product form."""

import pytest

from catalog.domain.model.category import Category
from catalog.domain.model.seller import Seller


@pytest.fixture
def category():
    return Category(id="1", name="Category Name")


@pytest.fixture
def seller():
    return Seller(id="1", name="Sally Seller", email="sally@example.com")


@pytest.fixture
def valid_data(category):
    """The product form a seller submits when creating a product."""
    return {
        "category": category.id,
        "name": "New name",
        "description": "New description",
        "cost": "6.49",
        "price": "7.49",
        "stock": 5,
        "low_stock": 1,
        "brand": "New brand",
        "condition": "new",
        "status": True,
        "features": {
            "weight": "New weight",
            "dimensions": "New dimensions",
            "color": "New color",
        },
    }
