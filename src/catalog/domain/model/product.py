"""Product aggregate.

A product owns its features and its pictures: nothing outside the
aggregate holds a reference to a Picture, and deleting the product
deletes the pictures with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

REQUIRED_FEATURES = ("weight", "dimensions", "color")


class Condition(Enum):
    NEW = "new"
    USED = "used"


@dataclass(frozen=True)
class Picture:
    """A stored image, addressed by its storage-relative path."""

    path: str


@dataclass
class Product:
    """A product in a seller's catalog.

    This is an aggregate root: every change to a product, its features
    or its pictures goes through it. ``revise()`` is a full replace of
    the editable fields; pictures are only ever appended or explicitly
    removed.
    """

    id: str
    category_id: str
    name: str
    description: str
    brand: str
    cost: Money
    price: Money
    stock: int
    low_stock: int
    condition: Condition
    status: bool
    features: dict[str, str] = field(default_factory=dict)
    pictures: list[Picture] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError("Stock cannot be negative")
        if self.low_stock < 0:
            raise ValidationError("Low stock threshold cannot be negative")

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.low_stock

    @property
    def picture_paths(self) -> list[str]:
        return [picture.path for picture in self.pictures]

    def revise(
        self,
        *,
        category_id: str,
        name: str,
        description: str,
        brand: str,
        cost: Money,
        price: Money,
        stock: int,
        low_stock: int,
        condition: Condition,
        status: bool,
        features: dict[str, str],
    ) -> None:
        """Overwrite every editable field with the submitted values."""
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        if low_stock < 0:
            raise ValidationError("Low stock threshold cannot be negative")
        self.category_id = category_id
        self.name = name
        self.description = description
        self.brand = brand
        self.cost = cost
        self.price = price
        self.stock = stock
        self.low_stock = low_stock
        self.condition = condition
        self.status = status
        self.features = dict(features)

    def add_pictures(self, paths: list[str]) -> None:
        self.pictures.extend(Picture(path=path) for path in paths)

    def remove_pictures(self, paths: list[str]) -> None:
        """Drop the named pictures.

        Every path must belong to this product; nothing is removed
        otherwise.
        """
        owned = set(self.picture_paths)
        foreign = [path for path in paths if path not in owned]
        if foreign:
            raise ValidationError(
                f"Pictures do not belong to product {self.id}: {', '.join(foreign)}"
            )
        doomed = set(paths)
        self.pictures = [p for p in self.pictures if p.path not in doomed]
