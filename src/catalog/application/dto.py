"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.model.product import Condition
from catalog.domain.model.value_objects import Money


# --- Input ---------------------------------------------------------------------


@dataclass(frozen=True)
class PictureUpload:
    """Input: one uploaded file, as received from the client."""

    filename: str
    content: bytes


@dataclass(frozen=True)
class ImageFile:
    """A verified upload, ready to be stored."""

    content: bytes
    extension: str  # derived from the decoded format, e.g. "jpg"


@dataclass(frozen=True)
class ProductSubmission:
    """Input: a validated, normalized product form."""

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
    features: dict[str, str]
    pictures_to_store: list[ImageFile] = field(default_factory=list)
    pictures_to_delete: list[str] = field(default_factory=list)


# --- Output --------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown after it was stored or updated."""

    id: str
    category_id: str
    name: str
    description: str
    brand: str
    cost: int  # minor units
    price: int
    stock: int
    low_stock: int
    condition: str
    status: bool
    features: dict[str, str]
    pictures: list[str]


@dataclass(frozen=True)
class ProductListingDTO:
    """Output: one row of the seller's product listing."""

    id: str
    name: str
    category_name: str
    price: str  # formatted, e.g. "$7.49"
    stock: int
    low_stock: bool
    published: bool


@dataclass(frozen=True)
class ProductFormDTO:
    """Output: everything needed to render the create or edit form.

    ``values`` is empty for the create form; for the edit form it holds
    the product's current values in the same shape the form submits.
    """

    categories: list[CategoryDTO]
    conditions: list[str]
    required_features: list[str]
    product_id: str | None = None
    values: dict = field(default_factory=dict)
    pictures: list[str] = field(default_factory=list)
