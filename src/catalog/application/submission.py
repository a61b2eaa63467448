"""Boundary validation for product forms.

Turns the raw field-set a seller submits into a ``ProductSubmission``.
Every field is checked before anything is raised, so the seller sees
all problems at once.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from io import BytesIO
from typing import Any

from PIL import Image, UnidentifiedImageError

from catalog.application.dto import ImageFile, PictureUpload, ProductSubmission
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import REQUIRED_FEATURES, Condition
from catalog.domain.model.value_objects import Money

# Maximum picture size in bytes (5MB)
MAX_PICTURE_SIZE = 5 * 1024 * 1024

# Pillow format name -> stored file extension
ALLOWED_PICTURE_FORMATS = {
    "JPEG": "jpg",
    "PNG": "png",
    "GIF": "gif",
    "WEBP": "webp",
}

_TRUE_VALUES = {True, 1, "1", "true"}
_FALSE_VALUES = {False, 0, "0", "false"}


def parse_submission(raw: Mapping[str, Any]) -> ProductSubmission:
    """Validate and normalize a product form.

    Raises ValidationError with ``errors`` keyed by field name
    (nested fields use dots, e.g. ``features.color``).
    """
    errors: dict[str, str] = {}

    def take(name: str, parser):
        try:
            return parser(raw.get(name))
        except ValidationError as exc:
            if exc.errors:
                errors.update({f"{name}.{key}": msg for key, msg in exc.errors.items()})
            else:
                errors[name] = str(exc)
            return None

    category_id = take("category", _parse_identifier)
    name = take("name", _parse_text)
    description = take("description", _parse_text)
    brand = take("brand", _parse_text)
    cost = take("cost", _parse_money)
    price = take("price", _parse_money)
    stock = take("stock", _parse_count)
    low_stock = take("low_stock", _parse_count)
    condition = take("condition", _parse_condition)
    status = take("status", _parse_status)
    features = take("features", _parse_features)
    pictures = take("pictures", _parse_pictures)

    if errors:
        fields = ", ".join(sorted(errors))
        raise ValidationError(f"Invalid product data: {fields}", errors=errors)

    to_store, to_delete = pictures
    return ProductSubmission(
        category_id=category_id,
        name=name,
        description=description,
        brand=brand,
        cost=cost,
        price=price,
        stock=stock,
        low_stock=low_stock,
        condition=condition,
        status=status,
        features=features,
        pictures_to_store=to_store,
        pictures_to_delete=to_delete,
    )


def inspect_picture(upload: PictureUpload) -> ImageFile:
    """Check that *upload* is an image we accept and work out its extension."""
    if not upload.content:
        raise ValidationError(f"{upload.filename} is empty")
    if len(upload.content) > MAX_PICTURE_SIZE:
        raise ValidationError(
            f"{upload.filename} is larger than {MAX_PICTURE_SIZE // (1024 * 1024)}MB"
        )
    try:
        with Image.open(BytesIO(upload.content)) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
        raise ValidationError(f"{upload.filename} is not a valid image") from exc

    extension = ALLOWED_PICTURE_FORMATS.get(image_format or "")
    if extension is None:
        raise ValidationError(f"{upload.filename}: unsupported image format {image_format}")
    return ImageFile(content=upload.content, extension=extension)


# --- Field parsers ---------------------------------------------------------------


def _parse_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("This field is required")
    return value.strip()


def _parse_identifier(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        raise ValidationError("This field is required")
    if isinstance(value, int):
        return str(value)
    return _parse_text(value)


def _parse_money(value: Any) -> Money:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("This field is required")
    if isinstance(value, float):
        # 6.49 must mean "6.49", not its binary approximation.
        value = Decimal(str(value))
    return Money.of(value)


def _parse_count(value: Any) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("This field is required")
    if isinstance(value, bool):
        raise ValidationError("Must be a whole number")
    if isinstance(value, str):
        if not (value.strip().isascii() and value.strip().isdigit()):
            raise ValidationError("Must be a whole number")
        value = int(value.strip())
    if not isinstance(value, int):
        raise ValidationError("Must be a whole number")
    if value < 0:
        raise ValidationError("Cannot be negative")
    return value


def _parse_condition(value: Any) -> Condition:
    if value is None:
        raise ValidationError("This field is required")
    if isinstance(value, Condition):
        return value
    try:
        return Condition(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(c.value for c in Condition)
        raise ValidationError(f"Must be one of: {allowed}") from exc


def _parse_status(value: Any) -> bool:
    if value is None:
        raise ValidationError("This field is required")
    if not isinstance(value, (bool, int, str)):
        raise ValidationError("Must be true or false")
    probe = value.strip().lower() if isinstance(value, str) else value
    if probe in _TRUE_VALUES:
        return True
    if probe in _FALSE_VALUES:
        return False
    raise ValidationError("Must be true or false")


def _parse_features(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ValidationError("This field is required")

    errors: dict[str, str] = {}
    features: dict[str, str] = {}
    for key in REQUIRED_FEATURES:
        if key not in value:
            errors[key] = "This feature is required"
    for key, feature in value.items():
        if not isinstance(feature, str) or not feature.strip():
            errors[str(key)] = "Must be a non-empty text value"
        else:
            features[str(key)] = feature.strip()
    if errors:
        raise ValidationError("Invalid features", errors=errors)
    return features


def _parse_pictures(value: Any) -> tuple[list[ImageFile], list[str]]:
    if value is None:
        return [], []
    if not isinstance(value, Mapping):
        raise ValidationError("Must contain 'storing' and/or 'deleting' lists")

    errors: dict[str, str] = {}
    to_store: list[ImageFile] = []
    for index, upload in enumerate(value.get("storing") or []):
        if not isinstance(upload, PictureUpload):
            errors[f"storing.{index}"] = "Must be an uploaded file"
            continue
        try:
            to_store.append(inspect_picture(upload))
        except ValidationError as exc:
            errors[f"storing.{index}"] = str(exc)

    to_delete: list[str] = []
    for index, path in enumerate(value.get("deleting") or []):
        if not isinstance(path, str) or not path.strip():
            errors[f"deleting.{index}"] = "Must be a picture path"
        else:
            to_delete.append(path.strip())

    if errors:
        raise ValidationError("Invalid pictures", errors=errors)
    return to_store, to_delete
