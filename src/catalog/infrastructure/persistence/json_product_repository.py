"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from catalog.domain.model.product import Condition, Picture, Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        records = sorted(self._load_raw(), key=lambda raw: int(raw["id"]))
        return [self._to_domain(raw) for raw in records]

    def next_id(self) -> str:
        records = self._load_raw()
        if not records:
            return "1"
        return str(max(int(raw["id"]) for raw in records) + 1)

    def save(self, product: Product) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._persist_raw(records)

    def delete(self, product_id: str) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != product_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "category_id": product.category_id,
            "name": product.name,
            "description": product.description,
            "brand": product.brand,
            "cost": product.cost.amount,
            "price": product.price.amount,
            "currency": product.price.currency,
            "stock": product.stock,
            "low_stock": product.low_stock,
            "condition": product.condition.value,
            "status": product.status,
            "features": product.features,
            "pictures": [{"path": p.path} for p in product.pictures],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        return Product(
            id=raw["id"],
            category_id=raw["category_id"],
            name=raw["name"],
            description=raw["description"],
            brand=raw["brand"],
            cost=Money(raw["cost"], currency),
            price=Money(raw["price"], currency),
            stock=raw["stock"],
            low_stock=raw["low_stock"],
            condition=Condition(raw["condition"]),
            status=raw["status"],
            features=dict(raw.get("features", {})),
            pictures=[Picture(path=p["path"]) for p in raw.get("pictures", [])],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        # readers only ever see the old file or the complete new one
        fd, tmp_name = tempfile.mkstemp(dir=self._file_path.parent, suffix=".part")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
