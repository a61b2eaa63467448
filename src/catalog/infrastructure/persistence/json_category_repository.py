"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, category_id: str) -> Category | None:
        return self._load().get(category_id)

    def list_all(self) -> list[Category]:
        return sorted(self._load().values(), key=lambda c: int(c.id))

    def next_id(self) -> str:
        categories = self._load()
        if not categories:
            return "1"
        return str(max(int(c_id) for c_id in categories) + 1)

    def save(self, category: Category) -> None:
        categories = self._load()
        categories[category.id] = category
        self._persist(categories)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Category]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: Category(id=item["id"], name=item["name"]) for item in raw}

    def _persist(self, categories: dict[str, Category]) -> None:
        raw = [{"id": c.id, "name": c.name} for c in categories.values()]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
