"""JSON-file-backed implementation of SellerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.seller import Seller
from catalog.domain.repository.seller_repository import SellerRepository


class JsonSellerRepository(SellerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, seller_id: str) -> Seller | None:
        return self._load().get(seller_id)

    def get_by_email(self, email: str) -> Seller | None:
        for seller in self._load().values():
            if seller.email.lower() == email.lower():
                return seller
        return None

    def list_all(self) -> list[Seller]:
        return list(self._load().values())

    def next_id(self) -> str:
        sellers = self._load()
        if not sellers:
            return "1"
        return str(max(int(s_id) for s_id in sellers) + 1)

    def save(self, seller: Seller) -> None:
        sellers = self._load()
        sellers[seller.id] = seller
        self._persist(sellers)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Seller]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Seller(id=item["id"], name=item["name"], email=item["email"])
            for item in raw
        }

    def _persist(self, sellers: dict[str, Seller]) -> None:
        raw = [{"id": s.id, "name": s.name, "email": s.email} for s in sellers.values()]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
