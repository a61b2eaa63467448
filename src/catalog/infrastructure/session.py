"""File-backed session: remembers which seller is logged in."""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.seller import Seller
from catalog.domain.repository.seller_repository import SellerRepository
from catalog.domain.repository.session_provider import SessionProvider


class FileSessionProvider(SessionProvider):

    def __init__(self, file_path: Path, seller_repo: SellerRepository) -> None:
        self._file_path = file_path
        self._seller_repo = seller_repo

    def current_actor(self) -> Seller | None:
        if not self._file_path.exists():
            return None
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        seller_id = raw.get("seller_id")
        if seller_id is None:
            return None
        # A seller removed after logging in is treated as logged out.
        return self._seller_repo.get_by_id(seller_id)

    def login(self, seller: Seller) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps({"seller_id": seller.id}) + "\n", encoding="utf-8"
        )

    def logout(self) -> None:
        self._file_path.unlink(missing_ok=True)
