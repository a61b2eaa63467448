"""Tests for the JSON-file repositories and the file session."""

import os

import pytest

from catalog.domain.model.category import Category
from catalog.domain.model.product import Condition, Picture, Product
from catalog.domain.model.seller import Seller
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.json_category_repository import JsonCategoryRepository
from catalog.infrastructure.persistence.json_product_repository import JsonProductRepository
from catalog.infrastructure.persistence.json_seller_repository import JsonSellerRepository
from catalog.infrastructure.session import FileSessionProvider


def _product(product_id: str) -> Product:
    return Product(
        id=product_id,
        category_id="1",
        name=f"Product {product_id}",
        description="Desc",
        brand="Acme",
        cost=Money(2249),
        price=Money(7449),
        stock=10,
        low_stock=5,
        condition=Condition.USED,
        status=True,
        features={"weight": "2kg", "dimensions": "2x2", "color": "blue"},
        pictures=[Picture("images/products/a.jpg"), Picture("images/products/b.jpg")],
    )


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "nested" / "products.json")
        assert repo.list_all() == []
        assert repo.next_id() == "1"

    def test_saved_product_reads_back_identically(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))

        reopened = JsonProductRepository(tmp_path / "products.json")
        assert reopened.get_by_id("1") == _product("1")

    def test_money_is_stored_as_integer_cents(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(_product("1"))
        text = path.read_text(encoding="utf-8")
        assert '"cost": 2249' in text
        assert '"price": 7449' in text

    def test_save_replaces_existing_record(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))
        product = repo.get_by_id("1")
        product.name = "Renamed"
        repo.save(product)

        assert [p.name for p in repo.list_all()] == ["Renamed"]

    def test_list_is_ordered_by_numeric_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for product_id in ("10", "2", "1"):
            repo.save(_product(product_id))
        assert [p.id for p in repo.list_all()] == ["1", "2", "10"]
        assert repo.next_id() == "11"

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))
        repo.save(_product("2"))
        repo.delete("1")
        repo.delete("404")
        assert [p.id for p in repo.list_all()] == ["2"]

    def test_failed_write_keeps_previous_file(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.save(_product("1"))
        before = path.read_text(encoding="utf-8")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        with pytest.raises(OSError, match="disk full"):
            repo.save(_product("2"))

        assert path.read_text(encoding="utf-8") == before
        assert list(tmp_path.glob("*.part")) == []


class TestJsonCategoryAndSellerRepositories:

    def test_category_round_trip(self, tmp_path):
        repo = JsonCategoryRepository(tmp_path / "categories.json")
        repo.save(Category(id=repo.next_id(), name="Books"))
        repo.save(Category(id=repo.next_id(), name="Games"))

        assert repo.get_by_id("2") == Category(id="2", name="Games")
        assert [c.name for c in repo.list_all()] == ["Books", "Games"]

    def test_seller_lookup_by_email_ignores_case(self, tmp_path):
        repo = JsonSellerRepository(tmp_path / "sellers.json")
        repo.save(Seller(id="1", name="Sally", email="sally@example.com"))
        assert repo.get_by_email("SALLY@example.com").id == "1"
        assert repo.get_by_email("nobody@example.com") is None


class TestFileSessionProvider:

    def test_login_logout_cycle(self, tmp_path):
        sellers = JsonSellerRepository(tmp_path / "sellers.json")
        sally = Seller(id="1", name="Sally", email="sally@example.com")
        sellers.save(sally)
        session = FileSessionProvider(tmp_path / "session.json", sellers)

        assert session.current_actor() is None
        session.login(sally)
        assert FileSessionProvider(tmp_path / "session.json", sellers).current_actor() == sally
        session.logout()
        assert session.current_actor() is None

    def test_session_for_removed_seller_is_anonymous(self, tmp_path):
        sellers = JsonSellerRepository(tmp_path / "sellers.json")
        session = FileSessionProvider(tmp_path / "session.json", sellers)
        session.login(Seller(id="9", name="Ghost", email="ghost@example.com"))
        assert session.current_actor() is None
