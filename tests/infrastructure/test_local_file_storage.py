"""Tests for the directory-backed file storage."""

import pytest

from catalog.infrastructure.storage.local_file_storage import LocalFileStorage


class TestLocalFileStorage:

    def test_store_writes_under_namespace(self, tmp_path):
        storage = LocalFileStorage(tmp_path)

        path = storage.store(b"picture-bytes", "images/products", "jpg")

        assert path.startswith("images/products/")
        assert path.endswith(".jpg")
        assert storage.exists(path)
        assert (tmp_path / path).read_bytes() == b"picture-bytes"

    def test_same_content_gets_distinct_paths(self, tmp_path):
        storage = LocalFileStorage(tmp_path)
        first = storage.store(b"same", "images/products", "png")
        second = storage.store(b"same", "images/products", "png")
        assert first != second

    def test_no_partial_files_left_behind(self, tmp_path):
        storage = LocalFileStorage(tmp_path)
        storage.store(b"data", "images/products", "gif")
        assert list((tmp_path / "images" / "products").glob("*.part")) == []

    def test_delete(self, tmp_path):
        storage = LocalFileStorage(tmp_path)
        path = storage.store(b"data", "images/products", "jpg")

        storage.delete(path)
        storage.delete(path)  # already gone

        assert not storage.exists(path)

    def test_missing_path_does_not_exist(self, tmp_path):
        assert not LocalFileStorage(tmp_path).exists("images/products/nope.jpg")

    def test_paths_cannot_escape_root(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "storage")
        with pytest.raises(ValueError, match="escapes storage root"):
            storage.exists("../outside.txt")
