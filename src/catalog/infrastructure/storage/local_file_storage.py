"""Directory-backed implementation of FileStorage."""

from __future__ import annotations

import logging
import os
import secrets
import tempfile
from pathlib import Path, PurePosixPath

from catalog.domain.repository.file_storage import FileStorage

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Stores files under *root* with random 40-character names.

    Files are written to a temporary name and renamed into place, so a
    crash mid-write never leaves a partial file at a returned path.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def store(self, content: bytes, namespace: str, extension: str) -> str:
        relative = PurePosixPath(namespace.strip("/")) / f"{secrets.token_hex(20)}.{extension}"
        target = self._resolve(str(relative))
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=target.parent, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(content)
            os.replace(tmp_name, target)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Stored %d bytes at %s", len(content), relative)
        return str(relative)

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def delete(self, path: str) -> None:
        self._resolve(path).unlink(missing_ok=True)
        logger.debug("Deleted %s", path)

    def _resolve(self, path: str) -> Path:
        root = self._root.resolve()
        target = (root / path).resolve()
        if not target.is_relative_to(root):
            raise ValueError(f"Path escapes storage root: {path!r}")
        return target
