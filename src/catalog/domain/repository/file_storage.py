"""Abstract file storage for uploaded pictures.

Paths are storage-relative strings such as ``images/products/ab12.jpg``;
only the storage knows where they live on disk (or elsewhere).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileStorage(ABC):

    @abstractmethod
    def store(self, content: bytes, namespace: str, extension: str) -> str:
        """Write *content* under *namespace* and return its relative path."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if *path* refers to a stored file."""

    @abstractmethod
    def delete(self, path: str) -> None:
        """Remove a stored file. Missing paths are ignored."""
