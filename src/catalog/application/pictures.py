"""Picture staging for product submissions.

Pictures are written to storage before the product is saved. If the
submission fails afterwards, the files written during it are deleted
again so storage never holds pictures no product owns.
"""

from __future__ import annotations

import logging
from types import TracebackType

from catalog.application.dto import ImageFile
from catalog.domain.repository.file_storage import FileStorage

logger = logging.getLogger(__name__)

PICTURES_NAMESPACE = "images/products"


class PictureStaging:
    """Context manager that undoes picture writes when the block raises.

        with PictureStaging(storage) as staging:
            paths = staging.store(submission.pictures_to_store)
            ...  # save the product
    """

    def __init__(self, storage: FileStorage) -> None:
        self._storage = storage
        self._staged: list[str] = []

    def store(self, pictures: list[ImageFile]) -> list[str]:
        paths: list[str] = []
        for picture in pictures:
            path = self._storage.store(picture.content, PICTURES_NAMESPACE, picture.extension)
            self._staged.append(path)
            paths.append(path)
        return paths

    def __enter__(self) -> PictureStaging:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is not None and self._staged:
            logger.warning(
                "Submission failed, removing %d staged picture(s)", len(self._staged)
            )
            for path in self._staged:
                self._storage.delete(path)
        return False
