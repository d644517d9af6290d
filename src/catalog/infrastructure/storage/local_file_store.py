"""Filesystem-backed implementation of FileStore for the public disk."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from catalog.domain.exceptions import StorageError
from catalog.domain.model.value_objects import ImageUpload
from catalog.domain.storage.file_store import FileStore

logger = logging.getLogger(__name__)


class LocalFileStore(FileStore):
    """Stores files below ``root`` and serves them under ``public_url``.

    Stored names are random so uploads never overwrite one another and
    the client's file name never reaches the disk.
    """

    def __init__(self, root: Path, public_url: str = "/storage") -> None:
        self._root = root.resolve()
        self._public_url = public_url.rstrip("/")

    # --- FileStore interface --------------------------------------------------

    def put(self, directory: str, upload: ImageUpload) -> str:
        relative = f"{directory.strip('/')}/{uuid.uuid4().hex}.{upload.extension}"
        target = self._resolve(relative)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(upload.content)
        except OSError as exc:
            raise StorageError(f"Could not store '{relative}'") from exc
        logger.debug("Stored %s (%d bytes)", relative, upload.size)
        return relative

    def delete(self, path: str) -> bool:
        target = self._resolve(path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Could not delete '{path}'") from exc
        logger.debug("Deleted %s", path)
        return True

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def url(self, path: str) -> str:
        return f"{self._public_url}/{path.lstrip('/')}"

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, path: str) -> Path:
        target = (self._root / path).resolve()
        if not target.is_relative_to(self._root):
            raise StorageError(f"Path '{path}' is outside the public disk")
        return target
