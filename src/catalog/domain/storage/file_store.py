"""Abstract file store for the public disk.

Files on the public disk are served to end users by path, so the
store only ever hands out paths relative to its root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.value_objects import ImageUpload


class FileStore(ABC):

    @abstractmethod
    def put(self, directory: str, upload: ImageUpload) -> str:
        """Store an upload under ``directory`` with a generated name.

        Returns the relative path of the stored file.
        Raises StorageError if the file cannot be written.
        """

    @abstractmethod
    def delete(self, path: str) -> bool:
        """Remove a stored file.

        Returns False if there was nothing to remove.
        Raises StorageError on any other failure.
        """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if a file is stored at ``path``."""

    @abstractmethod
    def url(self, path: str) -> str:
        """Return the public URL for a stored path."""
