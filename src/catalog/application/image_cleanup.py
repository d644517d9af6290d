"""Best-effort removal of image files that a record no longer needs."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import StorageError
from catalog.domain.storage.file_store import FileStore

logger = logging.getLogger(__name__)


def discard_image(file_store: FileStore, path: str) -> bool:
    """Delete ``path`` from the store, logging instead of raising on failure.

    Returns True only if a file was actually removed.
    """
    try:
        removed = file_store.delete(path)
    except StorageError:
        logger.warning("Could not delete image '%s'; leaving it behind", path, exc_info=True)
        return False
    if not removed:
        logger.warning("Image '%s' was already missing from the public disk", path)
    return removed
