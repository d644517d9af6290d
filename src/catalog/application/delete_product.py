"""Application service: Delete Product use case.

The image file is removed before the record. The two steps are not
atomic: if the record deletion fails afterwards, the product survives
with a dangling image reference.
"""

from __future__ import annotations

import logging

from catalog.application.image_cleanup import discard_image
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.file_store import FileStore

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, file_store: FileStore) -> None:
        self._product_repo = product_repo
        self._file_store = file_store

    def handle(self, product_id: int) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        if product.image:
            discard_image(self._file_store, product.image)

        self._product_repo.delete(product_id)
        logger.info("Product #%s deleted", product_id)
