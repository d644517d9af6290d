"""Application service: Update Product use case.

When a new image arrives, the old file is removed first and the new
one stored afterwards. Removing the old file is best-effort: a failure
is logged and the update carries on, which can leave an orphaned file
on the public disk.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.image_cleanup import discard_image
from catalog.application.schemas import ProductFields
from catalog.application.validation import validate
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import PRODUCT_IMAGE_DIR, Product
from catalog.domain.model.value_objects import ImageUpload, Money
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.file_store import FileStore

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        file_store: FileStore,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._file_store = file_store

    def handle(
        self,
        product_id: int,
        fields: Mapping[str, Any],
        image: ImageUpload | None = None,
    ) -> Product:
        """Overwrite a product's fields, and its image if one is given.

        Without ``image`` the stored image reference is left untouched.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        data = validate(
            ProductFields,
            {**fields, "image": image},
            categories=self._category_repo,
        )

        if data.image is not None:
            if product.image:
                discard_image(self._file_store, product.image)
            product.replace_image(self._file_store.put(PRODUCT_IMAGE_DIR, data.image))

        product.revise(
            title=data.title,
            description=data.description,
            price=Money(data.price),
            category_id=data.category_id,
        )
        self._product_repo.update(product)

        logger.info("Product #%s updated", product.id)
        return product
