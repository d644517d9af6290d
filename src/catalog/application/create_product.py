"""Application service: Create Product use case.

Validates the form, stores the optional image on the public disk, and
records the product under the acting user. Nothing is written when
validation fails.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.schemas import ProductFields
from catalog.application.validation import validate
from catalog.domain.model.product import PRODUCT_IMAGE_DIR, Product
from catalog.domain.model.value_objects import ImageUpload, Money
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.file_store import FileStore

logger = logging.getLogger(__name__)


class CreateProductHandler:

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
        fields: Mapping[str, Any],
        actor_id: int,
        image: ImageUpload | None = None,
    ) -> Product:
        """Create a product owned by ``actor_id``.

        Raises ValidationError before any side effect if a field is
        invalid. A StorageError from the file store propagates.
        """
        data = validate(
            ProductFields,
            {**fields, "image": image},
            categories=self._category_repo,
        )

        image_path = None
        if data.image is not None:
            image_path = self._file_store.put(PRODUCT_IMAGE_DIR, data.image)

        product = Product(
            id=None,
            title=data.title,
            description=data.description,
            price=Money(data.price),
            category_id=data.category_id,
            user_id=actor_id,
            image=image_path,
        )
        self._product_repo.insert(product)

        logger.info(
            "Product #%s '%s' created by user #%s", product.id, product.title, actor_id
        )
        return product
