"""Application service: Create Category use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.schemas import CategoryFields
from catalog.application.validation import validate
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, fields: Mapping[str, Any]) -> Category:
        data = validate(CategoryFields, fields)
        category = self._category_repo.insert(Category(id=None, title=data.title))
        logger.info("Category #%s '%s' created", category.id, category.title)
        return category
