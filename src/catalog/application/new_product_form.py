"""Application service: prepare the form for a new product."""

from __future__ import annotations

from catalog.application.dto import ProductForm
from catalog.domain.repository.category_repository import CategoryRepository


class NewProductFormHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> ProductForm:
        """Return the category choices for a new product.

        When there are none, ``needs_category`` is set and the caller
        should send the user to create a category first.
        """
        return ProductForm(categories=self._category_repo.list_by_title())
