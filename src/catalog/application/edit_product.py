"""Application service: prepare the form for editing a product."""

from __future__ import annotations

from catalog.application.dto import ProductForm
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class EditProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(self, product_id: int) -> ProductForm:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return ProductForm(
            categories=self._category_repo.list_by_title(),
            product=product,
        )
