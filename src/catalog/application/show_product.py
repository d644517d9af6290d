"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDetail
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

RELATED_LIMIT = 4


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDetail:
        """Return a product with up to four others from its category."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        related = self._product_repo.find_by_category(
            product.category_id,
            exclude_id=product.id,
            limit=RELATED_LIMIT,
        )
        return ProductDetail(product=product, related=related)
