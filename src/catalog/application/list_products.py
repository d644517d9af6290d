"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import Page
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

PAGE_SIZE = 12


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, page: int = 1) -> Page[Product]:
        """Return one page of products, newest first.

        Pages below 1 are served as page 1; pages past the end are empty.
        """
        page = max(page, 1)
        items, total = self._product_repo.find_page(page, PAGE_SIZE)
        return Page(items=items, page=page, per_page=PAGE_SIZE, total=total)
