"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product with its owner and category attached, or None."""

    @abstractmethod
    def find_page(self, page: int, per_page: int) -> tuple[list[Product], int]:
        """Return one page of products, newest first, and the total count.

        Every product on the page has its owner and category attached.
        """

    @abstractmethod
    def find_by_category(
        self,
        category_id: int,
        exclude_id: int | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        """Return products in a category, newest first."""

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Persist a new product and assign its ID."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product."""
