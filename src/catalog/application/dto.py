"""Data Transfer Objects: plain containers that cross layer boundaries.

They bundle what a screen needs (a product and its neighbours, a form
and its choices) so the CLI never has to query repositories itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import ceil
from typing import Generic, TypeVar

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a longer listing."""

    items: list[T]
    page: int
    per_page: int
    total: int

    @property
    def last_page(self) -> int:
        return max(1, ceil(self.total / self.per_page))

    @property
    def has_more(self) -> bool:
        return self.page < self.last_page


@dataclass(frozen=True)
class ProductDetail:
    """A product together with others from its category."""

    product: Product
    related: list[Product]


@dataclass(frozen=True)
class ProductForm:
    """Everything needed to fill in a product form.

    ``product`` is None for a new product.
    """

    categories: list[Category]
    product: Product | None = None

    @property
    def needs_category(self) -> bool:
        """True when there is no category to file a product under yet."""
        return not self.categories
