"""Abstract repository for Category entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def list_by_title(self) -> list[Category]:
        """Return every category ordered by title."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of categories."""

    @abstractmethod
    def insert(self, category: Category) -> Category:
        """Persist a new category and assign its ID."""
