"""SQL-backed implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import func
from sqlmodel import Session, col, select

from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.infrastructure.persistence.tables import CategoryRow


class SqlCategoryRepository(CategoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, category_id: int) -> Category | None:
        row = self._session.get(CategoryRow, category_id)
        if row is None:
            return None
        return Category(id=row.id, title=row.title)

    def list_by_title(self) -> list[Category]:
        statement = select(CategoryRow).order_by(col(CategoryRow.title), col(CategoryRow.id))
        return [
            Category(id=row.id, title=row.title)
            for row in self._session.exec(statement).all()
        ]

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(CategoryRow)).one()

    def insert(self, category: Category) -> Category:
        row = CategoryRow(title=category.title)
        self._session.add(row)
        self._session.flush()
        category.id = row.id
        return category
