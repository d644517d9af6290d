"""SQL-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import Session, col, select

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.tables import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        statement = (
            select(ProductRow)
            .where(ProductRow.id == product_id)
            .options(selectinload(ProductRow.category), selectinload(ProductRow.owner))
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_domain(row, with_relations=True)

    def find_page(self, page: int, per_page: int) -> tuple[list[Product], int]:
        total = self._session.exec(select(func.count()).select_from(ProductRow)).one()
        statement = (
            select(ProductRow)
            .options(selectinload(ProductRow.category), selectinload(ProductRow.owner))
            .order_by(col(ProductRow.created_at).desc(), col(ProductRow.id).desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        rows = self._session.exec(statement).all()
        return [self._to_domain(row, with_relations=True) for row in rows], total

    def find_by_category(
        self,
        category_id: int,
        exclude_id: int | None = None,
        limit: int | None = None,
    ) -> list[Product]:
        statement = select(ProductRow).where(ProductRow.category_id == category_id)
        if exclude_id is not None:
            statement = statement.where(col(ProductRow.id) != exclude_id)
        statement = statement.order_by(
            col(ProductRow.created_at).desc(), col(ProductRow.id).desc()
        )
        if limit is not None:
            statement = statement.limit(limit)
        return [self._to_domain(row) for row in self._session.exec(statement).all()]

    def insert(self, product: Product) -> Product:
        row = ProductRow(created_at=product.created_at, updated_at=product.updated_at)
        self._copy_fields(product, row)
        self._session.add(row)
        self._session.flush()
        product.id = row.id
        return product

    def update(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            raise EntityNotFoundError(f"Product #{product.id} not found")
        self._copy_fields(product, row)
        row.updated_at = product.updated_at
        self._session.add(row)
        self._session.flush()

    def delete(self, product_id: int) -> None:
        row = self._session.get(ProductRow, product_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _copy_fields(product: Product, row: ProductRow) -> None:
        row.title = product.title
        row.description = product.description
        row.price = product.price.amount
        row.image = product.image
        row.category_id = product.category_id
        row.user_id = product.user_id

    @staticmethod
    def _to_domain(row: ProductRow, with_relations: bool = False) -> Product:
        product = Product(
            id=row.id,
            title=row.title,
            description=row.description,
            price=Money(Decimal(str(row.price))),
            category_id=row.category_id,
            user_id=row.user_id,
            image=row.image,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        if with_relations:
            if row.category is not None:
                product.category = Category(id=row.category.id, title=row.category.title)
            if row.owner is not None:
                product.owner = User(id=row.owner.id, name=row.owner.name, email=row.owner.email)
        return product
