"""SQL-backed implementation of UserRepository."""

from __future__ import annotations

from sqlmodel import Session, col, select

from catalog.domain.model.user import User
from catalog.domain.repository.user_repository import UserRepository
from catalog.infrastructure.persistence.tables import UserRow


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        row = self._session.exec(select(UserRow).where(UserRow.email == email)).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[User]:
        statement = select(UserRow).order_by(col(UserRow.id))
        return [self._to_domain(row) for row in self._session.exec(statement).all()]

    def insert(self, user: User) -> User:
        row = UserRow(name=user.name, email=user.email)
        self._session.add(row)
        self._session.flush()
        user.id = row.id
        return user

    @staticmethod
    def _to_domain(row: UserRow) -> User:
        return User(id=row.id, name=row.name, email=row.email)
