"""SQL-backed implementation of RoleRepository.

Role membership lives in the ``role_user`` link table; counts are
aggregated in SQL rather than by loading every user.
"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import Session, col, select

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.role import Role
from catalog.domain.model.user import User
from catalog.domain.repository.role_repository import RoleRepository
from catalog.infrastructure.persistence.tables import RoleRow, RoleUserLink


class SqlRoleRepository(RoleRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- RoleRepository interface ---------------------------------------------

    def get_by_id(self, role_id: int) -> Role | None:
        statement = (
            select(RoleRow)
            .where(RoleRow.id == role_id)
            .options(selectinload(RoleRow.users))
            .execution_options(populate_existing=True)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        users = [User(id=u.id, name=u.name, email=u.email) for u in row.users]
        return Role(
            id=row.id,
            name=row.name,
            description=row.description,
            users=users,
            users_count=len(users),
        )

    def get_by_name(self, name: str) -> Role | None:
        row = self._session.exec(select(RoleRow).where(RoleRow.name == name)).first()
        if row is None:
            return None
        return Role(id=row.id, name=row.name, description=row.description)

    def list_with_user_count(self) -> list[Role]:
        statement = (
            select(RoleRow, func.count(col(RoleUserLink.user_id)))
            .outerjoin(RoleUserLink, col(RoleUserLink.role_id) == col(RoleRow.id))
            .group_by(col(RoleRow.id))
            .order_by(col(RoleRow.id))
        )
        return [
            Role(id=row.id, name=row.name, description=row.description, users_count=count)
            for row, count in self._session.exec(statement).all()
        ]

    def count_users(self, role_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(RoleUserLink)
            .where(RoleUserLink.role_id == role_id)
        )
        return self._session.exec(statement).one()

    def insert(self, role: Role) -> Role:
        row = RoleRow(name=role.name, description=role.description)
        self._session.add(row)
        self._session.flush()
        role.id = row.id
        return role

    def update(self, role: Role) -> None:
        row = self._session.get(RoleRow, role.id)
        if row is None:
            raise EntityNotFoundError(f"Role #{role.id} not found")
        row.name = role.name
        row.description = role.description
        self._session.add(row)
        self._session.flush()

    def delete(self, role_id: int) -> None:
        row = self._session.get(RoleRow, role_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def attach_user(self, role_id: int, user_id: int) -> None:
        if self._session.get(RoleUserLink, (role_id, user_id)) is None:
            self._session.add(RoleUserLink(role_id=role_id, user_id=user_id))
            self._session.flush()

    def detach_user(self, role_id: int, user_id: int) -> None:
        link = self._session.get(RoleUserLink, (role_id, user_id))
        if link is not None:
            self._session.delete(link)
            self._session.flush()
