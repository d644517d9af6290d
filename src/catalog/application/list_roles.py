"""Application service: List Roles use case (query)."""

from __future__ import annotations

from catalog.domain.model.role import Role
from catalog.domain.repository.role_repository import RoleRepository


class ListRolesHandler:

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    def handle(self) -> list[Role]:
        """Return every role with its number of users."""
        return self._role_repo.list_with_user_count()
