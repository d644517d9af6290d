"""Application service: Show Role use case (query)."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.role import Role
from catalog.domain.repository.role_repository import RoleRepository


class ShowRoleHandler:

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    def handle(self, role_id: int) -> Role:
        """Return the role with its users attached."""
        role = self._role_repo.get_by_id(role_id)
        if role is None:
            raise EntityNotFoundError(f"Role #{role_id} not found")
        return role
