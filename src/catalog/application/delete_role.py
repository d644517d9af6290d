"""Application service: Delete Role use case.

Two guards run before anything is removed: the admin role can never be
deleted, and a role that users still hold must be emptied first.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.role_repository import RoleRepository

logger = logging.getLogger(__name__)


class DeleteRoleHandler:

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    def handle(self, role_id: int) -> None:
        role = self._role_repo.get_by_id(role_id)
        if role is None:
            raise EntityNotFoundError(f"Role #{role_id} not found")

        role.ensure_deletable(self._role_repo.count_users(role_id))

        self._role_repo.delete(role_id)
        logger.info("Role #%s '%s' deleted", role_id, role.name)
