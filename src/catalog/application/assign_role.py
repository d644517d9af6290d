"""Application services: grant a role to a user, or take it away.

Revoking is how users are reassigned before their old role can be
deleted.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.role import Role
from catalog.domain.model.user import User
from catalog.domain.repository.role_repository import RoleRepository
from catalog.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class _RoleMembershipHandler:

    def __init__(self, role_repo: RoleRepository, user_repo: UserRepository) -> None:
        self._role_repo = role_repo
        self._user_repo = user_repo

    def _resolve(self, role_id: int, user_id: int) -> tuple[Role, User]:
        role = self._role_repo.get_by_id(role_id)
        if role is None:
            raise EntityNotFoundError(f"Role #{role_id} not found")
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return role, user


class AssignRoleHandler(_RoleMembershipHandler):

    def handle(self, role_id: int, user_id: int) -> None:
        role, user = self._resolve(role_id, user_id)
        self._role_repo.attach_user(role_id, user_id)
        logger.info("Role '%s' granted to user #%s", role.name, user.id)


class RevokeRoleHandler(_RoleMembershipHandler):

    def handle(self, role_id: int, user_id: int) -> None:
        role, user = self._resolve(role_id, user_id)
        self._role_repo.detach_user(role_id, user_id)
        logger.info("Role '%s' revoked from user #%s", role.name, user.id)
