"""Application service: Update Role use case.

The name must stay unique, but a role may keep its own name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.schemas import RoleFields
from catalog.application.validation import validate
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.role import Role
from catalog.domain.repository.role_repository import RoleRepository

logger = logging.getLogger(__name__)


class UpdateRoleHandler:

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    def handle(self, role_id: int, fields: Mapping[str, Any]) -> Role:
        role = self._role_repo.get_by_id(role_id)
        if role is None:
            raise EntityNotFoundError(f"Role #{role_id} not found")

        data = validate(RoleFields, fields, roles=self._role_repo, ignore_id=role.id)

        role.rename(data.name, data.description)
        self._role_repo.update(role)

        logger.info("Role #%s updated", role.id)
        return role
