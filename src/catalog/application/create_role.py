"""Application service: Create Role use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.schemas import RoleFields
from catalog.application.validation import validate
from catalog.domain.model.role import Role
from catalog.domain.repository.role_repository import RoleRepository

logger = logging.getLogger(__name__)


class CreateRoleHandler:

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    def handle(self, fields: Mapping[str, Any]) -> Role:
        data = validate(RoleFields, fields, roles=self._role_repo)

        role = Role(id=None, name=data.name, description=data.description)
        self._role_repo.insert(role)

        logger.info("Role #%s '%s' created", role.id, role.name)
        return role
