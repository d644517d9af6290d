"""Application service: Add User use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from catalog.application.schemas import UserFields
from catalog.application.validation import validate
from catalog.domain.model.user import User
from catalog.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, fields: Mapping[str, Any]) -> User:
        data = validate(UserFields, fields, users=self._user_repo)
        user = self._user_repo.insert(User(id=None, name=data.name, email=data.email))
        logger.info("User #%s <%s> added", user.id, user.email)
        return user
