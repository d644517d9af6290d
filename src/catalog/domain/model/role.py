"""Role aggregate.

A role groups users. Two rules protect roles from deletion: the
``admin`` role is permanent, and a role still held by users must be
emptied first.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.exceptions import DomainGuardError
from catalog.domain.model.user import User

PROTECTED_ROLE_NAME = "admin"


@dataclass
class Role:
    """Aggregate root for roles.

    ``users`` is filled when the repository loads the role in detail;
    ``users_count`` is filled by listings that aggregate instead.
    """

    id: int | None
    name: str
    description: str | None = None
    users: list[User] = field(default_factory=list)
    users_count: int = 0

    @property
    def is_protected(self) -> bool:
        return self.name == PROTECTED_ROLE_NAME

    def rename(self, name: str, description: str | None) -> None:
        self.name = name
        self.description = description

    def ensure_deletable(self, assigned_users: int) -> None:
        """Raise DomainGuardError if this role must not be deleted.

        The admin check comes first so the admin role is refused
        regardless of how many users hold it.
        """
        if self.is_protected:
            raise DomainGuardError("Cannot delete the admin role!")
        if assigned_users > 0:
            raise DomainGuardError(
                "Cannot delete role with assigned users. "
                "Please reassign users first."
            )
