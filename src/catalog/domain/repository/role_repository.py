"""Abstract repository for Role aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.role import Role


class RoleRepository(ABC):

    @abstractmethod
    def get_by_id(self, role_id: int) -> Role | None:
        """Return a role with its users attached, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Role | None:
        """Return a role by its exact name, or None if not found."""

    @abstractmethod
    def list_with_user_count(self) -> list[Role]:
        """Return every role with ``users_count`` filled in."""

    @abstractmethod
    def count_users(self, role_id: int) -> int:
        """Return how many users currently hold the role."""

    @abstractmethod
    def insert(self, role: Role) -> Role:
        """Persist a new role and assign its ID."""

    @abstractmethod
    def update(self, role: Role) -> None:
        """Persist changes to an existing role's name and description."""

    @abstractmethod
    def delete(self, role_id: int) -> None:
        """Remove a role."""

    @abstractmethod
    def attach_user(self, role_id: int, user_id: int) -> None:
        """Grant the role to a user. Granting twice is a no-op."""

    @abstractmethod
    def detach_user(self, role_id: int, user_id: int) -> None:
        """Take the role away from a user. Missing links are ignored."""
