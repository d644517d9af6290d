"""Abstract repository for User entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def insert(self, user: User) -> User:
        """Persist a new user and assign its ID."""
