"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are not domain exceptions: they propagate.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more field constraints were violated.

    ``errors`` maps a field name to the list of messages for that field.
    """

    def __init__(
        self,
        message: str = "The given data was invalid.",
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors: dict[str, list[str]] = errors or {}

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        return "\n".join(
            f"{field}: {message}"
            for field, messages in self.errors.items()
            for message in messages
        )


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DomainGuardError(DomainException):
    """A business rule blocked the operation before any mutation."""


class StorageError(Exception):
    """The file store could not write or remove a file."""
