"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlmodel import Session

from catalog.infrastructure.config.logging_config import setup_logging
from catalog.infrastructure.config.settings import Settings
from catalog.infrastructure.persistence.database import (
    database_engine,
    init_db,
    session_scope,
)
from catalog.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from catalog.infrastructure.persistence.sql_role_repository import SqlRoleRepository
from catalog.infrastructure.persistence.sql_user_repository import SqlUserRepository
from catalog.infrastructure.storage.local_file_store import LocalFileStore


def prepare(settings: Settings | None = None) -> Settings:
    """Configure logging and make sure the tables exist."""
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_file)
    init_db(database_engine(settings.database_url))
    return settings


@dataclass
class Container:
    """Repositories and stores bound to one database session."""

    session: Session
    settings: Settings

    def product_repository(self) -> SqlProductRepository:
        return SqlProductRepository(self.session)

    def category_repository(self) -> SqlCategoryRepository:
        return SqlCategoryRepository(self.session)

    def role_repository(self) -> SqlRoleRepository:
        return SqlRoleRepository(self.session)

    def user_repository(self) -> SqlUserRepository:
        return SqlUserRepository(self.session)

    def file_store(self) -> LocalFileStore:
        return LocalFileStore(
            self.settings.public_storage_root, self.settings.public_url
        )


@contextmanager
def container(settings: Settings | None = None) -> Iterator[Container]:
    """Yield a Container whose session commits when the block succeeds."""
    settings = settings or Settings()
    with session_scope(database_engine(settings.database_url)) as session:
        yield Container(session=session, settings=settings)
