"""Engine creation, table setup and the per-command unit of work."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.persistence import tables  # noqa: F401  (registers tables)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def database_engine(url: str) -> Engine:
    """Return the shared engine for ``url``, creating it on first use."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    else:
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.debug("Database engine created for %s", parsed.render_as_string(hide_password=True))
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_db(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left as they are."""
    SQLModel.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """Commit when the block succeeds, roll back when it raises."""
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except DomainException:
        session.rollback()
        raise
    except Exception:
        session.rollback()
        logger.error("Database transaction rolled back", exc_info=True)
        raise
    finally:
        session.close()
