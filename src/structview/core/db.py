# structview/core/db.py
from __future__ import annotations
from contextlib import contextmanager
import logging
from typing import Iterator
from sqlalchemy import Engine, MetaData, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from structview.core.config import settings

# Naming convention is strongly recommended for Alembic compatibility
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_sessionmaker: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        logger.info("Creating DB engine")
        kwargs: dict = {"future": True}
        if settings.database_url.startswith("sqlite") and ":memory:" in settings.database_url:
            # One shared connection, otherwise every checkout sees an empty database
            kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            kwargs["pool_pre_ping"] = True
        _engine = create_engine(settings.database_url, **kwargs)
    return _engine


def get_sessionmaker() -> sessionmaker[Session]:
    global _sessionmaker
    if _sessionmaker is None:
        _sessionmaker = sessionmaker(
            get_engine(),
            expire_on_commit=False,
            autoflush=False,
        )
    return _sessionmaker


def reset_engine() -> None:
    """Dispose the engine and forget the session factory."""
    global _engine, _sessionmaker
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessionmaker = None


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Context manager for DB sessions.
    Commits on success, rolls back and re-raises on error.
    """
    factory = get_sessionmaker()
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            logger.exception("DB transaction rolled back")
            raise


class Base(DeclarativeBase):
    """
    Shared SQLAlchemy Declarative Base.

    Every mapped subclass is map-shaped: attributes and relationships can be
    destructured through ``structview.destructure_keys``.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
