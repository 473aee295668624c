from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, event
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from store_api.core.config import settings

SessionFactory = Callable[[], Session]

_engine: Engine | None = None


def get_engine() -> Engine:
    """Get or lazily create the configured database engine."""
    global _engine
    if _engine is None:
        connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
        _engine = create_engine(
            settings.get_database_url(),
            echo=settings.database_echo,
            connect_args=connect_args,
        )
        if settings.is_sqlite:
            enforce_sqlite_foreign_keys(_engine)
    return _engine


def enforce_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key checks for every new SQLite connection of the engine."""

    @event.listens_for(engine, "connect")
    def _foreign_keys_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_all(engine: Engine | None = None) -> None:
    """Create all store tables in the configured database."""
    from store_api.data_access.models import (  # noqa: F401
        Customer,
        Product,
        Sale,
        SaleProductLink,
    )
    SQLModel.metadata.create_all(engine or get_engine())


def make_session_factory(engine: Engine | None = None) -> SessionFactory:
    """
    Build a factory of short-lived sessions.

    Objects stay readable after commit so services can hand them back to
    callers once the session is closed.
    """
    return sessionmaker(bind=engine or get_engine(), class_=Session, expire_on_commit=False)


@lru_cache
def get_session_factory() -> SessionFactory:
    """Application-wide session factory, used as a FastAPI dependency."""
    return make_session_factory()


@contextmanager
def session_scope(session_factory: SessionFactory | None = None) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    factory = session_factory or make_session_factory()
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
