"""
Repository Pattern Implementation
Provides data access abstractions with clean separation of concerns.
"""
from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, func, select

from store_api.core.config import settings
from store_api.core.exceptions import RepositoryException, StorageUnavailableException
from store_api.core.logging import get_logger
from store_api.data_access.db import SessionFactory, session_scope
from store_api.data_access.query import (
    PageSpec,
    QueryExecutor,
    SortSpec,
    Specification,
    resolve_page,
    resolve_sort,
)
from store_api.data_access.query.executor import STORAGE_ERRORS
from store_api.domain.value_objects import SearchCriteria

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)
C = TypeVar("C", bound=SearchCriteria)


class SQLModelRepository(Generic[T, C], ABC):
    """
    Synchronous SQLModel repository.

    Every method runs in its own short-lived session taken from the factory.
    Returned entities are detached, with the relations named by
    ``load_options`` already loaded.
    """

    model_class: type[T]
    load_options: tuple[Any, ...] = ()

    def __init__(self, session_factory: SessionFactory, executor: QueryExecutor | None = None):
        self.session_factory = session_factory
        self.executor = executor or QueryExecutor(session_factory)

    @abstractmethod
    def build_specification(self, criteria: C) -> Specification:
        """Translate criteria filters into a specification."""

    def search(self, criteria: C) -> builtins.list[T]:
        """
        Resolve sort and page first, so invalid input fails before any
        storage access, then run the criteria query.
        """
        sort = resolve_sort(self.model_class, criteria.sort_field, criteria.sorting_direction)
        page = resolve_page(
            criteria.page_actual, criteria.page_size, default_size=settings.default_page_size
        )
        return self.list(self.build_specification(criteria), sort, page)

    def list(
        self,
        specification: Specification | None = None,
        sort: SortSpec | None = None,
        page: PageSpec | None = None,
    ) -> builtins.list[T]:
        """List entities with filtering."""
        return self.executor.execute(
            self.model_class, specification, sort, page, options=self.load_options
        )

    def get(self, id: UUID) -> T | None:
        """Get entity by primary key."""
        with self._reading() as session:
            return session.get(self.model_class, id, options=self.load_options)

    def get_many(self, ids: Sequence[UUID]) -> builtins.list[T]:
        """Get every entity whose id is listed; missing ids are skipped."""
        if not ids:
            return []
        stmt = select(self.model_class).where(self.model_class.id.in_(list(ids)))
        with self._reading() as session:
            return list(session.exec(stmt.options(*self.load_options)).all())

    def exists(self, id: UUID) -> bool:
        """Check if entity exists."""
        stmt = select(func.count()).select_from(self.model_class).where(self.model_class.id == id)
        with self._reading() as session:
            return (session.exec(stmt).one() or 0) > 0

    def add(self, entity: T) -> T:
        """Insert an entity and return it reloaded."""
        with self._writing() as session:
            session.add(entity)
            session.flush()
            return self._reload(session, entity.id)

    def update(self, id: UUID, changes: dict[str, Any]) -> T | None:
        """Apply attribute changes to a stored entity. Returns None when it does not exist."""
        with self._writing() as session:
            entity = session.get(self.model_class, id)
            if entity is None:
                return None
            for attribute, value in changes.items():
                setattr(entity, attribute, value)
            session.flush()
            return self._reload(session, id)

    def delete(self, id: UUID) -> T | None:
        """Delete by primary key. Returns the deleted entity, or None when absent."""
        with self._writing() as session:
            entity = session.get(self.model_class, id, options=self.load_options)
            if entity is None:
                return None
            session.delete(entity)
            return entity

    def _reload(self, session: Session, id: UUID) -> T:
        stmt = (
            select(self.model_class)
            .where(self.model_class.id == id)
            .options(*self.load_options)
            .execution_options(populate_existing=True)
        )
        return session.exec(stmt).one()

    def _reading(self) -> AbstractContextManager[Session]:
        return self._guarded(transactional=False)

    def _writing(self) -> AbstractContextManager[Session]:
        return self._guarded(transactional=True)

    @contextmanager
    def _guarded(self, transactional: bool) -> Iterator[Session]:
        """Open a session, translating database errors into application ones."""
        entity = self.model_class.__name__
        try:
            if transactional:
                with session_scope(self.session_factory) as session:
                    yield session
            else:
                with self.session_factory() as session:
                    yield session
        except IntegrityError as exc:
            logger.warning(f"Integrity violation on {entity}: {exc.orig}")
            raise RepositoryException(
                f"{entity} violates a uniqueness or reference constraint",
                details={"entity": entity},
            ) from exc
        except STORAGE_ERRORS as exc:
            logger.error(f"Storage unavailable while accessing {entity}: {exc}")
            raise StorageUnavailableException(
                f"Storage unavailable while accessing {entity}",
                details={"entity": entity},
            ) from exc
