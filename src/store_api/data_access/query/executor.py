"""
Entity-agnostic execution of criteria queries.

Each call opens one session from the injected factory and closes it on every
exit path. Connectivity failures surface once as StorageUnavailableException;
nothing is retried here.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlmodel import SQLModel, select
from sqlmodel.sql.expression import SelectOfScalar

from store_api.core.exceptions import StorageUnavailableException
from store_api.core.logging import get_logger
from store_api.data_access.db import SessionFactory

from .pagination import PageSpec
from .sorting import SortSpec
from .specification import Specification

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)

STORAGE_ERRORS = (OperationalError, InterfaceError, DisconnectionError)


def build_statement(
    model: type[T],
    specification: Specification | None = None,
    sort: SortSpec | None = None,
    page: PageSpec | None = None,
    options: Sequence[Any] = (),
) -> SelectOfScalar[T]:
    """Compose joins, predicates, ordering and the page window into one SELECT."""
    stmt = select(model)
    if specification is not None:
        stmt = specification.apply(stmt)
    if sort is not None:
        stmt = stmt.order_by(sort.clause())
    page = page or PageSpec()
    stmt = stmt.offset(page.offset).limit(page.limit)
    if options:
        stmt = stmt.options(*options)
    return stmt


class QueryExecutor:
    """Runs criteria queries against the store, read-only."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def execute(
        self,
        model: type[T],
        specification: Specification | None = None,
        sort: SortSpec | None = None,
        page: PageSpec | None = None,
        options: Sequence[Any] = (),
    ) -> list[T]:
        """
        Return the page of matching rows, in sort order when one is given.

        Returns an empty list when nothing matches.
        """
        stmt = build_statement(model, specification, sort, page, options)
        logger.debug(
            "Executing %s query: %r sort=%s page=%s",
            model.__name__,
            specification,
            sort.field.value if sort else None,
            page,
        )
        try:
            with self._session_factory() as session:
                return list(session.exec(stmt).all())
        except STORAGE_ERRORS as exc:
            logger.error(f"Storage unavailable while querying {model.__name__}: {exc}")
            raise StorageUnavailableException(
                f"Storage unavailable while querying {model.__name__}",
                details={"entity": model.__name__},
            ) from exc
