"""
Specification pattern for criteria queries.

A specification holds root predicates plus the joins the predicates need.
Joins are keyed, so several predicates over the same relation share one join.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqlalchemy import and_, true
from sqlmodel.sql.expression import SelectOfScalar


class JoinKey(str, Enum):
    """Relations a criteria query may traverse."""

    CUSTOMER = "customer"
    PRODUCTS = "products"


@dataclass
class JoinClause:
    """
    One inner join and the predicates that read from it.

    Collection joins can repeat the root row, so the query must be made
    distinct when one is present.
    """
    key: JoinKey
    relationship: Any
    conditions: list[Any] = field(default_factory=list)
    collection: bool = False


class Specification:
    """Root predicates and keyed joins, combined with AND logic."""

    def __init__(self, conditions: list[Any] | None = None):
        self.conditions: list[Any] = list(conditions or [])
        self.joins: dict[JoinKey, JoinClause] = {}

    def where(self, condition: Any) -> Specification:
        """Add a predicate over the root entity."""
        self.conditions.append(condition)
        return self

    def join(
        self,
        key: JoinKey,
        relationship: Any,
        condition: Any,
        *,
        collection: bool = False,
    ) -> Specification:
        """Add a predicate over a related entity, creating the join on first use."""
        clause = self.joins.get(key)
        if clause is None:
            clause = JoinClause(key=key, relationship=relationship, collection=collection)
            self.joins[key] = clause
        clause.conditions.append(condition)
        return self

    @property
    def all_conditions(self) -> list[Any]:
        """Root predicates followed by join predicates, in insertion order."""
        conditions = list(self.conditions)
        for clause in self.joins.values():
            conditions.extend(clause.conditions)
        return conditions

    @property
    def is_empty(self) -> bool:
        return not self.all_conditions

    @property
    def requires_distinct(self) -> bool:
        return any(clause.collection for clause in self.joins.values())

    def to_sql_condition(self) -> Any:
        """Convert to SQL condition using AND logic."""
        conditions = self.all_conditions
        if not conditions:
            return true()
        if len(conditions) == 1:
            return conditions[0]
        return and_(*conditions)

    def apply(self, stmt: SelectOfScalar) -> SelectOfScalar:
        """Attach every join once, then the combined predicate."""
        for clause in self.joins.values():
            stmt = stmt.join(clause.relationship)
        if self.requires_distinct:
            stmt = stmt.distinct()
        if not self.is_empty:
            stmt = stmt.where(self.to_sql_condition())
        return stmt

    def __repr__(self) -> str:
        joins = {key.value: len(clause.conditions) for key, clause in self.joins.items()}
        return f"Specification(conditions={len(self.conditions)}, joins={joins})"
