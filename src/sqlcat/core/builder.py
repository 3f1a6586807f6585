"""Statement builder that concatenates query fragments into SQL."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import List

from .orders import normalize_orders
from .placeholders import number_placeholders
from .sql import SEP_AND, SEP_COMMA, SEP_WS, clause, positive_clause, scalar_clause
from .types import Statement

logger = logging.getLogger(__name__)

COUNT_ALIAS = "countq"


@dataclass
class Builder:
    """Accumulates the fragments of a ``SELECT`` query.

    Fields may be populated directly or through the keyword arguments of the
    constructor.  Empty fields, and a ``limit``/``offset`` that is not
    strictly positive, are left out of the rendered statement.
    """

    table: str = ""
    columns: List[str] = field(default_factory=list)
    relations: List[str] = field(default_factory=list)
    conditions: List[str] = field(default_factory=list)
    arguments: List[object] = field(default_factory=list)
    groups: List[str] = field(default_factory=list)
    having: List[str] = field(default_factory=list)
    orders: List[str] = field(default_factory=list)
    limit: int = 0
    offset: int = 0

    def to_sql(self) -> Statement:
        """Return the built SQL query and its arguments."""

        sql = "".join(
            [
                self._body(),
                clause("ORDER BY", self.orders, SEP_COMMA),
                positive_clause("LIMIT", self.limit),
                positive_clause("OFFSET", self.offset),
            ]
        )
        return self._statement(sql)

    def to_sql_count(self) -> Statement:
        """Like :meth:`to_sql`, but counts the rows of the query instead.

        Ordering and paging never change a row count, so they are dropped.
        """

        sql = f"SELECT count(*) FROM ({self._body()}) AS {COUNT_ALIAS}"
        return self._statement(sql)

    def with_condition(self, condition: str, *args: object) -> Builder:
        """Associate a condition with the query.

        Every ``$n`` in ``condition`` is turned into the next positional
        parameter (``$1``, ``$2``, ...) as ``args`` are bound, so conditions
        added across several calls share a single argument list.
        """

        condition = number_placeholders(condition, self.arguments, args)
        self.conditions.append(condition)
        return self

    def with_orders(self, orders: str | Sequence[str]) -> Builder:
        if orders:
            self.orders = normalize_orders(orders)
        return self

    def with_limit(self, limit: int) -> Builder:
        if limit > 0:
            self.limit = limit
        return self

    def with_offset(self, offset: int) -> Builder:
        if offset > 0:
            self.offset = offset
        return self

    def _body(self) -> str:
        return "".join(
            [
                "SELECT",
                clause("", self.columns, SEP_COMMA),
                scalar_clause("FROM", self.table),
                clause("", self.relations, SEP_WS),
                clause("WHERE", self.conditions, SEP_AND),
                clause("GROUP BY", self.groups, SEP_COMMA),
                clause("HAVING", self.having, SEP_AND),
            ]
        )

    def _statement(self, sql: str) -> Statement:
        logger.debug("Built query with %d argument(s): %s", len(self.arguments), sql)
        return sql, list(self.arguments)


def with_condition(builder: Builder, condition: str, *args: object) -> Builder:
    """Module level form of :meth:`Builder.with_condition`."""

    return builder.with_condition(condition, *args)


__all__ = ["COUNT_ALIAS", "Builder", "with_condition"]
