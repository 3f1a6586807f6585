"""Helper utilities for joining SQL fragments into clauses.

Every clause the builder emits goes through :func:`clause` so that the rules
for when a keyword appears, and how its fragments are separated, live in one
place.  Keeping the separators as constants also makes the generated SQL
deterministic, which the snapshot style tests in the repository rely on.
"""

from __future__ import annotations

from collections.abc import Sequence

SEP_WS = " "
SEP_COMMA = ", "
SEP_AND = " AND "


def clause(keyword: str, fragments: Sequence[str], separator: str) -> str:
    """Return ``" <keyword> <fragments>"`` or ``""`` when there are no fragments.

    An empty ``keyword`` emits the joined fragments on their own, which is how
    raw join clauses are appended after ``FROM``.
    """

    if not fragments:
        return ""
    joined = separator.join(fragments)
    if keyword:
        return f"{SEP_WS}{keyword}{SEP_WS}{joined}"
    return f"{SEP_WS}{joined}"


def scalar_clause(keyword: str, value: str) -> str:
    if not value:
        return ""
    return f"{SEP_WS}{keyword}{SEP_WS}{value}"


def positive_clause(keyword: str, value: int) -> str:
    """Return the clause for ``value`` only if it is strictly positive."""

    if value <= 0:
        return ""
    return scalar_clause(keyword, str(value))
