"""Translate REST style ``column:direction`` order tokens into SQL."""

from __future__ import annotations

from collections.abc import Sequence

from .sql import SEP_WS

ORDER_SEPARATOR = ":"


def normalize_orders(orders: str | Sequence[str] | None) -> list[str]:
    if orders is None:
        return []
    if isinstance(orders, str):
        return [orders]
    return list(orders)


def parse_order(order: str) -> str:
    """Return the ``ORDER BY`` fragment for a single token.

    Only the first separator splits the token; everything after it is the
    direction and is upper-cased as a whole.
    """

    column, separator, direction = order.partition(ORDER_SEPARATOR)
    if not separator:
        return order
    return f"{column}{SEP_WS}{direction.upper()}"


def parse_orders(orders: str | Sequence[str] | None) -> list[str]:
    """Parse an orders query into its equivalent SQL grammar.

    Each token follows the URL safe pattern ``column:direction``::

        name          -> name
        name:asc      -> name ASC
        pets.name:asc -> pets.name ASC

    Directions are not validated.  The input sequence is left untouched.
    """

    return [parse_order(order) for order in normalize_orders(orders)]


__all__ = ["ORDER_SEPARATOR", "normalize_orders", "parse_order", "parse_orders"]
