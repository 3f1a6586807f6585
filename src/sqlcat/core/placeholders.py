"""Numbering of ``$n`` placeholders in condition fragments."""

from __future__ import annotations

from collections.abc import Iterable

PLACEHOLDER_MARKER = "$n"
PLACEHOLDER_PREFIX = "$"


def positional(index: int) -> str:
    """Return the 1-based positional placeholder for ``index``."""

    return f"{PLACEHOLDER_PREFIX}{index}"


def number_placeholders(
    condition: str, arguments: list[object], values: Iterable[object]
) -> str:
    """Append ``values`` to ``arguments`` and number ``condition`` to match.

    Each value takes the next global position (the new length of
    ``arguments``) and replaces the first ``$n`` still present in
    ``condition``.  A value is recorded even when no marker is left for it,
    so placeholders the caller numbered by hand stay aligned with the list.
    """

    for value in values:
        arguments.append(value)
        condition = condition.replace(PLACEHOLDER_MARKER, positional(len(arguments)), 1)
    return condition


__all__ = [
    "PLACEHOLDER_MARKER",
    "PLACEHOLDER_PREFIX",
    "number_placeholders",
    "positional",
]
