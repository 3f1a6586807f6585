"""Public type aliases used by the statement builder."""

from __future__ import annotations

from typing import List, Tuple

__all__ = ["Arguments", "Statement"]

Arguments = List[object]

# (sql, arguments) as handed to the database driver.
Statement = Tuple[str, Arguments]
