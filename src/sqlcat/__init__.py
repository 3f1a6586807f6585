"""Public package API."""

from importlib import metadata

from .core import Arguments, Builder, Statement, parse_order, parse_orders, with_condition

__all__ = [
    "Arguments",
    "Builder",
    "Statement",
    "parse_order",
    "parse_orders",
    "with_condition",
]

try:
    __version__ = metadata.version("sqlcat")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
