from .builder import Builder, with_condition
from .orders import parse_order, parse_orders
from .types import Arguments, Statement

__all__ = [
    "Arguments",
    "Builder",
    "Statement",
    "parse_order",
    "parse_orders",
    "with_condition",
]
