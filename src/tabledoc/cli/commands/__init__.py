"""Command implementations for tabledoc CLI."""

from .customers import add_customer_arguments, handle_customers
from .tables import handle_tables

__all__ = [
    "add_customer_arguments",
    "handle_customers",
    "handle_tables",
]
