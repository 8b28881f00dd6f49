"""Test fakes for testing without a real document file.

This module provides:
- InMemoryDocumentStore: document store fake with controllable commits
- Product, OrderItem: extra entity types for multi-table tests

Example:
    from tests.fakes import InMemoryDocumentStore, encode_table

    store = InMemoryDocumentStore(tables={"customers": encode_table([0, 1, 2])})
    repo = Repository(Customer, store)
"""

from .documents import read_document, write_document
from .entities import OrderItem, Product
from .store import InMemoryDocumentStore, encode_table

__all__ = [
    "InMemoryDocumentStore",
    "encode_table",
    "read_document",
    "write_document",
    "Product",
    "OrderItem",
]
