"""Document store and typed repositories.

- DocumentStore: owns the single JSON document holding every table
- Repository: typed, identifier-addressable view of one table

Example:
    from tabledoc.store import DocumentStore, Repository

    async with DocumentStore(Path("db.json")) as store:
        customers = Repository(Customer, store)
        await customers.add(Customer(name="Alice"))
"""

from .document import DocumentStore
from .naming import pluralize, table_name_for
from .repository import ID_SEED, CacheState, Repository

__all__ = [
    "DocumentStore",
    "Repository",
    "CacheState",
    "ID_SEED",
    "pluralize",
    "table_name_for",
]
