"""tabledoc: typed tables persisted in a single JSON document."""

from .core import (
    Config,
    Entity,
    Lookup,
    LookupStatus,
    MultipleMatchesError,
    OperationCancelledError,
    StoreUnavailableError,
    TableConfigurationError,
    TableDocError,
    ValidationError,
)
from .store import DocumentStore, Repository

__version__ = "1.0.0"

__all__ = [
    "Config",
    "DocumentStore",
    "Entity",
    "Lookup",
    "LookupStatus",
    "MultipleMatchesError",
    "OperationCancelledError",
    "Repository",
    "StoreUnavailableError",
    "TableConfigurationError",
    "TableDocError",
    "ValidationError",
]
