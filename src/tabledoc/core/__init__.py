"""Core configuration, errors and types for tabledoc."""

from .config import Config, LoggingConfig, StoreConfig
from .exceptions import (
    MultipleMatchesError,
    OperationCancelledError,
    StoreUnavailableError,
    TableConfigurationError,
    TableDocError,
    ValidationError,
)
from .types import Entity, Lookup, LookupStatus

__all__ = [
    "Config",
    "StoreConfig",
    "LoggingConfig",
    "TableDocError",
    "StoreUnavailableError",
    "TableConfigurationError",
    "MultipleMatchesError",
    "OperationCancelledError",
    "ValidationError",
    "Entity",
    "Lookup",
    "LookupStatus",
]
