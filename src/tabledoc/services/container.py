"""Service container for dependency injection and lifecycle management."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..core.config import Config
from ..core.types import E
from ..models import Customer
from ..store.document import DocumentStore
from ..store.repository import Repository
from .entity import EntityService


class ServiceContainer:
    """Manages the shared document store and per-type repositories.

    One DocumentStore is built from the configuration and handed to every
    repository. Repositories and services are created lazily, once per
    entity type.

    Usage as context manager (recommended):

        async with ServiceContainer(config) as services:
            customer = Customer(name="Alice")
            await services.customers.add(customer)

    Usage with manual lifecycle:

        services = ServiceContainer(config)
        await services.connect()
        try:
            # use services
        finally:
            await services.close()

    Attributes:
        config: Application configuration.
        store: Document store shared by all repositories.
    """

    def __init__(self, config: Config):
        """Initialize container with configuration.

        Args:
            config: Application configuration.
        """
        self.config = config
        self.store = DocumentStore(
            config.store.path, create_if_missing=config.store.create_if_missing
        )
        self._repositories: dict[type, Repository[Any]] = {}
        self._services: dict[type, EntityService[Any]] = {}

    async def connect(self) -> None:
        """Load the document.

        Raises:
            StoreUnavailableError: If the document cannot be opened or parsed.
        """
        await self.store.load()
        logger.debug(f"ServiceContainer connected to {self.store.path}")

    async def close(self) -> None:
        """Release the document store."""
        self.store.close()
        logger.debug("ServiceContainer closed")

    async def __aenter__(self) -> "ServiceContainer":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def repository(self, entity_type: type[E]) -> Repository[E]:
        """Get or create the repository for an entity type."""
        if entity_type not in self._repositories:
            self._repositories[entity_type] = Repository(entity_type, self.store)
        return self._repositories[entity_type]

    def service(self, entity_type: type[E]) -> EntityService[E]:
        """Get or create the service for an entity type."""
        if entity_type not in self._services:
            self._services[entity_type] = EntityService.from_container(self, entity_type)
        return self._services[entity_type]

    @property
    def customers(self) -> EntityService[Customer]:
        """Get or create the Customer service."""
        return self.service(Customer)
