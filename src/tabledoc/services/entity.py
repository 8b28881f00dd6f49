"""Entity service over a typed repository."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Generic

from loguru import logger

from ..core.types import E
from ..store.repository import Repository

if TYPE_CHECKING:
    from .container import ServiceContainer


class EntityService(Generic[E]):
    """Service exposing the repository operations for one entity type.

    Entities that define ``validate()`` are checked before ``add`` and
    ``update`` reach the repository.
    """

    def __init__(self, repository: Repository[E]):
        """Initialize EntityService.

        Args:
            repository: Repository for the entity type.
        """
        self._repository = repository

    @classmethod
    def from_container(
        cls, container: "ServiceContainer", entity_type: type[E]
    ) -> "EntityService[E]":
        """Create EntityService from a ServiceContainer.

        Args:
            container: Service container with the shared document store.
            entity_type: Entity type served.

        Returns:
            EntityService instance.
        """
        return cls(container.repository(entity_type))

    @property
    def repository(self) -> Repository[E]:
        return self._repository

    async def get_all(self, cancel: asyncio.Event | None = None) -> list[E]:
        return await self._repository.get_all(cancel)

    async def get_by_id(self, entity_id: int, cancel: asyncio.Event | None = None) -> E | None:
        return await self._repository.get_by_id(entity_id, cancel)

    async def add(self, entity: E, cancel: asyncio.Event | None = None) -> bool:
        """Validate and add an entity.

        Raises:
            ValidationError: If the entity fails validation.
        """
        self._validate(entity)
        return await self._repository.add(entity, cancel)

    async def update(self, entity: E, cancel: asyncio.Event | None = None) -> bool:
        """Validate and replace an entity.

        Raises:
            ValidationError: If the entity fails validation.
        """
        self._validate(entity)
        return await self._repository.update(entity, cancel)

    async def remove(self, entity_id: int, cancel: asyncio.Event | None = None) -> bool:
        return await self._repository.remove(entity_id, cancel)

    def _validate(self, entity: E) -> None:
        validate = getattr(entity, "validate", None)
        if validate is None:
            return
        try:
            validate()
        except Exception as e:
            logger.warning(f"Rejected {type(entity).__name__}: {e}")
            raise
