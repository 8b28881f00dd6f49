"""Typed repository over one table of the document."""

from __future__ import annotations

import asyncio
import dataclasses
from enum import Enum
from typing import Callable, Generic

from loguru import logger

from ..core.cancellation import raise_if_cancelled
from ..core.exceptions import MultipleMatchesError, StoreUnavailableError
from ..core.types import E, Lookup, LookupStatus
from .document import DocumentStore
from .naming import table_name_for
from .serialization import decode_entities, encode_entities

# Identifier given to the first entity added to an empty table
ID_SEED = 1


class CacheState(Enum):
    """Load state of a repository's table cache."""

    UNLOADED = "unloaded"
    LOADED = "loaded"


class Repository(Generic[E]):
    """Repository for one entity type, backed by one table of the document.

    The table is read from the store on first use and kept in memory for the
    lifetime of the repository. Reads are served from that cache. Mutations
    build a candidate table, commit it through the store and only touch the
    cache when the commit succeeds, so a failed commit leaves the repository
    exactly as it was.

    Loading and every mutation run inside ``store.exclusive()``, which makes
    mutations linearizable across all repositories sharing the store.

    Example:
        store = DocumentStore(Path("db.json"))
        customers = Repository(Customer, store)

        customer = Customer(name="Alice")
        if await customers.add(customer):
            print(customer.id)
    """

    def __init__(self, entity_type: type[E], store: DocumentStore):
        """Initialize with the entity type and shared document store.

        Args:
            entity_type: Dataclass type stored in the table.
            store: Document store shared by all repositories.
        """
        self.entity_type = entity_type
        self.store = store
        self._table_name = table_name_for(entity_type)
        self._state = CacheState.UNLOADED
        self._entities: list[E] = []

    @property
    def table_name(self) -> str:
        """Name of the backing table."""
        return self._table_name

    @property
    def state(self) -> CacheState:
        """Whether the table has been loaded into memory."""
        return self._state

    async def get_all(self, cancel: asyncio.Event | None = None) -> list[E]:
        """Get all entities ordered by ascending identifier.

        Args:
            cancel: Optional cancellation event.

        Returns:
            New list of the cached entities.

        Raises:
            StoreUnavailableError: If the table cannot be loaded.
        """
        entities = await self._cached(cancel)
        return sorted(entities, key=lambda e: e.id)

    async def find(self, entity_id: int, cancel: asyncio.Event | None = None) -> Lookup[E]:
        """Look an entity up by identifier without raising on duplicates.

        Args:
            entity_id: Identifier to look for.
            cancel: Optional cancellation event.

        Returns:
            Lookup that is FOUND, NOT_FOUND, or CORRUPT when several
            entities share the identifier.
        """
        entities = await self._cached(cancel)
        matches = [e for e in entities if e.id == entity_id]

        if not matches:
            return Lookup(LookupStatus.NOT_FOUND, entity_id)
        if len(matches) > 1:
            logger.warning(
                f"Duplicate identifiers: table={self._table_name!r}, id={entity_id}, count={len(matches)}"
            )
            return Lookup(LookupStatus.CORRUPT, entity_id, matches=matches)
        return Lookup(LookupStatus.FOUND, entity_id, entity=matches[0], matches=matches)

    async def get_by_id(self, entity_id: int, cancel: asyncio.Event | None = None) -> E | None:
        """Get entity by identifier.

        Args:
            entity_id: Identifier to look for.
            cancel: Optional cancellation event.

        Returns:
            The matching entity, or None if there is none.

        Raises:
            MultipleMatchesError: If more than one entity has this identifier.
        """
        lookup = await self.find(entity_id, cancel)
        if lookup.status is LookupStatus.CORRUPT:
            raise MultipleMatchesError(self._table_name, entity_id, len(lookup.matches))
        return lookup.entity

    async def add(self, entity: E, cancel: asyncio.Event | None = None) -> bool:
        """Add an entity under the next free identifier.

        The identifier is one more than the largest in the table, or
        ``ID_SEED`` for an empty table. It is written to ``entity.id`` only
        once the commit succeeded. The cache keeps its own copy.

        Args:
            entity: Entity to add; its current id is ignored.
            cancel: Optional cancellation event.

        Returns:
            True if the entity was persisted, False if the commit failed.
        """
        async with self.store.exclusive():
            entities = await self._load(cancel)
            new_id = max((e.id for e in entities), default=ID_SEED - 1) + 1
            stored = dataclasses.replace(entity, id=new_id)

            def apply() -> None:
                entity.id = new_id
                entities.append(stored)

            committed = await self._commit([*entities, stored], apply, cancel)

        if committed:
            logger.info(f"Entity added: table={self._table_name!r}, id={new_id}")
        return committed

    async def update(self, entity: E, cancel: asyncio.Event | None = None) -> bool:
        """Replace the entity that has the same identifier.

        Args:
            entity: Entity carrying the identifier of the record to replace;
                a copy of it is stored.
            cancel: Optional cancellation event.

        Returns:
            True if replaced and persisted, False if not found or the
            commit failed.
        """
        async with self.store.exclusive():
            entities = await self._load(cancel)
            index = self._index_of(entities, entity.id)
            if index == -1:
                logger.debug(f"Update skipped, not found: table={self._table_name!r}, id={entity.id}")
                return False

            stored = dataclasses.replace(entity)
            candidate = list(entities)
            candidate[index] = stored

            def apply() -> None:
                entities[index] = stored

            committed = await self._commit(candidate, apply, cancel)

        if committed:
            logger.info(f"Entity updated: table={self._table_name!r}, id={entity.id}")
        return committed

    async def remove(self, entity_id: int, cancel: asyncio.Event | None = None) -> bool:
        """Remove the entity with the given identifier.

        Args:
            entity_id: Identifier of the entity to remove.
            cancel: Optional cancellation event.

        Returns:
            True if removed and persisted, False if not found or the
            commit failed.
        """
        async with self.store.exclusive():
            entities = await self._load(cancel)
            index = self._index_of(entities, entity_id)
            if index == -1:
                logger.debug(f"Remove skipped, not found: table={self._table_name!r}, id={entity_id}")
                return False

            candidate = entities[:index] + entities[index + 1 :]

            def apply() -> None:
                del entities[index]

            committed = await self._commit(candidate, apply, cancel)

        if committed:
            logger.info(f"Entity removed: table={self._table_name!r}, id={entity_id}")
        return committed

    async def _cached(self, cancel: asyncio.Event | None) -> list[E]:
        raise_if_cancelled(cancel, f"Read of table '{self._table_name}'")
        if self._state is CacheState.LOADED:
            return self._entities
        async with self.store.exclusive():
            return await self._load(cancel)

    async def _load(self, cancel: asyncio.Event | None) -> list[E]:
        """Return the live cache, reading the table on first use.

        Callers must hold ``store.exclusive()``.
        """
        if self._state is CacheState.LOADED:
            return self._entities

        tables = await self.store.load(cancel)
        raw = tables.get(self._table_name)

        if raw is None:
            self.store.add_table(self._table_name)
            logger.info(f"Table created on first use: {self._table_name!r}")
            entities: list[E] = []
        else:
            try:
                entities = decode_entities(self.entity_type, raw)
            except (TypeError, ValueError) as e:
                raise StoreUnavailableError(
                    f"Table '{self._table_name}' in {self.store.path} is not a list of records: {e}"
                ) from e

        self._entities = entities
        self._state = CacheState.LOADED
        logger.debug(f"Table loaded: table={self._table_name!r}, entities={len(entities)}")
        return entities

    async def _commit(
        self, candidate: list[E], apply: Callable[[], None], cancel: asyncio.Event | None
    ) -> bool:
        """Persist ``candidate`` as the whole table and run ``apply`` on success."""
        raise_if_cancelled(cancel, f"Commit of table '{self._table_name}'")

        try:
            raw = encode_entities(candidate)
        except (TypeError, ValueError) as e:
            logger.warning(f"Cannot serialize table {self._table_name!r}: {e}")
            return False

        pending = asyncio.ensure_future(self.store.commit(self._table_name, raw))
        try:
            committed = await asyncio.shield(pending)
        except asyncio.CancelledError:
            # The write is already under way; keep the cache in line with it
            if await pending:
                apply()
            raise

        if committed:
            apply()
        else:
            logger.warning(f"Commit failed, cache unchanged: table={self._table_name!r}")
        return committed

    @staticmethod
    def _index_of(entities: list[E], entity_id: int) -> int:
        for index, entity in enumerate(entities):
            if entity.id == entity_id:
                return index
        return -1
