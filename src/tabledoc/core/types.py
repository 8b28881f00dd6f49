"""Type definitions for tabledoc."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar


@dataclass
class Entity:
    """Base record stored in a table.

    The identifier is assigned by the repository on add. Subclasses must be
    dataclasses and give every additional field a default.
    """

    id: int = 0


E = TypeVar("E", bound=Entity)


class LookupStatus(Enum):
    """Outcome of an identifier lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


@dataclass
class Lookup(Generic[E]):
    """Result of looking an entity up by identifier.

    Keeps absence and uniqueness violations apart: ``CORRUPT`` carries every
    entity sharing the identifier.
    """

    status: LookupStatus
    entity_id: int
    entity: E | None = None
    matches: list[E] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND
