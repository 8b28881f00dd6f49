"""Custom exceptions for tabledoc."""


class TableDocError(Exception):
    """Base exception for all tabledoc errors."""

    pass


class StoreUnavailableError(TableDocError):
    """Backing document cannot be opened exclusively or parsed."""

    pass


class TableConfigurationError(TableDocError):
    """A table could not be registered in the document.

    Raised when an empty table entry cannot be added because the name is
    already taken. This is not retryable.
    """

    pass


class MultipleMatchesError(TableDocError):
    """More than one entity shares an identifier that must be unique."""

    def __init__(self, table: str, entity_id: int, count: int):
        """Initialize exception with the offending table and identifier.

        Args:
            table: Name of the table holding the duplicates.
            entity_id: Identifier shared by several entities.
            count: Number of entities sharing the identifier.
        """
        self.table = table
        self.entity_id = entity_id
        self.count = count
        super().__init__(f"{count} entities in table '{table}' share id {entity_id}")


class OperationCancelledError(TableDocError):
    """Operation was abandoned because cancellation was requested."""

    pass


class ValidationError(TableDocError):
    """Entity failed validation before being persisted."""

    pass
