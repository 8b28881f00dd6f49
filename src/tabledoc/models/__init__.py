"""Entity types stored by tabledoc."""

from .customer import MAX_NAME_LENGTH, Customer

__all__ = ["Customer", "MAX_NAME_LENGTH"]
