"""Service layer for tabledoc.

Example usage:

    from tabledoc.services import ServiceContainer

    async with ServiceContainer(config) as services:
        customers = await services.customers.get_all()
"""

from .container import ServiceContainer
from .entity import EntityService

__all__ = [
    "ServiceContainer",
    "EntityService",
]
