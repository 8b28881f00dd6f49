"""Tests for ServiceContainer."""

from pathlib import Path

import pytest

from tabledoc.core.config import Config
from tabledoc.core.exceptions import StoreUnavailableError
from tabledoc.models import Customer
from tabledoc.services import EntityService, ServiceContainer

from tests.fakes import Product, read_document


class TestServiceContainer:
    """Tests for repository and service wiring."""

    def test_repositories_share_store(self, config: Config):
        container = ServiceContainer(config)

        customers = container.repository(Customer)
        products = container.repository(Product)

        assert customers.store is container.store
        assert products.store is container.store

    def test_repository_cached_per_type(self, config: Config):
        container = ServiceContainer(config)

        assert container.repository(Customer) is container.repository(Customer)
        assert container.repository(Customer) is not container.repository(Product)

    def test_customers_service(self, config: Config):
        container = ServiceContainer(config)

        service = container.customers

        assert isinstance(service, EntityService)
        assert service is container.service(Customer)
        assert service.repository is container.repository(Customer)

    @pytest.mark.asyncio
    async def test_context_manager_loads_and_closes(self, config: Config):
        async with ServiceContainer(config) as services:
            assert services.store.loaded
            await services.customers.add(Customer(name="Alice"))

        assert services.store.closed
        assert read_document(config.store.path) == {"customers": [{"id": 1, "name": "Alice"}]}

    @pytest.mark.asyncio
    async def test_connect_missing_document_raises(self, tmp_path: Path):
        config = Config()
        config.store.path = tmp_path / "missing.json"

        with pytest.raises(StoreUnavailableError):
            async with ServiceContainer(config):
                pass
