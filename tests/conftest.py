"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tabledoc.core.config import Config
from tabledoc.models import Customer
from tabledoc.store.document import DocumentStore
from tabledoc.store.repository import Repository

from tests.fakes.documents import write_document

SAMPLE_COUNT = 5


@pytest.fixture
def document_path(tmp_path: Path) -> Path:
    """Provide a document holding five customers with ids 0-4."""
    return write_document(
        tmp_path / "database.json",
        {"customers": [{"id": i, "name": f"Customer {i}"} for i in range(SAMPLE_COUNT)]},
    )


@pytest.fixture
def empty_document_path(tmp_path: Path) -> Path:
    """Provide a document with no tables."""
    return write_document(tmp_path / "empty.json", {})


@pytest.fixture
def store(document_path: Path) -> DocumentStore:
    """Provide a DocumentStore over the sample document."""
    document_store = DocumentStore(document_path)
    yield document_store
    document_store.close()


@pytest.fixture
def customer_repo(store: DocumentStore) -> Repository[Customer]:
    """Provide a Customer repository over the sample document."""
    return Repository(Customer, store)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a Config pointing at a fresh document path."""
    cfg = Config()
    cfg.store.path = tmp_path / "data" / "database.json"
    cfg.store.create_if_missing = True
    return cfg
