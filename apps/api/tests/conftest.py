"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from greenledger_api.main import app
from greenledger_api.schemas import CompanyCreate
from greenledger_api.services.company import CompanyService
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store


@pytest.fixture
def store(tmp_path) -> JSONCollectionStore:
    """Create a collection store in a temporary data directory."""
    store = JSONCollectionStore(tmp_path / "data")
    store.initialize()
    return store


@pytest.fixture
def client(store: JSONCollectionStore):
    """Test client wired to the temporary store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def company(store: JSONCollectionStore) -> dict:
    """Register a test company."""
    return CompanyService(store).create_company(
        CompanyCreate(name="Test Mills", industry="Textiles", city="Lahore")
    )
