import pytest
from fastapi.testclient import TestClient

from contractor_registry.app.core.storage import MemorySlotStorage
from contractor_registry.app.main import app
from contractor_registry.app.services.contractor_service import ContractorStore, get_contractor_store


@pytest.fixture
def storage():
    return MemorySlotStorage("contractors")


@pytest.fixture
def store(storage):
    """A store over fresh memory storage; the first access seeds it."""
    return ContractorStore(storage)


@pytest.fixture
def empty_store():
    return ContractorStore(MemorySlotStorage("contractors", initial="[]"))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_contractor_store] = lambda: store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
