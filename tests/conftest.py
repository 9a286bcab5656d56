import pytest
from fastapi.testclient import TestClient

from main import app, get_store
from store import MockStore


@pytest.fixture
def store():
    return MockStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
