import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.stores import MemoryTodoStore

from fakes import FakeCollection


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    return MemoryTodoStore()


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store, serve_client=False)) as test_client:
        yield test_client
