import pytest
from fastapi.testclient import TestClient

from src.server.app import create_app
from src.todo import TodoRepository
from src.todo_client import TodoClient


@pytest.fixture
def repo():
    """Fresh in-memory store per test."""
    return TodoRepository()


@pytest.fixture
def api(repo):
    """TestClient bound to an app serving ``repo``."""
    return TestClient(create_app(repository=repo))


@pytest.fixture
def todo_client(api):
    """TodoClient that sends its requests through the TestClient."""
    return TodoClient(api_url="http://testserver", session=api)
