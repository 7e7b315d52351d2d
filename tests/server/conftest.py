"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import _history, app


@pytest.fixture(autouse=True)
def empty_history() -> Iterator[None]:
    _history.clear()
    yield
    _history.clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
