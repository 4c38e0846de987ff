# This project was developed with assistance from AI tools.
"""API test fixtures.

``client`` wires the real app to a mock session and a fixed clock. Tests
configure ``mock_session.execute`` before issuing requests. Dependency
overrides are cleared after every test.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from landbank_db import get_db

from landbank_api.main import app as real_app
from landbank_api.routes.compliance import current_time

from tests.factories import NOW


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def mock_session():
    return AsyncMock()


@pytest.fixture
def client(mock_session):
    """TestClient over the real app with the DB session and clock overridden."""

    async def fake_db():
        yield mock_session

    real_app.dependency_overrides[get_db] = fake_db
    real_app.dependency_overrides[current_time] = lambda: NOW
    return TestClient(real_app)
