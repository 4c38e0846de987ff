# This project was developed with assistance from AI tools.
"""Health and root endpoint tests."""

from unittest.mock import AsyncMock


def test_health_returns_ok(client):
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ready_when_store_reachable(client, mock_session):
    mock_session.execute = AsyncMock()
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_ready_returns_503_when_store_down(client, mock_session):
    mock_session.execute = AsyncMock(side_effect=ConnectionError("refused"))
    response = client.get("/health/ready")
    assert response.status_code == 503
    assert response.json()["detail"] == "Database unavailable"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Land Bank Compliance API"
