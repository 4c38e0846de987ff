# This project was developed with assistance from AI tools.
"""HTTP tests for /api/compliance."""

from unittest.mock import AsyncMock

import pytest

from landbank_db.enums import ComplianceAction

from tests.factories import (
    count_rows_result,
    days_ago,
    make_buyer,
    make_communication,
    make_property,
    scalars_result,
)

CACHE_CONTROL = "s-maxage=300, stale-while-revalidate=600"


def _queue_properties():
    return [
        make_property(id=1, date_sold=days_ago(35)),
        make_property(id=2, date_sold=days_ago(70)),
        make_property(id=3, date_sold=days_ago(31)),
        make_property(
            id=4,
            date_sold=days_ago(50),
            communications=[make_communication(ComplianceAction.ATTEMPT_1)],
        ),
    ]


class TestDueNowQueue:
    def test_default_type_returns_queue(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result(_queue_properties()))

        response = client.get("/api/compliance")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == len(body["queue"]) == 4
        assert body["computedAt"].startswith("2026-03-01T12:00:00")
        assert [item["id"] for item in body["queue"]] == [2, 1, 3, 4]
        first = body["queue"][0]
        assert first["daysOverdue"] == 40
        assert first["currentAction"] == "ATTEMPT_1"
        assert first["isDueNow"] is True
        assert first["buyer"]["email"] == "jordan@example.com"

    def test_edge_cache_and_cors_headers(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result([]))

        response = client.get("/api/compliance?type=due-now")

        assert response.headers["cache-control"] == CACHE_CONTROL
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"

    def test_due_only_filters(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result(_queue_properties()))

        body = client.get("/api/compliance?dueOnly=true").json()

        assert body["count"] == 2
        assert all(item["isDueNow"] for item in body["queue"])

    @pytest.mark.parametrize("value", ["TRUE", "True", "1", "yes", "maybe", "false"])
    def test_due_only_filters_only_on_exact_true(self, client, mock_session, value):
        mock_session.execute = AsyncMock(return_value=scalars_result(_queue_properties()))

        response = client.get(f"/api/compliance?dueOnly={value}")

        assert response.status_code == 200
        assert response.json()["count"] == 4

    def test_unknown_type_falls_back_to_queue(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result([]))

        body = client.get("/api/compliance?type=bogus").json()

        assert body == {"count": 0, "computedAt": body["computedAt"], "queue": []}

    def test_store_failure_returns_500(self, client, mock_session):
        mock_session.execute = AsyncMock(side_effect=RuntimeError("connection refused"))

        response = client.get("/api/compliance")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "connection refused"}
        assert "cache-control" not in response.headers


class TestExceptionsList:
    def test_exceptions_type(self, client, mock_session):
        properties = [
            make_property(id=6, enforcement_level=2, buyer=make_buyer(email="")),
            make_property(id=7, last_contact_date=days_ago(10)),
        ]
        mock_session.execute = AsyncMock(
            side_effect=[scalars_result(properties), count_rows_result({6: 1})],
        )

        response = client.get("/api/compliance?type=exceptions")

        assert response.status_code == 200
        assert response.headers["cache-control"] == CACHE_CONTROL
        body = response.json()
        assert body["count"] == 1
        assert body["exceptions"][0]["id"] == 6
        assert [i["type"] for i in body["exceptions"][0]["issues"]] == [
            "missing_email",
            "missing_1st_attempt",
        ]


class TestMethods:
    def test_options_preflight(self, client):
        response = client.options("/api/compliance")
        assert response.status_code == 200
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"

    def test_post_not_allowed(self, client):
        response = client.post("/api/compliance", json={})
        assert response.status_code == 405
        assert response.json()["status"] == 405


class TestReportingEndpoints:
    def test_stats(self, client, mock_session):
        mock_session.execute = AsyncMock(
            return_value=scalars_result([make_property(id=1, enforcement_level=1)]),
        )

        response = client.get("/api/compliance/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert body["level1"] == 1
        assert body["needingFirstAttempt"] == 1
        assert response.headers["cache-control"] == CACHE_CONTROL

    def test_digest(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result(_queue_properties()))

        body = client.get("/api/compliance/digest").json()

        assert body["date"] == "2026-03-01"
        assert body["dueNowCount"] == 2
        assert body["topUrgent"][0]["daysOverdue"] == 40

    def test_milestone_preview_unknown_program(self, client):
        response = client.get("/api/compliance/milestones?program=NotAProgram&dateSold=2024-01-01")

        assert response.status_code == 200
        body = response.json()
        assert body["programLabel"] is None
        assert len(body["milestones"]) == 1
        assert body["milestones"][0]["dueDate"] == "2024-01-31"
        assert body["milestones"][0]["status"] == "overdue"

    def test_milestone_preview_requires_program(self, client):
        assert client.get("/api/compliance/milestones").status_code == 422

    def test_property_detail(self, client, mock_session):
        prop = make_property(id=9, program_type="VIP", date_sold=days_ago(100))
        mock_session.execute = AsyncMock(return_value=scalars_result([prop]))

        response = client.get("/api/compliance/properties/9")

        assert response.status_code == 200
        body = response.json()
        assert body["timing"]["programLabel"] == "VIP Spotlight"
        assert body["timing"]["daysOverdue"] == 10
        assert body["graceDays"] == 5
        assert body["milestones"][0]["key"] == "RC15"

    def test_property_detail_reports_completed_milestones(self, client, mock_session):
        prop = make_property(id=12, date_sold=days_ago(200), insurance_received=True)
        mock_session.execute = AsyncMock(return_value=scalars_result([prop]))

        milestones = client.get("/api/compliance/properties/12").json()["milestones"]

        assert milestones[0]["key"] == "insurance"
        assert milestones[0]["status"] == "completed"
        assert milestones[0]["completedDate"] == days_ago(170).isoformat()
        assert milestones[1]["status"] == "overdue"
        assert milestones[1]["completedDate"] is None

    def test_property_not_found(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=scalars_result([]))

        response = client.get("/api/compliance/properties/404")

        assert response.status_code == 404
        body = response.json()
        assert body["detail"] == "Property not found"
        assert body["instance"] == "/api/compliance/properties/404"
