# This project was developed with assistance from AI tools.
"""Shared test factory functions for building properties and mock sessions.

ORM objects are built transient (never attached to a session), which is
all the compliance engine needs: it only reads attributes and loaded
relationships.
"""

from datetime import UTC, date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from landbank_db import Buyer, Communication, Property
from landbank_db.enums import CommunicationStatus, ComplianceAction

from landbank_api.schemas.compliance import BuyerSummary
from landbank_api.services.compliance.timing import CommunicationRecord, PropertySnapshot

NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)
TODAY = NOW.date()


def days_ago(days: int) -> date:
    """Calendar date ``days`` before TODAY."""
    return TODAY - timedelta(days=days)


def make_buyer(id=10, first_name="Jordan", last_name="Example", email="jordan@example.com"):
    return Buyer(id=id, first_name=first_name, last_name=last_name, email=email)


def make_communication(action=ComplianceAction.ATTEMPT_1, status=CommunicationStatus.SENT, sent_at=None):
    return Communication(
        action=action,
        status=status,
        sent_at=sent_at or NOW - timedelta(days=5),
        channel="email",
    )


def make_property(
    id=1,
    parcel_id=None,
    address="100 Example Pl, Flint, MI 48503",
    program_type="Featured Homes",
    date_sold=None,
    compliance_1st_attempt=None,
    compliance_2nd_attempt=None,
    last_contact_date=None,
    enforcement_level=0,
    status="active",
    buyer="default",
    communications=None,
    **evidence,
):
    """Create a transient Property ORM object with a buyer attached.

    Args:
        buyer: A Buyer, None for no buyer, or "default" for a buyer with email.
        communications: Communication objects; defaults to none.
        **evidence: Milestone evidence columns (insurance_received, percent_complete, ...).
    """
    if buyer == "default":
        buyer = make_buyer()
    return Property(
        id=id,
        parcel_id=parcel_id or f"PARCEL-{id:04d}",
        address=address,
        program_type=program_type,
        date_sold=date_sold,
        compliance_1st_attempt=compliance_1st_attempt,
        compliance_2nd_attempt=compliance_2nd_attempt,
        last_contact_date=last_contact_date,
        enforcement_level=enforcement_level,
        status=status,
        buyer=buyer,
        communications=communications or [],
        **evidence,
    )


def make_snapshot(
    id=1,
    program_type="Featured Homes",
    date_sold=None,
    compliance_1st_attempt=None,
    compliance_2nd_attempt=None,
    last_contact_date=None,
    enforcement_level=0,
    buyer_email="jordan@example.com",
    communications=(),
):
    """Create a PropertySnapshot as the resolver consumes it."""
    return PropertySnapshot(
        id=id,
        parcel_id=f"PARCEL-{id:04d}",
        address=f"{id} Example Pl",
        program_type=program_type,
        date_sold=date_sold,
        compliance_1st_attempt=compliance_1st_attempt,
        compliance_2nd_attempt=compliance_2nd_attempt,
        last_contact_date=last_contact_date,
        enforcement_level=enforcement_level,
        buyer=BuyerSummary(id=10, first_name="Jordan", last_name="Example", email=buyer_email),
        buyer_email=buyer_email,
        communications=tuple(
            c if isinstance(c, CommunicationRecord) else CommunicationRecord(action=c, status="sent")
            for c in communications
        ),
    )


def scalars_result(items):
    """Mock a result consumed via ``.scalars().all()`` / ``.scalar_one_or_none()``."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = list(items)
    result.scalar_one_or_none.return_value = items[0] if items else None
    return result


def count_rows_result(counts: dict[int, int]):
    """Mock the grouped communication-count query (rows with property_id + cnt)."""
    rows = []
    for property_id, cnt in counts.items():
        row = MagicMock()
        row.property_id = property_id
        row.cnt = cnt
        rows.append(row)
    result = MagicMock()
    result.__iter__ = MagicMock(return_value=iter(rows))
    return result


def make_mock_session(*results) -> AsyncMock:
    """AsyncMock session whose ``execute`` returns ``results`` in order."""
    session = AsyncMock()
    session.execute = AsyncMock(side_effect=list(results))
    return session
