# This project was developed with assistance from AI tools.
"""Data-quality exception detection.

Flags non-closed properties whose records are incomplete or stale,
independent of where they sit in the outreach schedule. Each check runs
on its own, so one property can collect several issues.
"""

import logging
from datetime import date

from landbank_db import Communication, Property
from landbank_db.enums import PropertyStatus
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...schemas.compliance import ExceptionIssue, ExceptionType, PropertyException
from .dates import days_between, to_date

logger = logging.getLogger(__name__)

STALE_CONTACT_DAYS = 60


def detect_issues(prop: Property, communication_count: int, today: date) -> list[ExceptionIssue]:
    """Run every data-quality check against one property, in a fixed order."""
    issues: list[ExceptionIssue] = []
    level = prop.enforcement_level or 0
    email = (prop.buyer.email if prop.buyer is not None else None) or ""

    if not email.strip():
        issues.append(ExceptionIssue(type=ExceptionType.MISSING_EMAIL, message="No buyer email on file"))

    if level > 0 and not prop.compliance_1st_attempt:
        issues.append(
            ExceptionIssue(
                type=ExceptionType.MISSING_1ST_ATTEMPT,
                message="Enforcement active but no 1st attempt recorded",
            )
        )

    if prop.compliance_1st_attempt and not prop.compliance_2nd_attempt and level >= 2:
        issues.append(
            ExceptionIssue(
                type=ExceptionType.MISSING_2ND_ATTEMPT,
                message="Level 2+ but no 2nd attempt recorded",
            )
        )

    if level > 0 and communication_count == 0:
        issues.append(
            ExceptionIssue(
                type=ExceptionType.NO_COMMUNICATIONS,
                message="Active enforcement with no communications logged",
            )
        )

    last_contact = to_date(prop.last_contact_date)
    if last_contact is not None:
        days_since_contact = days_between(last_contact, today)
        if days_since_contact > STALE_CONTACT_DAYS:
            issues.append(
                ExceptionIssue(
                    type=ExceptionType.STALE_CONTACT,
                    message=f"Last contact was {days_since_contact} days ago",
                )
            )

    return issues


def build_exceptions(
    properties: list[Property],
    communication_counts: dict[int, int],
    today: date,
) -> list[PropertyException]:
    """Collect properties with at least one issue, most issues first."""
    exceptions: list[PropertyException] = []
    for prop in properties:
        issues = detect_issues(prop, communication_counts.get(prop.id, 0), today)
        if not issues:
            continue
        buyer = prop.buyer
        exceptions.append(
            PropertyException(
                id=prop.id,
                parcel_id=prop.parcel_id,
                address=prop.address,
                buyer_name=buyer.full_name if buyer is not None else "",
                buyer_email=(buyer.email if buyer else None) or "",
                program_type=prop.program_type,
                enforcement_level=prop.enforcement_level or 0,
                issues=issues,
            )
        )

    exceptions.sort(key=lambda e: len(e.issues), reverse=True)
    return exceptions


async def get_exceptions(session: AsyncSession, today: date) -> list[PropertyException]:
    """Fetch non-closed properties and return their data-quality exceptions."""
    stmt = (
        select(Property)
        .options(selectinload(Property.buyer))
        .where(Property.status != PropertyStatus.CLOSED.value)
    )
    result = await session.execute(stmt)
    properties = list(result.scalars().all())
    if not properties:
        return []

    counts = await _batch_communication_counts(session, [p.id for p in properties])
    exceptions = build_exceptions(properties, counts, today)
    logger.debug("Checked %d open properties, %d flagged", len(properties), len(exceptions))
    return exceptions


async def _batch_communication_counts(
    session: AsyncSession,
    property_ids: list[int],
) -> dict[int, int]:
    """Return count of logged communications (any status) per property."""
    stmt = (
        select(
            Communication.property_id,
            func.count().label("cnt"),
        )
        .where(Communication.property_id.in_(property_ids))
        .group_by(Communication.property_id)
    )
    result = await session.execute(stmt)
    return {row.property_id: row.cnt for row in result}
