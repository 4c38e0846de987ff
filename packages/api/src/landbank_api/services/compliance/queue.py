# This project was developed with assistance from AI tools.
"""Due-now queue aggregation.

Fetches properties with their buyers and sent communications in one bulk
read, runs each through the timing resolver, and orders the result most
overdue first. Properties the resolver cannot evaluate are collected in a
separate ``skipped`` channel instead of failing the batch.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from landbank_db import Communication, Property
from landbank_db.enums import CommunicationStatus, PropertyStatus
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...schemas.compliance import BuyerSummary, ComplianceTiming
from .rules import resolve_program
from .timing import CommunicationRecord, PropertySnapshot, compute_compliance_timing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedProperty:
    id: int
    parcel_id: str | None
    reason: str


@dataclass
class DueNowBatch:
    results: list[ComplianceTiming] = field(default_factory=list)
    skipped: list[SkippedProperty] = field(default_factory=list)


def snapshot_from_property(prop: Property) -> PropertySnapshot:
    """Flatten an ORM Property (buyer + communications loaded) for the resolver."""
    buyer = None
    if prop.buyer is not None:
        buyer = BuyerSummary(
            id=prop.buyer.id,
            first_name=prop.buyer.first_name,
            last_name=prop.buyer.last_name,
            email=prop.buyer.email,
        )
    return PropertySnapshot(
        id=prop.id,
        parcel_id=prop.parcel_id,
        address=prop.address,
        program_type=prop.program_type,
        date_sold=prop.date_sold,
        compliance_1st_attempt=prop.compliance_1st_attempt,
        compliance_2nd_attempt=prop.compliance_2nd_attempt,
        last_contact_date=prop.last_contact_date,
        enforcement_level=prop.enforcement_level or 0,
        buyer=buyer,
        buyer_email=(buyer.email if buyer else None) or "",
        communications=tuple(
            CommunicationRecord(action=c.action, status=c.status, sent_at=c.sent_at)
            for c in prop.communications
        ),
    )


def build_due_now_queue(
    snapshots: list[PropertySnapshot],
    today: date,
    *,
    due_only: bool = False,
) -> DueNowBatch:
    """Resolve, filter, and sort a batch of properties.

    Args:
        snapshots: Flattened properties.
        today: Evaluation date.
        due_only: Keep only verdicts with ``is_due_now``.

    Returns:
        DueNowBatch with results sorted by ``days_overdue`` descending
        (stable for ties) and the properties that could not be evaluated.
    """
    batch = DueNowBatch()
    for snapshot in snapshots:
        timing = compute_compliance_timing(snapshot, today)
        if timing.error:
            batch.skipped.append(
                SkippedProperty(
                    id=snapshot.id,
                    parcel_id=snapshot.parcel_id,
                    reason=timing.error_reason or "unknown",
                )
            )
            continue
        if due_only and not timing.is_due_now:
            continue
        batch.results.append(timing)

    batch.results.sort(key=lambda t: t.days_overdue, reverse=True)
    return batch


def _program_filter_value(program: str) -> str:
    """Accept either the stored label or the rule key when filtering."""
    resolved = resolve_program(program)
    return resolved.value if resolved is not None else program


async def fetch_properties_with_sent_communications(
    session: AsyncSession,
    *,
    program: str | None = None,
    exclude_closed: bool = False,
) -> list[Property]:
    """Bulk-load properties with buyer and sent communications, oldest sale first."""
    stmt = (
        select(Property)
        .options(
            selectinload(Property.buyer),
            selectinload(
                Property.communications.and_(Communication.status == CommunicationStatus.SENT)
            ),
        )
        .order_by(Property.date_sold.asc())
    )
    if program:
        stmt = stmt.where(Property.program_type == _program_filter_value(program))
    if exclude_closed:
        stmt = stmt.where(Property.status != PropertyStatus.CLOSED.value)

    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_due_now_queue(
    session: AsyncSession,
    today: date,
    *,
    program: str | None = None,
    due_only: bool = False,
) -> DueNowBatch:
    """Fetch properties and build the due-now queue for ``today``."""
    properties = await fetch_properties_with_sent_communications(session, program=program)
    batch = build_due_now_queue(
        [snapshot_from_property(p) for p in properties],
        today,
        due_only=due_only,
    )

    for skipped in batch.skipped:
        logger.warning(
            "Skipped property %s (parcel %s) in due-now queue: %s",
            skipped.id,
            skipped.parcel_id,
            skipped.reason,
        )
    return batch
