# This project was developed with assistance from AI tools.
"""Dashboard stats, staff digest, and single-property compliance detail."""

import logging
from collections import Counter
from datetime import UTC, date, datetime

from landbank_db import Communication, Property
from landbank_db.enums import CommunicationStatus, ProgramType
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ...schemas.compliance import (
    ComplianceDigest,
    ComplianceTiming,
    DigestItem,
    MilestoneWithStatus,
    PortfolioStats,
    PropertyComplianceDetail,
)
from .dates import days_between
from .milestones import completed_date_for_milestone, generate_milestones, milestone_status
from .queue import build_due_now_queue, fetch_properties_with_sent_communications, snapshot_from_property
from .rules import get_program_rules
from .timing import compute_compliance_timing

logger = logging.getLogger(__name__)

DIGEST_TOP_N = 10
OVERDUE_ALERT_DAYS = 30


def summarize_portfolio(properties: list[Property], *, now: datetime | None = None) -> PortfolioStats:
    """Count properties by program and by persisted enforcement level."""
    if now is None:
        now = datetime.now(UTC)

    by_program: Counter[str] = Counter({p.value: 0 for p in ProgramType})
    levels: Counter[int] = Counter()
    needing_first = needing_second = no_email = completed = 0

    for prop in properties:
        level = prop.enforcement_level or 0
        by_program[prop.program_type or "Unknown"] += 1
        levels[level] += 1
        if level > 0 and not prop.compliance_1st_attempt:
            needing_first += 1
        if level > 0 and prop.compliance_1st_attempt and not prop.compliance_2nd_attempt:
            needing_second += 1
        email = (prop.buyer.email if prop.buyer is not None else None) or ""
        if level > 0 and not email.strip():
            no_email += 1
        if prop.date_proof_of_invest_provided or prop.demo_final_cert_date:
            completed += 1

    return PortfolioStats(
        total=len(properties),
        by_program=dict(by_program),
        compliant=levels[0],
        level_1=levels[1],
        level_2=levels[2],
        level_3=levels[3],
        level_4=levels[4],
        needing_first_attempt=needing_first,
        needing_second_attempt=needing_second,
        no_email=no_email,
        completed=completed,
        computed_at=now,
    )


async def get_portfolio_stats(session: AsyncSession, now: datetime) -> PortfolioStats:
    stmt = select(Property).options(selectinload(Property.buyer))
    result = await session.execute(stmt)
    return summarize_portfolio(list(result.scalars().all()), now=now)


def build_digest(
    timings: list[ComplianceTiming],
    total_active: int,
    now: datetime,
) -> ComplianceDigest:
    """Summarize resolved timings into the daily staff digest.

    ``timings`` must already be sorted most overdue first.
    """
    due_now = [t for t in timings if t.is_due_now]
    overdue = [t for t in timings if t.days_overdue >= OVERDUE_ALERT_DAYS]

    return ComplianceDigest(
        digest_date=now.astimezone(UTC).date(),
        total_active=total_active,
        due_now_count=len(due_now),
        overdue_30_count=len(overdue),
        top_urgent=[
            DigestItem(
                address=t.address,
                program=t.program_label or t.program_type,
                action=t.current_action,
                days_overdue=t.days_overdue,
                buyer_name=t.buyer_name,
            )
            for t in due_now[:DIGEST_TOP_N]
        ],
        computed_at=now,
    )


async def get_compliance_digest(session: AsyncSession, now: datetime) -> ComplianceDigest:
    """Resolve every non-closed property and build the digest."""
    properties = await fetch_properties_with_sent_communications(session, exclude_closed=True)
    batch = build_due_now_queue(
        [snapshot_from_property(p) for p in properties],
        now.astimezone(UTC).date(),
    )
    digest = build_digest(batch.results, total_active=len(properties), now=now)
    logger.info(
        "Compliance digest: %d due now, %d overdue %d+ days, %d active",
        digest.due_now_count,
        digest.overdue_30_count,
        OVERDUE_ALERT_DAYS,
        digest.total_active,
    )
    return digest


def milestones_with_status(
    program_type: ProgramType | str | None,
    date_sold: date | datetime | str | None,
    today: date,
    evidence: Property | None = None,
) -> list[MilestoneWithStatus]:
    """Milestones with their status; ``evidence`` supplies completion dates."""
    results = []
    for m in generate_milestones(program_type, date_sold):
        completed = completed_date_for_milestone(m, evidence) if evidence is not None else None
        results.append(
            MilestoneWithStatus(
                **m.model_dump(),
                status=milestone_status(m, today, completed_on=completed),
                days_overdue=days_between(m.due_date, today),
                completed_date=completed,
            )
        )
    return results


async def get_property_compliance(
    session: AsyncSession,
    property_id: int,
    now: datetime,
) -> PropertyComplianceDetail | None:
    """Timing verdict, milestones, and evidence requirements for one property.

    Returns:
        PropertyComplianceDetail, or None when the property does not exist.
    """
    stmt = (
        select(Property)
        .options(
            selectinload(Property.buyer),
            selectinload(
                Property.communications.and_(Communication.status == CommunicationStatus.SENT)
            ),
        )
        .where(Property.id == property_id)
    )
    result = await session.execute(stmt)
    prop = result.scalar_one_or_none()
    if prop is None:
        return None

    today = now.astimezone(UTC).date()
    rules = get_program_rules(prop.program_type)
    return PropertyComplianceDetail(
        timing=compute_compliance_timing(snapshot_from_property(prop), today),
        milestones=milestones_with_status(prop.program_type, prop.date_sold, today, evidence=prop),
        grace_days=rules.grace_days if rules else None,
        required_uploads=list(rules.required_uploads) if rules else [],
        required_docs=list(rules.required_docs) if rules else [],
        computed_at=now,
    )
