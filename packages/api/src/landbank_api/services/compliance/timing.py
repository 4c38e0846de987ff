# This project was developed with assistance from AI tools.
"""Compliance timing resolver.

Combines a property's program rules, sale date, recorded attempts and sent
communications with the evaluation date into a single verdict: which
outreach step is pending, when it was due, how overdue it is, and whether
staff should act today.

The resolver never raises for bad records. A missing or unparsable sale
date yields a verdict with ``error=True`` so batch callers can skip it.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from landbank_db.enums import CommunicationStatus, ComplianceAction

from ...schemas.compliance import (
    NOT_DUE_YET,
    BuyerSummary,
    CommunicationSummary,
    ComplianceTiming,
)
from .dates import days_between, to_date
from .enforcement import calculate_enforcement_level, calculate_penalty
from .rules import ProgramRules, ScheduleStep, get_program_rules

logger = logging.getLogger(__name__)

_ACTION_ORDER = {action: i for i, action in enumerate(ComplianceAction)}


@dataclass(frozen=True)
class CommunicationRecord:
    action: ComplianceAction | str | None
    status: CommunicationStatus | str
    sent_at: datetime | None = None


@dataclass(frozen=True)
class PropertySnapshot:
    """Flattened, read-only view of a property as the resolver consumes it."""

    id: int
    parcel_id: str | None
    address: str | None
    program_type: str | None
    date_sold: date | datetime | str | None
    compliance_1st_attempt: date | datetime | str | None = None
    compliance_2nd_attempt: date | datetime | str | None = None
    last_contact_date: date | datetime | str | None = None
    enforcement_level: int = 0
    buyer: BuyerSummary | None = None
    buyer_email: str = ""
    communications: tuple[CommunicationRecord, ...] = field(default_factory=tuple)

    @property
    def buyer_name(self) -> str:
        if self.buyer is None:
            return ""
        return f"{self.buyer.first_name or ''} {self.buyer.last_name or ''}".strip()


def _coerce_action(value: ComplianceAction | str | None) -> ComplianceAction | None:
    if value is None or isinstance(value, ComplianceAction):
        return value
    try:
        return ComplianceAction(value)
    except ValueError:
        return None


def _is_sent(status: CommunicationStatus | str) -> bool:
    return status == CommunicationStatus.SENT or status == CommunicationStatus.SENT.value


def completed_actions(snapshot: PropertySnapshot) -> list[ComplianceAction]:
    """Actions evidenced by attempt dates or by sent communications, in escalation order."""
    done: set[ComplianceAction] = set()
    if to_date(snapshot.compliance_1st_attempt) is not None:
        done.add(ComplianceAction.ATTEMPT_1)
    if to_date(snapshot.compliance_2nd_attempt) is not None:
        done.add(ComplianceAction.ATTEMPT_2)
    for comm in snapshot.communications:
        action = _coerce_action(comm.action)
        if action is not None and _is_sent(comm.status):
            done.add(action)
    return sorted(done, key=_ACTION_ORDER.__getitem__)


def _base_fields(snapshot: PropertySnapshot) -> dict:
    """Property fields echoed on every verdict."""
    return {
        "id": snapshot.id,
        "parcel_id": snapshot.parcel_id,
        "address": snapshot.address,
        "program_type": snapshot.program_type,
        "date_sold": to_date(snapshot.date_sold),
        "compliance_1st_attempt": to_date(snapshot.compliance_1st_attempt),
        "compliance_2nd_attempt": to_date(snapshot.compliance_2nd_attempt),
        "last_contact_date": to_date(snapshot.last_contact_date),
        "enforcement_level": snapshot.enforcement_level or 0,
        "buyer": snapshot.buyer,
        "buyer_name": snapshot.buyer_name,
        "buyer_email": snapshot.buyer_email or "",
        "communications": [
            CommunicationSummary(action=_coerce_action(c.action), status=c.status, sent_at=c.sent_at)
            for c in snapshot.communications
        ],
    }


def _latest_reached_step(rules: ProgramRules, days_since_close: int) -> ScheduleStep | None:
    reached = [step for step in rules.schedule if step.day <= days_since_close]
    return reached[-1] if reached else None


def compute_compliance_timing(snapshot: PropertySnapshot, today: date) -> ComplianceTiming:
    """Resolve the timing verdict for one property.

    The pending step is the first schedule step whose action has not been
    completed. ``days_overdue`` counts whole days from that step's due date
    to ``today`` and is negative while the step is still upcoming.
    ``is_due_now`` only turns true once the program's grace days have
    passed.

    Args:
        snapshot: Flattened property record.
        today: Evaluation date, supplied by the caller.

    Returns:
        ComplianceTiming verdict; ``error=True`` when the sale date is
        missing or unparsable.
    """
    fields = _base_fields(snapshot)

    sold = fields["date_sold"]
    if sold is None:
        reason = "missing_date_sold" if snapshot.date_sold in (None, "") else "invalid_date_sold"
        return ComplianceTiming(**fields, error=True, error_reason=reason)

    days_since_close = days_between(sold, today)
    done = completed_actions(snapshot)
    fields["completed_actions"] = done

    rules = get_program_rules(snapshot.program_type)
    if rules is None:
        logger.debug("No compliance rules for program %r (property %s)", snapshot.program_type, snapshot.id)
        return ComplianceTiming(**fields, days_since_close=days_since_close)

    fields["program_label"] = rules.label
    latest = _latest_reached_step(rules, days_since_close)
    fields["action_already_sent"] = latest is not None and latest.action in done

    pending_steps = [step for step in rules.schedule if step.action not in done]
    if not pending_steps:
        return ComplianceTiming(
            **fields,
            days_since_close=days_since_close,
            recommended_level=rules.schedule[-1].level,
        )

    pending = pending_steps[0]
    due_date = sold + timedelta(days=pending.day)
    days_overdue = days_between(due_date, today)

    if days_overdue < 0:
        completed_levels = [step.level for step in rules.schedule if step.action in done]
        return ComplianceTiming(
            **fields,
            due_date=due_date,
            days_overdue=days_overdue,
            days_since_close=days_since_close,
            is_due_now=False,
            current_action=NOT_DUE_YET,
            recommended_level=max(completed_levels, default=0),
            next_action=pending.action,
            next_due_date=due_date,
        )

    following = pending_steps[1] if len(pending_steps) > 1 else None
    return ComplianceTiming(
        **fields,
        due_date=due_date,
        days_overdue=days_overdue,
        days_since_close=days_since_close,
        is_due_now=days_overdue > rules.grace_days,
        current_action=pending.action.value,
        recommended_action=pending.action,
        recommended_level=max(pending.level, int(calculate_enforcement_level(days_overdue))),
        next_action=following.action if following else None,
        next_due_date=sold + timedelta(days=following.day) if following else None,
        penalty=calculate_penalty(days_overdue),
    )
