# This project was developed with assistance from AI tools.
"""Milestone generator.

Pure function mapping (program, sale date) to the ordered list of
milestones a buyer must meet. Featured Homes and Ready4Rehab start with the
shared insurance-proof milestone; Demolition and VIP carry their own full
schedules and do not include it. Unknown programs get only the insurance
milestone.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from types import MappingProxyType

from landbank_db.enums import ProgramType

from ...schemas.compliance import Milestone, MilestoneStatus
from .dates import days_between, to_date
from .rules import resolve_program

# A milestone due within this many days is reported as due soon.
DUE_SOON_DAYS = 14


@dataclass(frozen=True)
class MilestoneTemplate:
    key: str
    label: str
    offset_days: int
    category: str


_BASE_MILESTONES = (
    MilestoneTemplate("insurance", "Insurance Proof Due", 30, "documentation"),
)

MILESTONE_SCHEDULES: MappingProxyType[ProgramType, tuple[MilestoneTemplate, ...]] = MappingProxyType({
    ProgramType.FEATURED_HOMES: _BASE_MILESTONES + (
        MilestoneTemplate("occupancy", "Occupancy Established", 90, "occupancy"),
        MilestoneTemplate("annual-1", "Year 1 Annual Certification", 365, "certification"),
        MilestoneTemplate("annual-2", "Year 2 Annual Certification", 730, "certification"),
        MilestoneTemplate("hold-expiry", "Minimum Hold Period Ends", 1095, "milestone"),
        MilestoneTemplate("rofr-expiry", "Right of First Refusal Ends", 1825, "milestone"),
    ),
    ProgramType.READY4REHAB: _BASE_MILESTONES + (
        MilestoneTemplate("permit", "Building Permit Obtained", 90, "mobilization"),
        MilestoneTemplate("mobilization", "Mobilization Complete", 90, "mobilization"),
        MilestoneTemplate("progress-1", "First Progress Report", 90, "reporting"),
        MilestoneTemplate("inspect-25", "25% Completion Inspection", 120, "inspection"),
        MilestoneTemplate("inspect-50", "50% Completion Inspection", 180, "inspection"),
        MilestoneTemplate("inspect-75", "75% Completion Inspection", 270, "inspection"),
        MilestoneTemplate("rehab-complete", "Rehabilitation Complete", 365, "completion"),
        MilestoneTemplate("coo", "Certificate of Occupancy", 365, "completion"),
        MilestoneTemplate("move-in", "Occupancy Established", 425, "occupancy"),
        MilestoneTemplate("hold-expiry", "Minimum Hold Period Ends", 1460, "milestone"),
    ),
    ProgramType.DEMOLITION: (
        MilestoneTemplate("demo-start", "Demolition Commenced", 90, "mobilization"),
        MilestoneTemplate("demo-complete", "Demolition Complete", 180, "completion"),
        MilestoneTemplate("demo-cert", "Local Gov Final Certification", 210, "certification"),
        MilestoneTemplate("site-clear", "Site Cleared & Graded", 240, "completion"),
    ),
    # RC-series check-ins mirror the FileMaker RC date fields.
    ProgramType.VIP: (
        MilestoneTemplate("RC15", "RC15 - 15-Day Check-In", 15, "check-in"),
        MilestoneTemplate("RC45", "RC45 - 45-Day Check-In", 45, "check-in"),
        MilestoneTemplate("RC90", "RC90 - 90-Day Check-In", 90, "check-in"),
        MilestoneTemplate("RC135", "RC135 - Progress Review", 135, "check-in"),
        MilestoneTemplate("RC180", "RC180 - 6-Month Review", 180, "inspection"),
        MilestoneTemplate("RC225", "RC225 - Progress Review", 225, "check-in"),
        MilestoneTemplate("RC270", "RC270 - 9-Month Review", 270, "inspection"),
        MilestoneTemplate("RC315", "RC315 - Progress Review", 315, "check-in"),
        MilestoneTemplate("RC360", "RC360 - Final Review", 360, "completion"),
    ),
})


def generate_milestones(
    program_type: ProgramType | str | None,
    date_sold: date | datetime | str | None,
) -> list[Milestone]:
    """Build the ordered milestone list for a property.

    Args:
        program_type: Program enum, store label, or rule key.
        date_sold: Sale (close) date. Missing or unparsable yields ``[]``.

    Returns:
        Milestones ordered as scheduled, each due ``offset_days`` after sale.
    """
    sold = to_date(date_sold)
    if sold is None:
        return []

    program = resolve_program(program_type)
    templates = MILESTONE_SCHEDULES.get(program, _BASE_MILESTONES)

    return [
        Milestone(
            key=t.key,
            label=t.label,
            due_date=sold + timedelta(days=t.offset_days),
            category=t.category,
        )
        for t in templates
    ]


# R4R inspection milestones and the percent complete that satisfies each.
_INSPECTION_THRESHOLDS = {"inspect-25": 25, "inspect-50": 50, "inspect-75": 75}


def completed_date_for_milestone(milestone: Milestone, prop) -> date | None:
    """Date a milestone was satisfied, read from the property's evidence fields.

    ``prop`` is anything carrying the Property evidence attributes (the ORM
    model in practice). Flags without a recorded date complete on the
    milestone's own due date. Returns None while the milestone is open or
    when the program keeps no evidence for it.
    """
    program = resolve_program(getattr(prop, "program_type", None))
    key = milestone.key
    sold = to_date(getattr(prop, "date_sold", None))
    proof = to_date(getattr(prop, "date_proof_of_invest_provided", None))
    percent = getattr(prop, "percent_complete", None) or 0

    if program is ProgramType.VIP:
        return to_date((getattr(prop, "rc_completed", None) or {}).get(key))

    if program in (ProgramType.FEATURED_HOMES, ProgramType.READY4REHAB) and key == "insurance":
        return milestone.due_date if getattr(prop, "insurance_received", False) else None

    if program is ProgramType.FEATURED_HOMES:
        if key == "occupancy" and getattr(prop, "occupancy_established", False):
            return milestone.due_date
        return None

    if program is ProgramType.READY4REHAB:
        if key == "permit":
            return sold if getattr(prop, "building_permit_obtained", False) else None
        if key == "mobilization":
            return sold if getattr(prop, "scope_of_work_approved", False) else None
        if key in _INSPECTION_THRESHOLDS:
            return milestone.due_date if percent >= _INSPECTION_THRESHOLDS[key] else None
        if key in ("rehab-complete", "coo"):
            return (proof or milestone.due_date) if percent >= 100 else None
        if key == "move-in":
            return proof if percent >= 100 else None
        return None

    if program is ProgramType.DEMOLITION and key in ("demo-complete", "demo-cert", "site-clear"):
        return to_date(getattr(prop, "demo_final_cert_date", None))

    return None


def milestone_status(
    milestone: Milestone,
    today: date,
    completed_on: date | None = None,
) -> MilestoneStatus:
    """Classify a milestone relative to ``today``."""
    if completed_on is not None:
        return MilestoneStatus.COMPLETED
    overdue = days_between(milestone.due_date, today)
    if overdue > 0:
        return MilestoneStatus.OVERDUE
    if overdue > -DUE_SOON_DAYS:
        return MilestoneStatus.DUE_SOON
    return MilestoneStatus.UPCOMING
