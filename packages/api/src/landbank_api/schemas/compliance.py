# This project was developed with assistance from AI tools.
"""Compliance timing, queue, and exception schemas."""

import enum
from datetime import date, datetime

from landbank_db.enums import CommunicationStatus, ComplianceAction
from pydantic import Field

from . import CamelModel

NOT_DUE_YET = "NOT_DUE_YET"


class MilestoneStatus(str, enum.Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    UPCOMING = "upcoming"


class ExceptionType(str, enum.Enum):
    MISSING_EMAIL = "missing_email"
    MISSING_1ST_ATTEMPT = "missing_1st_attempt"
    MISSING_2ND_ATTEMPT = "missing_2nd_attempt"
    NO_COMMUNICATIONS = "no_communications"
    STALE_CONTACT = "stale_contact"


class Milestone(CamelModel):
    """A scheduled compliance event derived from program and sale date."""

    key: str
    label: str
    due_date: date
    category: str


class MilestoneWithStatus(Milestone):
    status: MilestoneStatus
    days_overdue: int
    completed_date: date | None = None


class BuyerSummary(CamelModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class CommunicationSummary(CamelModel):
    action: ComplianceAction | None = None
    status: CommunicationStatus
    sent_at: datetime | None = None


class ComplianceTiming(CamelModel):
    """Flattened property fields plus the computed timing verdict.

    Recomputed on every request; never persisted. ``error`` is True when the
    sale date is missing or unparsable, in which case the verdict fields
    keep their defaults.
    """

    # -- Property --
    id: int
    parcel_id: str | None = None
    address: str | None = None
    program_type: str | None = None
    program_label: str | None = None
    date_sold: date | None = None
    compliance_1st_attempt: date | None = Field(default=None, alias="compliance1stAttempt")
    compliance_2nd_attempt: date | None = Field(default=None, alias="compliance2ndAttempt")
    last_contact_date: date | None = None
    enforcement_level: int = 0
    buyer: BuyerSummary | None = None
    buyer_name: str = ""
    buyer_email: str = ""
    communications: list[CommunicationSummary] = Field(default_factory=list)

    # -- Verdict --
    due_date: date | None = None
    days_overdue: int = 0
    days_since_close: int | None = None
    is_due_now: bool = False
    current_action: str = NOT_DUE_YET
    recommended_action: ComplianceAction | None = None
    recommended_level: int = 0
    next_action: ComplianceAction | None = None
    next_due_date: date | None = None
    completed_actions: list[ComplianceAction] = Field(default_factory=list)
    action_already_sent: bool = False
    penalty: int = 0
    error: bool = False
    error_reason: str | None = None


class DueNowResponse(CamelModel):
    count: int
    computed_at: datetime
    queue: list[ComplianceTiming]


class ExceptionIssue(CamelModel):
    type: ExceptionType
    message: str


class PropertyException(CamelModel):
    """A non-closed property with one or more data-quality issues."""

    id: int
    parcel_id: str | None = None
    address: str | None = None
    buyer_name: str = ""
    buyer_email: str = ""
    program_type: str | None = None
    enforcement_level: int = 0
    issues: list[ExceptionIssue]


class ExceptionsResponse(CamelModel):
    count: int
    computed_at: datetime
    exceptions: list[PropertyException]


class PortfolioStats(CamelModel):
    """Dashboard counters over persisted property state."""

    total: int
    by_program: dict[str, int]
    compliant: int
    level_1: int = Field(alias="level1")
    level_2: int = Field(alias="level2")
    level_3: int = Field(alias="level3")
    level_4: int = Field(alias="level4")
    needing_first_attempt: int
    needing_second_attempt: int
    no_email: int
    completed: int = 0
    computed_at: datetime


class DigestItem(CamelModel):
    address: str | None = None
    program: str | None = None
    action: str
    days_overdue: int
    buyer_name: str = ""


class ComplianceDigest(CamelModel):
    """Daily staff digest: what needs compliance action today."""

    digest_date: date = Field(alias="date")
    total_active: int
    due_now_count: int
    overdue_30_count: int = Field(alias="overdue30Count")
    top_urgent: list[DigestItem]
    computed_at: datetime


class MilestonePreview(CamelModel):
    program_type: str
    program_label: str | None = None
    date_sold: date | None = None
    milestones: list[MilestoneWithStatus]


class PropertyComplianceDetail(CamelModel):
    """Timing verdict, milestone schedule, and evidence requirements for one property."""

    timing: ComplianceTiming
    milestones: list[MilestoneWithStatus]
    grace_days: int | None = None
    required_uploads: list[str] = Field(default_factory=list)
    required_docs: list[str] = Field(default_factory=list)
    computed_at: datetime
