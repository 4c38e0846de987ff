# This project was developed with assistance from AI tools.
"""
Domain enums for land-bank compliance tracking.

Shared domain types used by both SQLAlchemy models (db package)
and the compliance engine / Pydantic schemas (api package).
"""

import enum


class ProgramType(str, enum.Enum):
    """Sale programs. Values are the labels stored on property records."""

    FEATURED_HOMES = "Featured Homes"
    READY4REHAB = "Ready4Rehab"
    DEMOLITION = "Demolition"
    VIP = "VIP"

    @property
    def rule_key(self) -> str:
        """Configuration key used by the compliance rule table."""
        return _RULE_KEYS[self]


_RULE_KEYS = {
    ProgramType.FEATURED_HOMES: "FeaturedHomes",
    ProgramType.READY4REHAB: "Ready4Rehab",
    ProgramType.DEMOLITION: "Demolition",
    ProgramType.VIP: "VIP",
}


class ComplianceAction(str, enum.Enum):
    """Outreach steps, in escalation order."""

    ATTEMPT_1 = "ATTEMPT_1"
    ATTEMPT_2 = "ATTEMPT_2"
    WARNING = "WARNING"
    DEFAULT_NOTICE = "DEFAULT_NOTICE"


class EnforcementLevel(enum.IntEnum):
    COMPLIANT = 0
    NOTICE = 1
    FORMAL_WARNING = 2
    DEFAULT_NOTICE = 3
    LEGAL_REMEDIES = 4

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS = {
    EnforcementLevel.COMPLIANT: "Compliant",
    EnforcementLevel.NOTICE: "Level 1 - Notice & Technical Assistance",
    EnforcementLevel.FORMAL_WARNING: "Level 2 - Formal Warning",
    EnforcementLevel.DEFAULT_NOTICE: "Level 3 - Default Notice",
    EnforcementLevel.LEGAL_REMEDIES: "Level 4 - Legal Remedies",
}


class CommunicationStatus(str, enum.Enum):
    SENT = "sent"
    LOGGED = "logged"
    FAILED = "failed"


class PropertyStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLIANT = "compliant"
    CLOSED = "closed"
