# This project was developed with assistance from AI tools.
"""Per-program compliance rule table.

Each program defines the outreach schedule counted in calendar days from
the close (sale) date, a grace buffer before a step is treated as due, and
the evidence the buyer must upload. The table is built once at import and
exposed as a read-only mapping.
"""

from dataclasses import dataclass
from types import MappingProxyType

from landbank_db.enums import ComplianceAction, ProgramType


@dataclass(frozen=True)
class ScheduleStep:
    """One outreach step: take ``action`` ``day`` days after close."""

    day: int
    action: ComplianceAction
    level: int


@dataclass(frozen=True)
class ProgramRules:
    program: ProgramType
    label: str
    cadence: str
    schedule: tuple[ScheduleStep, ...]
    grace_days: int
    required_uploads: tuple[str, ...]
    required_docs: tuple[str, ...]

    def __post_init__(self) -> None:
        days = [step.day for step in self.schedule]
        if any(b <= a for a, b in zip(days, days[1:])):
            raise ValueError(f"{self.program.rule_key}: schedule days must be strictly increasing")
        levels = [step.level for step in self.schedule]
        if any(b < a for a, b in zip(levels, levels[1:])):
            raise ValueError(f"{self.program.rule_key}: schedule levels must not decrease")
        if any(not 1 <= level <= 4 for level in levels):
            raise ValueError(f"{self.program.rule_key}: schedule levels must be within 1..4")
        if self.grace_days < 0:
            raise ValueError(f"{self.program.rule_key}: grace_days cannot be negative")

    @property
    def key(self) -> str:
        return self.program.rule_key


def _steps(*triples: tuple[int, ComplianceAction, int]) -> tuple[ScheduleStep, ...]:
    return tuple(ScheduleStep(day=d, action=a, level=lvl) for d, a, lvl in triples)


_MONTHLY_SCHEDULE = _steps(
    (30, ComplianceAction.ATTEMPT_1, 1),
    (60, ComplianceAction.ATTEMPT_2, 2),
    (90, ComplianceAction.WARNING, 3),
    (120, ComplianceAction.DEFAULT_NOTICE, 4),
)

_RENOVATION_UPLOADS = (
    "Front Exterior",
    "Rear Exterior",
    "Kitchen",
    "Bathroom",
    "Living Area",
    "Bedroom",
    "Basement",
    "Active Work Area",
)

_RENOVATION_DOCS = ("Permits (if applicable)", "Contracts (if applicable)")

COMPLIANCE_RULES: MappingProxyType[ProgramType, ProgramRules] = MappingProxyType({
    ProgramType.FEATURED_HOMES: ProgramRules(
        program=ProgramType.FEATURED_HOMES,
        label="Featured Homes",
        cadence="monthly",
        schedule=_MONTHLY_SCHEDULE,
        grace_days=3,
        required_uploads=_RENOVATION_UPLOADS,
        required_docs=_RENOVATION_DOCS,
    ),
    ProgramType.READY4REHAB: ProgramRules(
        program=ProgramType.READY4REHAB,
        label="Ready for Rehab",
        cadence="monthly",
        schedule=_MONTHLY_SCHEDULE,
        grace_days=3,
        required_uploads=_RENOVATION_UPLOADS,
        required_docs=_RENOVATION_DOCS,
    ),
    ProgramType.DEMOLITION: ProgramRules(
        program=ProgramType.DEMOLITION,
        label="Demolition",
        cadence="milestones",
        schedule=_steps(
            (14, ComplianceAction.ATTEMPT_1, 1),
            (30, ComplianceAction.WARNING, 3),
            (45, ComplianceAction.DEFAULT_NOTICE, 4),
        ),
        grace_days=0,
        required_uploads=("Site Before", "During", "After"),
        required_docs=("Contractor Agreement", "Disposal Receipt"),
    ),
    ProgramType.VIP: ProgramRules(
        program=ProgramType.VIP,
        label="VIP Spotlight",
        cadence="quarterly",
        schedule=_steps(
            (90, ComplianceAction.ATTEMPT_1, 1),
            (120, ComplianceAction.ATTEMPT_2, 2),
            (150, ComplianceAction.WARNING, 3),
            (180, ComplianceAction.DEFAULT_NOTICE, 4),
        ),
        grace_days=5,
        required_uploads=("Front Exterior", "Rear Exterior"),
        required_docs=("Insurance Proof",),
    ),
})

# Both the stored label and the rule key identify a program.
_PROGRAM_LOOKUP: dict[str, ProgramType] = {
    **{p.value: p for p in ProgramType},
    **{p.rule_key: p for p in ProgramType},
}


def resolve_program(value: ProgramType | str | None) -> ProgramType | None:
    """Map a program enum, store label, or rule key to ProgramType.

    Returns None for anything unrecognized instead of raising, so records
    carrying new program strings still flow through the engine.
    """
    if value is None:
        return None
    if isinstance(value, ProgramType):
        return value
    return _PROGRAM_LOOKUP.get(value.strip())


def get_program_rules(value: ProgramType | str | None) -> ProgramRules | None:
    """Return the rule entry for a program, or None when unknown."""
    program = resolve_program(value)
    if program is None:
        return None
    return COMPLIANCE_RULES[program]
