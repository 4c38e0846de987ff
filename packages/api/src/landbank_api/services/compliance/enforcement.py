# This project was developed with assistance from AI tools.
"""Enforcement level and penalty accrual.

Both functions are total over integers: negative or zero days overdue
means compliant / no penalty.
"""

from landbank_db.enums import EnforcementLevel

# (first day of tier, daily rate, max days in tier or None for uncapped)
_PENALTY_TIERS: tuple[tuple[int, int, int | None], ...] = (
    (31, 50, 30),
    (61, 100, 30),
    (91, 200, None),
)
PENALTY_CAP = 10_000


def calculate_enforcement_level(days_overdue: int) -> EnforcementLevel:
    """Map days past a deadline to an escalation level (boundaries fall to the lower tier)."""
    if days_overdue <= 0:
        return EnforcementLevel.COMPLIANT
    if days_overdue <= 30:
        return EnforcementLevel.NOTICE
    if days_overdue <= 60:
        return EnforcementLevel.FORMAL_WARNING
    if days_overdue <= 90:
        return EnforcementLevel.DEFAULT_NOTICE
    return EnforcementLevel.LEGAL_REMEDIES


def calculate_penalty(days_overdue: int) -> int:
    """Tiered daily penalty in whole dollars, capped at ``PENALTY_CAP``.

    Days 1-30 are warning-only. Days 31-60 accrue $50/day, 61-90 $100/day,
    and 91+ $200/day.
    """
    if days_overdue <= 30:
        return 0

    total = 0
    for first_day, rate, max_days in _PENALTY_TIERS:
        days_in_tier = max(days_overdue - (first_day - 1), 0)
        if max_days is not None:
            days_in_tier = min(days_in_tier, max_days)
        total += days_in_tier * rate
    return min(total, PENALTY_CAP)
