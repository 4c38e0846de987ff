# This project was developed with assistance from AI tools.
"""Compliance timing engine: rules, milestones, enforcement, and aggregation."""

from .enforcement import calculate_enforcement_level, calculate_penalty
from .milestones import completed_date_for_milestone, generate_milestones, milestone_status
from .rules import COMPLIANCE_RULES, get_program_rules, resolve_program
from .timing import PropertySnapshot, compute_compliance_timing

__all__ = [
    "COMPLIANCE_RULES",
    "PropertySnapshot",
    "calculate_enforcement_level",
    "calculate_penalty",
    "completed_date_for_milestone",
    "compute_compliance_timing",
    "generate_milestones",
    "get_program_rules",
    "milestone_status",
    "resolve_program",
]
