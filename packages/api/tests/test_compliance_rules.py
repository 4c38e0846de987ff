# This project was developed with assistance from AI tools.
"""Tests for the per-program compliance rule table."""

import dataclasses

import pytest
from landbank_db.enums import ComplianceAction, ProgramType

from landbank_api.services.compliance.rules import (
    COMPLIANCE_RULES,
    ProgramRules,
    ScheduleStep,
    get_program_rules,
    resolve_program,
)


def test_every_program_has_rules():
    """Each known program has exactly one rule entry."""
    assert set(COMPLIANCE_RULES) == set(ProgramType)


@pytest.mark.parametrize("program", list(ProgramType))
def test_schedule_days_strictly_increase(program):
    days = [step.day for step in COMPLIANCE_RULES[program].schedule]
    assert days == sorted(days)
    assert len(set(days)) == len(days)


@pytest.mark.parametrize("program", list(ProgramType))
def test_schedule_levels_non_decreasing_and_in_range(program):
    levels = [step.level for step in COMPLIANCE_RULES[program].schedule]
    assert levels == sorted(levels)
    assert all(1 <= level <= 4 for level in levels)


def test_grace_days_per_program():
    assert COMPLIANCE_RULES[ProgramType.FEATURED_HOMES].grace_days == 3
    assert COMPLIANCE_RULES[ProgramType.READY4REHAB].grace_days == 3
    assert COMPLIANCE_RULES[ProgramType.DEMOLITION].grace_days == 0
    assert COMPLIANCE_RULES[ProgramType.VIP].grace_days == 5


def test_demolition_skips_second_attempt():
    actions = [step.action for step in COMPLIANCE_RULES[ProgramType.DEMOLITION].schedule]
    assert actions == [
        ComplianceAction.ATTEMPT_1,
        ComplianceAction.WARNING,
        ComplianceAction.DEFAULT_NOTICE,
    ]


def test_vip_is_quarterly():
    rules = COMPLIANCE_RULES[ProgramType.VIP]
    assert rules.cadence == "quarterly"
    assert [step.day for step in rules.schedule] == [90, 120, 150, 180]


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COMPLIANCE_RULES[ProgramType.VIP] = COMPLIANCE_RULES[ProgramType.DEMOLITION]
    with pytest.raises(dataclasses.FrozenInstanceError):
        COMPLIANCE_RULES[ProgramType.VIP].grace_days = 10


def _rules(schedule, grace_days=0):
    return ProgramRules(
        program=ProgramType.DEMOLITION,
        label="Demolition",
        cadence="milestones",
        schedule=schedule,
        grace_days=grace_days,
        required_uploads=(),
        required_docs=(),
    )


class TestRuleValidation:
    def test_rejects_non_increasing_days(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            _rules((
                ScheduleStep(30, ComplianceAction.ATTEMPT_1, 1),
                ScheduleStep(30, ComplianceAction.WARNING, 3),
            ))

    def test_rejects_decreasing_levels(self):
        with pytest.raises(ValueError, match="must not decrease"):
            _rules((
                ScheduleStep(14, ComplianceAction.ATTEMPT_1, 3),
                ScheduleStep(30, ComplianceAction.WARNING, 1),
            ))

    def test_rejects_level_out_of_range(self):
        with pytest.raises(ValueError, match="1..4"):
            _rules((ScheduleStep(14, ComplianceAction.ATTEMPT_1, 5),))

    def test_rejects_negative_grace(self):
        with pytest.raises(ValueError, match="grace_days"):
            _rules((ScheduleStep(14, ComplianceAction.ATTEMPT_1, 1),), grace_days=-1)


class TestResolveProgram:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Featured Homes", ProgramType.FEATURED_HOMES),
            ("FeaturedHomes", ProgramType.FEATURED_HOMES),
            ("Ready4Rehab", ProgramType.READY4REHAB),
            (" Demolition ", ProgramType.DEMOLITION),
            (ProgramType.VIP, ProgramType.VIP),
        ],
    )
    def test_known_programs(self, value, expected):
        assert resolve_program(value) is expected

    @pytest.mark.parametrize("value", [None, "", "Side Lot", "featured homes"])
    def test_unknown_programs(self, value):
        assert resolve_program(value) is None
        assert get_program_rules(value) is None

    def test_rules_lookup_by_label(self):
        assert get_program_rules("Ready4Rehab").label == "Ready for Rehab"
        assert get_program_rules("VIP").key == "VIP"
