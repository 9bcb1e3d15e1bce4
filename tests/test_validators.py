"""
Tests for rule set integrity validation.

Every built-in academic year must pass; each class of hand-entry
mistake must be reported.
"""
from datetime import date

import pytest

from aogaku_calendar.calendars import builtin_rule_sets
from aogaku_calendar.exceptions import RuleSetValidationError
from aogaku_calendar.models import (
    ORDERABLE_TIERS,
    CampusDateSets,
    DateRange,
    DateSet,
    DayCategory,
    Tier,
)
from aogaku_calendar.validators import check_rule_set, validate_rule_set

from tests.conftest import make_rule_set, make_term


def assert_error(errors: list[str], fragment: str) -> None:
    assert any(fragment in e for e in errors), f"{fragment!r} not in {errors}"


# =============================================================================
# Built-in Years
# =============================================================================

@pytest.mark.parametrize("rule_set", builtin_rule_sets(), ids=lambda rs: rs.label)
class TestBuiltinRuleSets:
    """Every compiled-in year must be internally consistent."""

    def test_no_integrity_errors(self, rule_set):
        assert validate_rule_set(rule_set) == []

    def test_tiers_unique_and_orderable(self, rule_set):
        assert len(set(rule_set.tiers)) == len(rule_set.tiers)
        assert set(rule_set.tiers) <= ORDERABLE_TIERS

    def test_check_passes(self, rule_set):
        check_rule_set(rule_set, source="builtin")


def test_synthetic_rule_set_is_valid():
    assert validate_rule_set(make_rule_set()) == []


# =============================================================================
# Tier Errors
# =============================================================================

class TestTierErrors:
    """Tests for malformed tier lists."""

    def test_duplicate_tier(self):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO, Tier.KYUKO),
        )
        assert_error(validate_rule_set(rule_set), "Duplicate tier: 'kyuko'")

    def test_sunday_not_orderable(self):
        rule_set = make_rule_set(
            tiers=(Tier.SUNDAY, Tier.BREAK_RANGE, Tier.EXAM_RANGE),
        )
        assert_error(validate_rule_set(rule_set), "'sunday' cannot appear")

    def test_break_tier_always_required(self):
        rule_set = make_rule_set(tiers=(Tier.EXAM_RANGE,))
        assert_error(validate_rule_set(rule_set), "Tier 'break_range' omitted")

    def test_omitted_tier_with_data(self):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO),
            makeup=CampusDateSets.build(common=[date(2030, 10, 2)]),
        )
        assert_error(validate_rule_set(rule_set), "Tier 'makeup' omitted")

    def test_national_holidays_need_kyuko_tier(self):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE),
            national_holidays=DateSet.of(date(2030, 11, 4)),
        )
        assert_error(validate_rule_set(rule_set), "Tier 'kyuko' omitted")

    def test_omitted_tier_without_data_is_fine(self):
        rule_set = make_rule_set(tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE))
        assert validate_rule_set(rule_set) == []

    def test_invalid_default_category(self):
        rule_set = make_rule_set(default_category=DayCategory.EXAM)
        assert_error(validate_rule_set(rule_set), "Default category 'exam'")

    def test_kyuko_default_needs_terms(self):
        rule_set = make_rule_set(default_category=DayCategory.KYUKO)
        errors = validate_rule_set(rule_set)
        assert_error(errors, "requires the 'term_range' tier")
        assert_error(errors, "requires at least one term")


# =============================================================================
# Range Errors
# =============================================================================

class TestRangeErrors:
    """Tests for malformed date ranges."""

    def test_reversed_range(self):
        rule_set = make_rule_set(
            exams=(DateRange(date(2030, 7, 31), date(2030, 7, 20)),),
        )
        assert_error(validate_rule_set(rule_set), "exam[0] is reversed")

    def test_range_outside_year(self):
        rule_set = make_rule_set(
            exams=(DateRange(date(2031, 4, 2), date(2031, 4, 10)),),
        )
        assert_error(validate_rule_set(rule_set), "exam[0] lies outside the academic year")

    def test_exam_overlapping_break(self):
        rule_set = make_rule_set(
            exams=(DateRange(date(2030, 7, 25), date(2030, 8, 5)),),
        )
        assert_error(validate_rule_set(rule_set), "Ranges summer_break and exam[0] overlap")

    def test_term_overlapping_break(self):
        rule_set = make_rule_set(
            terms=(make_term("spring", (date(2030, 4, 8), date(2030, 8, 10))),),
        )
        errors = validate_rule_set(rule_set)
        assert_error(errors, "term 'spring'[0] overlaps summer_break")
        assert_error(errors, "term 'spring'[0] overlaps exam[0]")

    def test_term_ranges_out_of_order(self):
        term = make_term(
            "autumn",
            (date(2031, 1, 7), date(2031, 1, 26)),
            (date(2030, 9, 16), date(2030, 12, 23)),
        )
        rule_set = make_rule_set(terms=(term,))
        assert_error(validate_rule_set(rule_set), "not in chronological order")


# =============================================================================
# Day Set Errors
# =============================================================================

class TestDayErrors:
    """Tests for individual days outside the academic year."""

    def test_kyuko_outside_year(self):
        rule_set = make_rule_set(
            kyuko=CampusDateSets.build(common=[date(2031, 4, 29)]),
        )
        assert_error(
            validate_rule_set(rule_set),
            "kyuko has dates outside the academic year: 2031-04-29",
        )

    def test_forced_day_outside_year(self):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.FORCED_CLASS_DAY),
            forced_class_days=DateSet.of(date(2030, 3, 20)),
        )
        assert_error(validate_rule_set(rule_set), "forced_class_days has dates outside")


# =============================================================================
# check_rule_set
# =============================================================================

class TestCheckRuleSet:
    """Tests for the raising wrapper."""

    def test_raises_with_all_errors(self):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.BREAK_RANGE),
            exams=(DateRange(date(2030, 7, 31), date(2030, 7, 20)),),
        )

        with pytest.raises(RuleSetValidationError) as exc_info:
            check_rule_set(rule_set, source="ay2030.yaml")

        exc = exc_info.value
        assert exc.code == "AC_RULE_SET_INVALID"
        assert exc.academic_year == 2030
        assert exc.details["source"] == "ay2030.yaml"
        assert len(exc.details["errors"]) >= 3
        assert "in ay2030.yaml" in exc.message
