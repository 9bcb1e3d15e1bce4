"""
Unit tests for the DayClassifier.

Tests cover:
- Concrete days of the 2025 and 2026 academic years
- Sunday precedence
- Tier ordering as data
- Default categories
- Totality and break coverage over whole years
"""
from datetime import date, datetime, timezone

import pytest

from aogaku_calendar.calendars import academic_year_2025, academic_year_2026
from aogaku_calendar.engine import Classification, DayClassifier, categorize, classify
from aogaku_calendar.models import (
    Campus,
    CampusDateSets,
    DateSet,
    DayCategory,
    Tier,
)

from tests.conftest import iter_days, make_rule_set, make_term


A = Campus.AOYAMA
S = Campus.SAGAMIHARA


# =============================================================================
# Academic Year 2025
# =============================================================================

class TestAcademicYear2025:
    """Tests against the 2025 rule set."""

    def test_summer_break(self, classifier, rule_set_2025):
        assert classifier.categorize(date(2025, 8, 15), A, rule_set_2025) == DayCategory.SUMMER_BREAK

    def test_sunday_overrides_holiday(self, classifier, rule_set_2025):
        # Greenery Day falls on a Sunday
        assert classifier.categorize(date(2025, 5, 4), A, rule_set_2025) == DayCategory.SUNDAY

    def test_campus_specific_cancellation(self, classifier, rule_set_2025):
        assert classifier.categorize(date(2025, 10, 11), S, rule_set_2025) == DayCategory.KYUKO
        assert classifier.categorize(date(2025, 10, 11), A, rule_set_2025) == DayCategory.CLASS_DAY

    def test_aoyama_only_cancellation(self, classifier, rule_set_2025):
        assert classifier.categorize(date(2026, 1, 16), A, rule_set_2025) == DayCategory.KYUKO
        assert classifier.categorize(date(2026, 1, 16), S, rule_set_2025) == DayCategory.CLASS_DAY

    def test_campus_specific_makeup(self, classifier, rule_set_2025):
        assert classifier.categorize(date(2026, 1, 23), S, rule_set_2025) == DayCategory.MAKEUP
        assert classifier.categorize(date(2026, 1, 23), A, rule_set_2025) == DayCategory.CLASS_DAY

    @pytest.mark.parametrize("d,expected", [
        (date(2025, 7, 23), DayCategory.MAKEUP),
        (date(2025, 7, 24), DayCategory.EXAM),
        (date(2025, 9, 23), DayCategory.KYUKO),
        (date(2025, 12, 25), DayCategory.WINTER_BREAK),
        (date(2026, 1, 28), DayCategory.EXAM),
        (date(2026, 3, 2), DayCategory.SPRING_BREAK),
        (date(2025, 6, 10), DayCategory.CLASS_DAY),
    ])
    def test_common_days(self, classifier, rule_set_2025, d, expected):
        for campus in Campus:
            assert classifier.categorize(d, campus, rule_set_2025) == expected

    def test_unlisted_holiday_is_class_day(self, classifier, rule_set_2025):
        # Sports Day 2025 is not in the cancellation list
        result = classifier.classify(date(2025, 10, 13), A, rule_set_2025)
        assert result.category == DayCategory.CLASS_DAY
        assert result.tier == Tier.DEFAULT


# =============================================================================
# Academic Year 2026
# =============================================================================

class TestAcademicYear2026:
    """Tests against the 2026 rule set."""

    def test_forced_class_day_overrides_holiday(self, classifier, rule_set_2026):
        result = classifier.classify(date(2026, 10, 12), A, rule_set_2026)
        assert result.category == DayCategory.CLASS_DAY
        assert result.tier == Tier.FORCED_CLASS_DAY

    def test_national_holiday_cancels(self, classifier, rule_set_2026):
        result = classifier.classify(date(2026, 11, 23), A, rule_set_2026)
        assert result.category == DayCategory.KYUKO
        assert result.tier == Tier.KYUKO

    def test_campus_specific_cancellation(self, classifier, rule_set_2026):
        assert classifier.categorize(date(2026, 10, 10), S, rule_set_2026) == DayCategory.KYUKO
        result = classifier.classify(date(2026, 10, 10), A, rule_set_2026)
        assert result.category == DayCategory.CLASS_DAY
        assert result.tier == Tier.TERM_RANGE

    def test_campus_specific_makeup(self, classifier, rule_set_2026):
        assert classifier.categorize(date(2027, 1, 22), S, rule_set_2026) == DayCategory.MAKEUP
        assert classifier.categorize(date(2027, 1, 22), A, rule_set_2026) == DayCategory.CLASS_DAY

    def test_makeup_inside_term(self, classifier, rule_set_2026):
        result = classifier.classify(date(2026, 7, 23), A, rule_set_2026)
        assert result.category == DayCategory.MAKEUP
        assert result.tier == Tier.MAKEUP

    def test_break_beats_national_holiday(self, classifier, rule_set_2026):
        assert classifier.categorize(date(2027, 1, 1), A, rule_set_2026) == DayCategory.WINTER_BREAK

    @pytest.mark.parametrize("d", [
        date(2026, 4, 3),    # before the spring term
        date(2027, 3, 29),   # after the spring break
    ])
    def test_outside_terms_defaults_to_kyuko(self, classifier, rule_set_2026, d):
        result = classifier.classify(d, A, rule_set_2026)
        assert result.category == DayCategory.KYUKO
        assert result.tier == Tier.DEFAULT

    def test_ordinary_term_day(self, classifier, rule_set_2026):
        assert classifier.is_class_day(date(2026, 12, 1), S, rule_set_2026)

    def test_aware_datetime_normalized_to_jst(self, classifier, rule_set_2026):
        # 15:30 UTC on October 11 is already October 12 in Japan
        moment = datetime(2026, 10, 11, 15, 30, tzinfo=timezone.utc)
        result = classifier.classify(moment, A, rule_set_2026)
        assert result.date == date(2026, 10, 12)
        assert result.category == DayCategory.CLASS_DAY


# =============================================================================
# Precedence Tests
# =============================================================================

class TestPrecedence:
    """Tests for tier ordering on synthetic rule sets."""

    # Wednesday
    DAY = date(2030, 10, 2)

    def test_kyuko_before_makeup(self, classifier):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO, Tier.MAKEUP),
            kyuko=CampusDateSets.build(common=[self.DAY]),
            makeup=CampusDateSets.build(common=[self.DAY]),
        )
        assert classifier.categorize(self.DAY, A, rule_set) == DayCategory.KYUKO

    def test_makeup_before_kyuko(self, classifier):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.MAKEUP, Tier.KYUKO),
            kyuko=CampusDateSets.build(common=[self.DAY]),
            makeup=CampusDateSets.build(common=[self.DAY]),
        )
        assert classifier.categorize(self.DAY, A, rule_set) == DayCategory.MAKEUP

    def test_forced_before_national_holiday(self, classifier):
        overrides = dict(
            forced_class_days=DateSet.of(self.DAY),
            national_holidays=DateSet.of(self.DAY),
        )
        forced_first = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.FORCED_CLASS_DAY, Tier.KYUKO),
            **overrides,
        )
        kyuko_first = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO, Tier.FORCED_CLASS_DAY),
            **overrides,
        )
        assert classifier.categorize(self.DAY, A, forced_first) == DayCategory.CLASS_DAY
        assert classifier.categorize(self.DAY, A, kyuko_first) == DayCategory.KYUKO

    def test_break_beats_later_tiers(self, classifier):
        summer_day = date(2030, 8, 20)
        rule_set = make_rule_set(kyuko=CampusDateSets.build(common=[summer_day]))
        result = classifier.classify(summer_day, A, rule_set)
        assert result.category == DayCategory.SUMMER_BREAK
        assert result.tier == Tier.BREAK_RANGE

    def test_sunday_beats_every_tier(self, classifier):
        sunday = date(2030, 10, 6)
        rule_set = make_rule_set(
            makeup=CampusDateSets.build(common=[sunday]),
            forced_class_days=DateSet.of(sunday),
        )
        result = classifier.classify(sunday, A, rule_set)
        assert result.category == DayCategory.SUNDAY
        assert result.tier == Tier.SUNDAY

    def test_sunday_inside_break(self, classifier):
        # 2030-08-04 is a Sunday in the summer break
        rule_set = make_rule_set()
        assert classifier.categorize(date(2030, 8, 4), A, rule_set) == DayCategory.SUNDAY

    def test_omitted_tier_is_not_evaluated(self, classifier):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO),
            makeup=CampusDateSets.build(common=[self.DAY]),
        )
        assert classifier.categorize(self.DAY, A, rule_set) == DayCategory.CLASS_DAY


# =============================================================================
# Default Category Tests
# =============================================================================

class TestDefaultCategory:
    """Tests for the fallback category when no tier matches."""

    def test_class_day_default(self, classifier):
        rule_set = make_rule_set()
        result = classifier.classify(date(2030, 10, 2), A, rule_set)
        assert result.category == DayCategory.CLASS_DAY
        assert result.tier == Tier.DEFAULT

    def test_kyuko_default_with_terms(self, classifier):
        rule_set = make_rule_set(
            tiers=(Tier.BREAK_RANGE, Tier.EXAM_RANGE, Tier.KYUKO, Tier.TERM_RANGE),
            default_category=DayCategory.KYUKO,
            terms=(make_term("autumn", (date(2030, 9, 16), date(2030, 12, 23))),),
        )
        in_term = classifier.classify(date(2030, 10, 2), A, rule_set)
        before_term = classifier.classify(date(2030, 4, 2), A, rule_set)

        assert in_term.category == DayCategory.CLASS_DAY
        assert in_term.tier == Tier.TERM_RANGE
        assert before_term.category == DayCategory.KYUKO
        assert before_term.tier == Tier.DEFAULT


# =============================================================================
# Whole-Year Properties
# =============================================================================

@pytest.mark.parametrize("factory", [academic_year_2025, academic_year_2026])
@pytest.mark.parametrize("campus", list(Campus))
class TestWholeYear:
    """Properties checked for every day of each built-in year."""

    def test_every_day_has_one_category(self, factory, campus):
        rule_set = factory()
        classifier = DayClassifier()
        for d in iter_days(rule_set.start, rule_set.end):
            result = classifier.classify(d, campus, rule_set)
            assert isinstance(result.category, DayCategory)
            assert result.academic_year == rule_set.academic_year

    def test_sunday_iff_weekday_is_sunday(self, factory, campus):
        rule_set = factory()
        classifier = DayClassifier()
        for d in iter_days(rule_set.start, rule_set.end):
            category = classifier.categorize(d, campus, rule_set)
            assert (category == DayCategory.SUNDAY) == (d.isoweekday() == 7), d

    def test_break_days_get_break_category(self, factory, campus):
        rule_set = factory()
        classifier = DayClassifier()
        for category, span in rule_set.break_ranges():
            for d in span.iter_days():
                if d.isoweekday() == 7:
                    continue
                assert classifier.categorize(d, campus, rule_set) == category, d

    def test_classification_is_repeatable(self, factory, campus):
        rule_set = factory()
        classifier = DayClassifier()
        for d in iter_days(rule_set.start, rule_set.end):
            assert classifier.classify(d, campus, rule_set) == classifier.classify(
                d, campus, rule_set
            )


# =============================================================================
# Convenience Function Tests
# =============================================================================

class TestConvenienceFunctions:
    """Tests for module-level helpers."""

    def test_categorize(self, rule_set_2025):
        assert categorize(date(2025, 8, 15), A, rule_set_2025) == DayCategory.SUMMER_BREAK

    def test_classify(self, rule_set_2026):
        result = classify(date(2026, 11, 23), S, rule_set_2026)
        assert isinstance(result, Classification)
        assert result.campus == S
        assert not result.is_class_day
