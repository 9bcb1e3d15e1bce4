"""
Day Classifier

Resolves a (date, campus) pair into exactly one DayCategory using the
precedence tiers of a RuleSet.

Key features:
- Sunday is always evaluated first and wins unconditionally
- The tiers in between are evaluated in the rule set's own order
- The rule set's default category applies when no tier matched
- One generic evaluator for every academic year
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..calendars.base import DateLike, is_sunday, to_civil_date
from ..models import Campus, DayCategory, RuleSet, Tier


# =============================================================================
# Classification Result
# =============================================================================

@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one day.

    Attributes:
        date: Civil date that was classified
        campus: Campus the classification applies to
        category: Resulting day category
        tier: Tier that produced the category (DEFAULT if none matched)
        academic_year: Academic year of the rule set used
    """
    date: date
    campus: Campus
    category: DayCategory
    tier: Tier
    academic_year: int

    @property
    def is_class_day(self) -> bool:
        return self.category == DayCategory.CLASS_DAY


# =============================================================================
# Tier Matchers
# =============================================================================

TierMatcher = Callable[[date, Campus, RuleSet], Optional[DayCategory]]


def _match_break(d: date, campus: Campus, rule_set: RuleSet) -> Optional[DayCategory]:
    return rule_set.break_category(d)


def _match_exam(d: date, campus: Campus, rule_set: RuleSet) -> Optional[DayCategory]:
    if rule_set.is_exam(d):
        return DayCategory.EXAM
    return None


def _match_forced_class_day(
    d: date, campus: Campus, rule_set: RuleSet
) -> Optional[DayCategory]:
    if rule_set.forced_class_days.contains(d):
        return DayCategory.CLASS_DAY
    return None


def _match_makeup(d: date, campus: Campus, rule_set: RuleSet) -> Optional[DayCategory]:
    if rule_set.makeup.contains(d, campus):
        return DayCategory.MAKEUP
    return None


def _match_kyuko(d: date, campus: Campus, rule_set: RuleSet) -> Optional[DayCategory]:
    # Common set, national holidays, then the campus-specific set
    if rule_set.kyuko.common.contains(d):
        return DayCategory.KYUKO
    if rule_set.national_holidays.contains(d):
        return DayCategory.KYUKO
    if rule_set.kyuko.for_campus(campus).contains(d):
        return DayCategory.KYUKO
    return None


def _match_term(d: date, campus: Campus, rule_set: RuleSet) -> Optional[DayCategory]:
    if rule_set.is_term_day(d):
        return DayCategory.CLASS_DAY
    return None


TIER_MATCHERS: dict[Tier, TierMatcher] = {
    Tier.BREAK_RANGE: _match_break,
    Tier.EXAM_RANGE: _match_exam,
    Tier.FORCED_CLASS_DAY: _match_forced_class_day,
    Tier.MAKEUP: _match_makeup,
    Tier.KYUKO: _match_kyuko,
    Tier.TERM_RANGE: _match_term,
}


# =============================================================================
# Day Classifier
# =============================================================================

@dataclass(frozen=True)
class DayClassifier:
    """
    Generic precedence evaluator over a rule set's tier list.

    Usage:
        classifier = DayClassifier()
        category = classifier.categorize(date(2025, 8, 15), Campus.AOYAMA, rule_set)

        result = classifier.classify(date(2026, 10, 12), Campus.AOYAMA, rule_set)
        print(result.category, result.tier)
    """

    def classify(self, d: DateLike, campus: Campus, rule_set: RuleSet) -> Classification:
        """
        Classify a day and report which tier decided it.

        Args:
            d: Date (or datetime, normalized to JST)
            campus: Campus to classify for
            rule_set: Rule set of the date's academic year

        Returns:
            Classification with the category and deciding tier
        """
        day = to_civil_date(d)

        if is_sunday(day):
            return self._result(day, campus, DayCategory.SUNDAY, Tier.SUNDAY, rule_set)

        for tier in rule_set.tiers:
            category = TIER_MATCHERS[tier](day, campus, rule_set)
            if category is not None:
                return self._result(day, campus, category, tier, rule_set)

        return self._result(day, campus, rule_set.default_category, Tier.DEFAULT, rule_set)

    def categorize(self, d: DateLike, campus: Campus, rule_set: RuleSet) -> DayCategory:
        """Get the day category for a date and campus."""
        return self.classify(d, campus, rule_set).category

    def is_class_day(self, d: DateLike, campus: Campus, rule_set: RuleSet) -> bool:
        """Check if ordinary classes are held on a date."""
        return self.categorize(d, campus, rule_set) == DayCategory.CLASS_DAY

    def _result(
        self,
        day: date,
        campus: Campus,
        category: DayCategory,
        tier: Tier,
        rule_set: RuleSet,
    ) -> Classification:
        return Classification(
            date=day,
            campus=campus,
            category=category,
            tier=tier,
            academic_year=rule_set.academic_year,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def categorize(d: DateLike, campus: Campus, rule_set: RuleSet) -> DayCategory:
    """
    Categorize a day against a rule set.

    Convenience function that creates a temporary classifier.
    """
    return DayClassifier().categorize(d, campus, rule_set)


def classify(d: DateLike, campus: Campus, rule_set: RuleSet) -> Classification:
    """Classify a day against a rule set, including the deciding tier."""
    return DayClassifier().classify(d, campus, rule_set)
