"""
Rule Set Integrity Validation

Catches malformed hand-curated rule data:
- Duplicate or misplaced precedence tiers
- Tiers omitted even though the rule set has data for them
- Reversed ranges
- Overlapping breaks, exams and terms
- Dates outside the academic year

Validation is a build/test-time check. The classifier never validates;
the rule pack loader validates every pack it loads.
"""
from __future__ import annotations

from datetime import date
from itertools import combinations

from .exceptions import RuleSetValidationError
from .models import (
    DEFAULT_CATEGORIES,
    ORDERABLE_TIERS,
    DateRange,
    DayCategory,
    RuleSet,
    Tier,
)


def _check_tiers(rule_set: RuleSet, errors: list[str]) -> None:
    seen: set[Tier] = set()
    for tier in rule_set.tiers:
        if tier not in ORDERABLE_TIERS:
            errors.append(f"Tier '{tier.value}' cannot appear in the tier list")
        if tier in seen:
            errors.append(f"Duplicate tier: '{tier.value}'")
        seen.add(tier)

    # A tier whose data is populated must be evaluated somewhere
    backed = {
        Tier.BREAK_RANGE: True,
        Tier.EXAM_RANGE: bool(rule_set.exams),
        Tier.MAKEUP: bool(rule_set.makeup),
        Tier.KYUKO: bool(rule_set.kyuko) or bool(rule_set.national_holidays),
        Tier.FORCED_CLASS_DAY: bool(rule_set.forced_class_days),
    }
    for tier, has_data in backed.items():
        if has_data and tier not in seen:
            errors.append(f"Tier '{tier.value}' omitted but the rule set has data for it")

    if rule_set.default_category not in DEFAULT_CATEGORIES:
        errors.append(
            f"Default category '{rule_set.default_category.value}' must be "
            f"'class_day' or 'kyuko'"
        )

    # Defaulting to cancelled days only makes sense if terms can say otherwise
    if rule_set.default_category == DayCategory.KYUKO:
        if Tier.TERM_RANGE not in seen:
            errors.append("Default 'kyuko' requires the 'term_range' tier")
        if not rule_set.terms:
            errors.append("Default 'kyuko' requires at least one term")


def _named_ranges(rule_set: RuleSet) -> list[tuple[str, DateRange]]:
    ranges = [
        (category.value, period) for category, period in rule_set.break_ranges()
    ]
    ranges.extend((f"exam[{i}]", r) for i, r in enumerate(rule_set.exams))
    for term in rule_set.terms:
        ranges.extend((f"term '{term.name}'[{i}]", r) for i, r in enumerate(term.ranges))
    return ranges


def _check_ranges(rule_set: RuleSet, errors: list[str]) -> None:
    span = rule_set.span

    for name, period in _named_ranges(rule_set):
        if period.start > period.end:
            errors.append(f"Range {name} is reversed: {period}")
        if not (span.contains(period.start) and span.contains(period.end)):
            errors.append(f"Range {name} lies outside the academic year: {period}")

    breaks = [(c.value, r) for c, r in rule_set.break_ranges()]
    exams = [(f"exam[{i}]", r) for i, r in enumerate(rule_set.exams)]
    terms = [
        (f"term '{t.name}'[{i}]", r)
        for t in rule_set.terms
        for i, r in enumerate(t.ranges)
    ]

    for (name_a, a), (name_b, b) in combinations(breaks + exams, 2):
        if a.overlaps(b):
            errors.append(f"Ranges {name_a} and {name_b} overlap")

    for name_t, t in terms:
        for name_o, other in breaks + exams:
            if t.overlaps(other):
                errors.append(f"Range {name_t} overlaps {name_o}")

    for term in rule_set.terms:
        for i in range(1, len(term.ranges)):
            if term.ranges[i].start <= term.ranges[i - 1].end:
                errors.append(f"Term '{term.name}' ranges are not in chronological order")


def _check_days(rule_set: RuleSet, errors: list[str]) -> None:
    span = rule_set.span
    named_days: list[tuple[str, frozenset[date]]] = [
        ("kyuko", rule_set.kyuko.all_dates()),
        ("makeup", rule_set.makeup.all_dates()),
        ("forced_class_days", rule_set.forced_class_days.dates),
        ("national_holidays", rule_set.national_holidays.dates),
        ("holidays", frozenset(h.date for h in rule_set.holidays)),
    ]
    for name, days in named_days:
        outside = sorted(d for d in days if not span.contains(d))
        if outside:
            listed = ", ".join(d.isoformat() for d in outside)
            errors.append(f"{name} has dates outside the academic year: {listed}")


def validate_rule_set(rule_set: RuleSet) -> list[str]:
    """
    Validate a rule set's internal consistency.

    Args:
        rule_set: The rule set to validate

    Returns:
        List of error messages (empty if the rule set is valid)
    """
    errors: list[str] = []
    _check_tiers(rule_set, errors)
    _check_ranges(rule_set, errors)
    _check_days(rule_set, errors)
    return errors


def check_rule_set(rule_set: RuleSet, source: str = "") -> None:
    """
    Validate a rule set and raise if it is malformed.

    Args:
        rule_set: The rule set to validate
        source: Where the rule set came from, for error messages

    Raises:
        RuleSetValidationError: If any integrity errors are found
    """
    errors = validate_rule_set(rule_set)
    if errors:
        source_str = f" in {source}" if source else ""
        raise RuleSetValidationError(
            message=f"Rule set integrity errors{source_str}:\n"
                    + "\n".join(f"  - {e}" for e in errors),
            details={"errors": errors, "source": source},
            academic_year=rule_set.academic_year,
        )
