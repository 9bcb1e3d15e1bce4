"""
Pytest configuration and fixtures for academic calendar tests.

Provides helper factories and common fixtures for rule sets, the
classifier, the router and the grid generator.
"""
from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import Iterator

import pytest

from aogaku_calendar.calendars import academic_year_2025, academic_year_2026
from aogaku_calendar.engine import CalendarRouter, DayClassifier, GridGenerator
from aogaku_calendar.models import (
    CampusDateSets,
    DateRange,
    DateSet,
    DayCategory,
    RuleSet,
    Term,
    Tier,
)


FIXTURES_DIR = Path(__file__).parent / "fixtures"
PACKS_DIR = FIXTURES_DIR / "packs"


# =============================================================================
# Factory Helpers
# =============================================================================

def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def make_rule_set(
    academic_year: int = 2030,
    tiers: tuple[Tier, ...] = (
        Tier.BREAK_RANGE,
        Tier.EXAM_RANGE,
        Tier.KYUKO,
        Tier.MAKEUP,
    ),
    default_category: DayCategory = DayCategory.CLASS_DAY,
    **overrides,
) -> RuleSet:
    """
    Create a small, valid RuleSet for academic year 2030 by default.

    Breaks: summer Aug 1 - Sep 15, winter Dec 24 - Jan 6, spring Feb 10 - Mar 31.
    Exams: Jul 20 - Jul 31 and Jan 27 - Feb 7.
    """
    y = academic_year
    fields = dict(
        academic_year=y,
        label=f"AY{y}",
        tiers=tiers,
        default_category=default_category,
        summer_break=DateRange(date(y, 8, 1), date(y, 9, 15)),
        winter_break=DateRange(date(y, 12, 24), date(y + 1, 1, 6)),
        spring_break=DateRange(date(y + 1, 2, 10), date(y + 1, 3, 31)),
        exams=(
            DateRange(date(y, 7, 20), date(y, 7, 31)),
            DateRange(date(y + 1, 1, 27), date(y + 1, 2, 7)),
        ),
        kyuko=CampusDateSets(),
        makeup=CampusDateSets(),
    )
    fields.update(overrides)
    return RuleSet(**fields)


def make_term(name: str, *ranges: tuple[date, date]) -> Term:
    """Create a Term from (start, end) pairs."""
    return Term(name=name, ranges=tuple(DateRange(s, e) for s, e in ranges))


def make_day_set(*dates: date) -> DateSet:
    return DateSet.of(*dates)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rule_set_2025() -> RuleSet:
    return academic_year_2025()


@pytest.fixture
def rule_set_2026() -> RuleSet:
    return academic_year_2026()


@pytest.fixture
def classifier() -> DayClassifier:
    return DayClassifier()


@pytest.fixture
def grid_generator() -> GridGenerator:
    return GridGenerator()


@pytest.fixture
def router(rule_set_2025: RuleSet, rule_set_2026: RuleSet) -> CalendarRouter:
    return CalendarRouter(rule_sets=[rule_set_2025, rule_set_2026])
