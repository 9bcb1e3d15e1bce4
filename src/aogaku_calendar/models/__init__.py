"""
Academic Calendar Models

Domain models for the academic calendar engine:

    from aogaku_calendar.models import (
        # Enums
        Campus, DayCategory, Tier,
        # Ranges
        DateRange, DateSet, CampusDateSets,
        # Rule sets
        RuleSet, Term, Holiday,
    )
"""
from __future__ import annotations

from .enums import (
    BREAK_CATEGORIES,
    DEFAULT_CATEGORIES,
    ORDERABLE_TIERS,
    Campus,
    DayCategory,
    Tier,
)
from .ranges import (
    EMPTY_DATE_SET,
    CampusDateSets,
    DateRange,
    DateSet,
)
from .rule_set import (
    ACADEMIC_YEAR_START_MONTH,
    Holiday,
    RuleSet,
    Term,
)

__all__ = [
    # Enums
    "Campus",
    "DayCategory",
    "Tier",
    "BREAK_CATEGORIES",
    "DEFAULT_CATEGORIES",
    "ORDERABLE_TIERS",
    # Ranges
    "DateRange",
    "DateSet",
    "CampusDateSets",
    "EMPTY_DATE_SET",
    # Rule sets
    "ACADEMIC_YEAR_START_MONTH",
    "Holiday",
    "RuleSet",
    "Term",
]
