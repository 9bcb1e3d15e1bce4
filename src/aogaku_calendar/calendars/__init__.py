"""
Academic Calendars

Civil-date helpers and the built-in academic year rule sets.

Provides:
- Civil timezone helpers (JST date normalization, academic-year keys)
- academic_year_2025() / academic_year_2026() rule set builders
- builtin_rule_sets() for wiring a router

Usage:
    from aogaku_calendar.calendars import (
        academic_year_of,
        builtin_rule_sets,
    )

    rule_sets = builtin_rule_sets()
    key = academic_year_of(date(2026, 3, 31))  # 2025
"""
from __future__ import annotations

from ..models import RuleSet
from .ay2025 import TIERS_2025, academic_year_2025
from .ay2026 import TIERS_2026, academic_year_2026
from .base import (
    CIVIL_TIMEZONE,
    ISO_MONDAY,
    ISO_SUNDAY,
    DateLike,
    academic_year_of,
    academic_year_span,
    add_months,
    civil_today,
    first_day_of_month,
    is_sunday,
    to_civil_date,
)


def builtin_rule_sets() -> tuple[RuleSet, ...]:
    """Build every compiled-in rule set, oldest first."""
    return (
        academic_year_2025(),
        academic_year_2026(),
    )


__all__ = [
    # Civil time
    "CIVIL_TIMEZONE",
    "ISO_MONDAY",
    "ISO_SUNDAY",
    "DateLike",
    "to_civil_date",
    "civil_today",
    "is_sunday",
    "academic_year_of",
    "academic_year_span",
    "first_day_of_month",
    "add_months",
    # Built-in years
    "TIERS_2025",
    "TIERS_2026",
    "academic_year_2025",
    "academic_year_2026",
    "builtin_rule_sets",
]
