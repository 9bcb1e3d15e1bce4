"""
Academic Calendar Enumerations

All enumeration types used throughout the calendar engine.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Campus
# =============================================================================

class Campus(str, Enum):
    """Campuses with their own cancellation and makeup schedules."""
    AOYAMA = "aoyama"
    SAGAMIHARA = "sagamihara"


# =============================================================================
# Day Categories
# =============================================================================

class DayCategory(str, Enum):
    """
    What kind of academic day a date is.

    Exactly one category applies to any (date, campus) pair.
    """
    CLASS_DAY = "class_day"            # Ordinary instruction
    SUNDAY = "sunday"                  # No classes on Sundays
    KYUKO = "kyuko"                    # Classes cancelled by the university
    MAKEUP = "makeup"                  # Compensatory instruction only
    EXAM = "exam"                      # Final examination period
    SUMMER_BREAK = "summer_break"
    WINTER_BREAK = "winter_break"
    SPRING_BREAK = "spring_break"

    @property
    def is_break(self) -> bool:
        """True for the three long vacation categories."""
        return self in BREAK_CATEGORIES


BREAK_CATEGORIES = frozenset({
    DayCategory.SUMMER_BREAK,
    DayCategory.WINTER_BREAK,
    DayCategory.SPRING_BREAK,
})

# Categories a rule set may fall back to when no tier matched
DEFAULT_CATEGORIES = frozenset({
    DayCategory.CLASS_DAY,
    DayCategory.KYUKO,
})


# =============================================================================
# Precedence Tiers
# =============================================================================

class Tier(str, Enum):
    """
    Precedence tiers evaluated by the day classifier.

    SUNDAY is always evaluated first and DEFAULT always last. The tiers in
    between are ordered per rule set.
    """
    SUNDAY = "sunday"
    BREAK_RANGE = "break_range"
    EXAM_RANGE = "exam_range"
    FORCED_CLASS_DAY = "forced_class_day"
    MAKEUP = "makeup"
    KYUKO = "kyuko"
    TERM_RANGE = "term_range"
    DEFAULT = "default"


ORDERABLE_TIERS = frozenset({
    Tier.BREAK_RANGE,
    Tier.EXAM_RANGE,
    Tier.FORCED_CLASS_DAY,
    Tier.MAKEUP,
    Tier.KYUKO,
    Tier.TERM_RANGE,
})
