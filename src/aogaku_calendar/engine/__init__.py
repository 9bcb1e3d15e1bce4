"""
Academic Calendar Engine

Services:
- DayClassifier: Resolve a (date, campus) pair into one DayCategory
- CalendarRouter: Pick the academic year's rule set and delegate
- GridGenerator: Lay out the 42-day month grid
- term_week_number: Week-of-term numbering per weekday

Usage:
    from aogaku_calendar.engine import (
        CalendarRouter,
        DayClassifier,
        GridGenerator,
    )
"""
from __future__ import annotations

from .day_classifier import (
    TIER_MATCHERS,
    Classification,
    DayClassifier,
    categorize,
    classify,
)
from .grid_generator import (
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE,
    GridGenerator,
    grid_days,
)
from .week_counter import term_week_number
from .calendar_router import CalendarRouter

__all__ = [
    # Day Classifier
    "DayClassifier",
    "Classification",
    "TIER_MATCHERS",
    "categorize",
    "classify",
    # Grid Generator
    "GridGenerator",
    "GRID_ROWS",
    "GRID_COLUMNS",
    "GRID_SIZE",
    "grid_days",
    # Week Counter
    "term_week_number",
    # Router
    "CalendarRouter",
]
