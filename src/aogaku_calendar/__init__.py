"""
Aogaku Calendar - Academic Calendar Classification Engine

Decides, for any date and campus, what kind of academic day it is
(class day, cancelled class, makeup day, exam, break, Sunday), and lays
out the 42-day month grid used by calendar views.

Key Features:
- Per-academic-year rule sets (April to March), immutable
- Per-year precedence order, evaluated by one generic classifier
- Explicit error for dates outside every registered academic year
- Month grids of six Monday-first weeks
- Term week numbering and holiday names
- Extra academic years from YAML/JSON rule packs

Quick Start:
    from datetime import date

    from aogaku_calendar import Campus, CalendarRouter, builtin_rule_sets

    router = CalendarRouter(rule_sets=builtin_rule_sets())

    router.categorize(date(2025, 10, 11), Campus.SAGAMIHARA)  # DayCategory.KYUKO
    router.grid_days(date(2026, 2, 1))                        # 42 dates

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    Campus,
    CampusDateSets,
    DateRange,
    DateSet,
    DayCategory,
    Holiday,
    RuleSet,
    Term,
    Tier,
)

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    CIVIL_TIMEZONE,
    academic_year_2025,
    academic_year_2026,
    academic_year_of,
    builtin_rule_sets,
    to_civil_date,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    CalendarRouter,
    Classification,
    DayClassifier,
    GridGenerator,
    categorize,
    grid_days,
    term_week_number,
)

# =============================================================================
# Packs, Validation and Configuration
# =============================================================================
from .packs import RulePackLoader, load_rule_pack
from .validators import check_rule_set, validate_rule_set
from .config import CalendarSettings, create_router

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    AcademicCalendarError,
    ConfigurationError,
    DuplicateAcademicYearError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
    RuleSetValidationError,
    UnsupportedAcademicYearError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Models
    "Campus",
    "DayCategory",
    "Tier",
    "DateRange",
    "DateSet",
    "CampusDateSets",
    "Holiday",
    "RuleSet",
    "Term",
    # Calendars
    "CIVIL_TIMEZONE",
    "to_civil_date",
    "academic_year_of",
    "academic_year_2025",
    "academic_year_2026",
    "builtin_rule_sets",
    # Engine
    "DayClassifier",
    "Classification",
    "CalendarRouter",
    "GridGenerator",
    "categorize",
    "grid_days",
    "term_week_number",
    # Packs, validation, configuration
    "RulePackLoader",
    "load_rule_pack",
    "validate_rule_set",
    "check_rule_set",
    "CalendarSettings",
    "create_router",
    # Exceptions
    "AcademicCalendarError",
    "UnsupportedAcademicYearError",
    "DuplicateAcademicYearError",
    "ConfigurationError",
    "RuleSetValidationError",
    "RulePackLoadError",
    "RulePackValidationError",
    "RulePackVersionMismatch",
]
