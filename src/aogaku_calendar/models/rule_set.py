"""
Academic Year Rule Set Models

A RuleSet bundles one academic year's hand-curated calendar facts:
breaks, exam periods, teaching terms, cancelled-class days, makeup days,
forced class days and national holidays.

Key components:
- Term: A named teaching term made of one or more contiguous ranges
- Holiday: A named holiday annotation (informational only)
- RuleSet: Top-level container, one per academic year (April to March)

RuleSets are immutable. The order in which their rules take precedence is
part of the data (``tiers``), not of the classifier.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .enums import DayCategory, Tier
from .ranges import EMPTY_DATE_SET, CampusDateSets, DateRange, DateSet


# Academic years run from April 1 to March 31 of the following year
ACADEMIC_YEAR_START_MONTH = 4


# =============================================================================
# Term
# =============================================================================

@dataclass(frozen=True)
class Term:
    """
    A teaching term.

    A term may be split into several ranges, e.g. an autumn term that
    pauses for winter break and resumes in January.

    Attributes:
        name: Term name (e.g., "spring", "autumn")
        ranges: Contiguous class-day ranges, in chronological order
    """
    name: str
    ranges: tuple[DateRange, ...]

    @property
    def start(self) -> date:
        return self.ranges[0].start

    @property
    def end(self) -> date:
        return self.ranges[-1].end

    @property
    def span(self) -> DateRange:
        """First day to last day of the term, including any pause."""
        return DateRange(self.start, self.end)

    def contains(self, d: date) -> bool:
        """Check if a date falls in one of the term's class-day ranges."""
        return any(r.contains(d) for r in self.ranges)


# =============================================================================
# Holiday
# =============================================================================

@dataclass(frozen=True)
class Holiday:
    """A named holiday. Never consulted during classification."""
    date: date
    name: str


# =============================================================================
# Rule Set
# =============================================================================

@dataclass(frozen=True)
class RuleSet:
    """
    Calendar rules for one academic year.

    Attributes:
        academic_year: Calendar year in which the academic year starts
        label: Human-readable label
        tiers: Orderable tiers, in the order this year evaluates them
        default_category: Category returned when no tier matched
        summer_break: Summer vacation range
        winter_break: Winter vacation range
        spring_break: Spring vacation range
        exams: Examination periods
        terms: Teaching terms
        kyuko: Cancelled-class days (common and per campus)
        makeup: Makeup days (common and per campus)
        forced_class_days: Holidays on which classes are still held
        national_holidays: National holidays treated as cancelled days
        holidays: Holiday names for display
    """
    academic_year: int
    label: str
    tiers: tuple[Tier, ...]
    default_category: DayCategory

    summer_break: DateRange
    winter_break: DateRange
    spring_break: DateRange
    exams: tuple[DateRange, ...] = ()
    terms: tuple[Term, ...] = ()

    kyuko: CampusDateSets = CampusDateSets()
    makeup: CampusDateSets = CampusDateSets()
    forced_class_days: DateSet = EMPTY_DATE_SET
    national_holidays: DateSet = EMPTY_DATE_SET

    holidays: tuple[Holiday, ...] = ()

    @property
    def start(self) -> date:
        return date(self.academic_year, ACADEMIC_YEAR_START_MONTH, 1)

    @property
    def end(self) -> date:
        return date(self.academic_year + 1, ACADEMIC_YEAR_START_MONTH - 1, 31)

    @property
    def span(self) -> DateRange:
        """April 1 to March 31 of the academic year."""
        return DateRange(self.start, self.end)

    def covers(self, d: date) -> bool:
        """Check if a date belongs to this academic year."""
        return self.span.contains(d)

    def break_ranges(self) -> tuple[tuple[DayCategory, DateRange], ...]:
        """Break ranges paired with the category they produce."""
        return (
            (DayCategory.SUMMER_BREAK, self.summer_break),
            (DayCategory.WINTER_BREAK, self.winter_break),
            (DayCategory.SPRING_BREAK, self.spring_break),
        )

    def break_category(self, d: date) -> Optional[DayCategory]:
        """Get the break category for a date, or None outside all breaks."""
        for category, period in self.break_ranges():
            if period.contains(d):
                return category
        return None

    def is_exam(self, d: date) -> bool:
        return any(r.contains(d) for r in self.exams)

    def is_term_day(self, d: date) -> bool:
        return any(term.contains(d) for term in self.terms)

    def term_for(self, d: date) -> Optional[Term]:
        """
        Get the term whose overall span contains a date.

        Pauses inside a term (e.g. winter break) still belong to the term.
        """
        for term in self.terms:
            if term.span.contains(d):
                return term
        return None

    def holiday_name(self, d: date) -> Optional[str]:
        """Get the holiday name for a date, if one is recorded."""
        for holiday in self.holidays:
            if holiday.date == d:
                return holiday.name
        return None

    def __str__(self) -> str:
        return f"RuleSet({self.label}, {self.span})"
