"""
Calendar Router

Selects the rule set for a date's academic year and delegates to the day
classifier.

Key features:
- Academic-year key lookup (April to March)
- Explicit UnsupportedAcademicYearError for unregistered years
- Optional, explicitly configured fallback year
- Grid generation without any rule lookup
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..calendars.base import DateLike, academic_year_of, to_civil_date
from ..exceptions import (
    ConfigurationError,
    DuplicateAcademicYearError,
    UnsupportedAcademicYearError,
)
from ..models import Campus, DayCategory, RuleSet
from .day_classifier import Classification, DayClassifier
from .grid_generator import GridGenerator
from .week_counter import term_week_number


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarRouter:
    """
    Routes dates to the rule set of their academic year.

    Usage:
        router = CalendarRouter(rule_sets=builtin_rule_sets())

        category = router.categorize(date(2025, 10, 11), Campus.SAGAMIHARA)
        cells = router.grid_days(date(2026, 4, 1))

        try:
            router.route(date(2030, 5, 1))
        except UnsupportedAcademicYearError as exc:
            print(exc.to_dict())

    When ``fallback_year`` is set, dates in unregistered academic years are
    classified with that year's rules instead of raising, and a warning is
    logged for each such lookup.

    Routers are read-only after construction; build a new one to change
    the registered years or the fallback.
    """

    rule_sets: Iterable[RuleSet]
    fallback_year: Optional[int] = None
    classifier: DayClassifier = field(default_factory=DayClassifier)
    grid_generator: GridGenerator = field(default_factory=GridGenerator)

    _by_year: dict[int, RuleSet] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule_sets", tuple(self.rule_sets))
        for rule_set in self.rule_sets:
            if rule_set.academic_year in self._by_year:
                raise DuplicateAcademicYearError(
                    message=f"Rule set for academic year {rule_set.academic_year} "
                            f"registered more than once",
                    academic_year=rule_set.academic_year,
                )
            self._by_year[rule_set.academic_year] = rule_set

        if self.fallback_year is not None and self.fallback_year not in self._by_year:
            raise ConfigurationError(
                message=f"Fallback academic year {self.fallback_year} has no rule set",
                details={"supported_years": self.supported_years},
                academic_year=self.fallback_year,
            )

        logger.info(
            "Calendar router ready: years=%s fallback=%s",
            self.supported_years,
            self.fallback_year,
        )

    @property
    def supported_years(self) -> list[int]:
        """Academic years with a registered rule set, ascending."""
        return sorted(self._by_year)

    def supports(self, d: DateLike) -> bool:
        """Check if a rule set is registered for the date's academic year."""
        return academic_year_of(d) in self._by_year

    def route(self, d: DateLike) -> RuleSet:
        """
        Get the rule set for a date.

        Args:
            d: Date (or datetime, normalized to JST)

        Returns:
            Rule set of the date's academic year

        Raises:
            UnsupportedAcademicYearError: No rule set for the academic year
                and no fallback configured
        """
        day = to_civil_date(d)
        key = academic_year_of(day)

        rule_set = self._by_year.get(key)
        if rule_set is not None:
            return rule_set

        if self.fallback_year is not None:
            logger.warning(
                "No rule set for academic year %d (date %s); using fallback year %d",
                key,
                day.isoformat(),
                self.fallback_year,
            )
            return self._by_year[self.fallback_year]

        raise UnsupportedAcademicYearError(
            message=f"No rule set registered for {day.isoformat()}",
            details={
                "date": day.isoformat(),
                "supported_years": self.supported_years,
            },
            academic_year=key,
        )

    def classify(self, d: DateLike, campus: Campus) -> Classification:
        """Classify a day with its academic year's rules."""
        return self.classifier.classify(d, campus, self.route(d))

    def categorize(self, d: DateLike, campus: Campus) -> DayCategory:
        """Get the day category for a date and campus."""
        return self.classifier.categorize(d, campus, self.route(d))

    def is_class_day(self, d: DateLike, campus: Campus) -> bool:
        return self.categorize(d, campus) == DayCategory.CLASS_DAY

    def grid_days(self, month_reference: DateLike) -> list[date]:
        """Get the 42-day grid for a month. Never routes."""
        return self.grid_generator.grid(month_reference)

    def holiday_name(self, d: DateLike) -> Optional[str]:
        """Get the recorded holiday name for a date, if any."""
        return self.route(d).holiday_name(to_civil_date(d))

    def week_number(self, d: DateLike, campus: Campus) -> Optional[int]:
        """Get the term week number of a date for its weekday."""
        return term_week_number(d, campus, self.route(d), self.classifier)
