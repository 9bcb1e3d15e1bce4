"""
Academic Year 2025 (April 2025 - March 2026)

Long vacations:
- Summer break: August 1 - September 18
- Winter break: December 23 - January 3
- Spring break: February 4 - March 31

Examination periods:
- Spring semester: July 24 - July 31
- Autumn semester: January 27 - February 3

Cancelled classes (both campuses): May 3, 5, 6; September 23;
October 31; November 1, 3, 24; January 12.
Sagamihara only: October 11 (Sagamihara festival).
Aoyama only: January 16, 17 (university entrance test).

Makeup days: July 23, January 21, 22 (both campuses); January 23
(Sagamihara only).

Precedence: cancelled days are checked before makeup days, and any
date no rule mentions is a class day.

Holiday names cover the named national holidays only. The substitute
holidays (May 6, November 24) cancel classes but carry no display name.
"""
from __future__ import annotations

from datetime import date

from ..models import (
    Campus,
    CampusDateSets,
    DateRange,
    DayCategory,
    Holiday,
    RuleSet,
    Term,
    Tier,
)


ACADEMIC_YEAR = 2025

TIERS_2025 = (
    Tier.BREAK_RANGE,
    Tier.EXAM_RANGE,
    Tier.KYUKO,
    Tier.MAKEUP,
)

HOLIDAYS_2025 = (
    Holiday(date(2025, 4, 29), "Showa Day"),
    Holiday(date(2025, 5, 3), "Constitution Memorial Day"),
    Holiday(date(2025, 5, 4), "Greenery Day"),
    Holiday(date(2025, 5, 5), "Children's Day"),
    Holiday(date(2025, 7, 21), "Marine Day"),
    Holiday(date(2025, 8, 11), "Mountain Day"),
    Holiday(date(2025, 9, 15), "Respect for the Aged Day"),
    Holiday(date(2025, 9, 23), "Autumnal Equinox Day"),
    Holiday(date(2025, 10, 13), "Sports Day"),
    Holiday(date(2025, 11, 3), "Culture Day"),
    Holiday(date(2025, 11, 23), "Labor Thanksgiving Day"),
    Holiday(date(2026, 1, 1), "New Year's Day"),
    Holiday(date(2026, 1, 12), "Coming of Age Day"),
    Holiday(date(2026, 2, 11), "National Foundation Day"),
    Holiday(date(2026, 2, 23), "Emperor's Birthday"),
    Holiday(date(2026, 3, 20), "Vernal Equinox Day"),
)


def academic_year_2025() -> RuleSet:
    """Build the rule set for academic year 2025."""
    return RuleSet(
        academic_year=ACADEMIC_YEAR,
        label="AY2025",
        tiers=TIERS_2025,
        default_category=DayCategory.CLASS_DAY,
        summer_break=DateRange(date(2025, 8, 1), date(2025, 9, 18)),
        winter_break=DateRange(date(2025, 12, 23), date(2026, 1, 3)),
        spring_break=DateRange(date(2026, 2, 4), date(2026, 3, 31)),
        exams=(
            DateRange(date(2025, 7, 24), date(2025, 7, 31)),
            DateRange(date(2026, 1, 27), date(2026, 2, 3)),
        ),
        # Only the autumn term is recorded for this year; it is used for
        # week numbering, not classification.
        terms=(
            Term(
                name="autumn",
                ranges=(
                    DateRange(date(2025, 9, 19), date(2025, 12, 22)),
                    DateRange(date(2026, 1, 4), date(2026, 1, 26)),
                ),
            ),
        ),
        kyuko=CampusDateSets.build(
            common=[
                date(2025, 5, 3), date(2025, 5, 5), date(2025, 5, 6),
                date(2025, 9, 23),
                date(2025, 10, 31),
                date(2025, 11, 1), date(2025, 11, 3), date(2025, 11, 24),
                date(2026, 1, 12),
            ],
            campus_only={
                Campus.SAGAMIHARA: [date(2025, 10, 11)],
                Campus.AOYAMA: [date(2026, 1, 16), date(2026, 1, 17)],
            },
        ),
        makeup=CampusDateSets.build(
            common=[date(2025, 7, 23), date(2026, 1, 21), date(2026, 1, 22)],
            campus_only={
                Campus.SAGAMIHARA: [date(2026, 1, 23)],
            },
        ),
        holidays=HOLIDAYS_2025,
    )
