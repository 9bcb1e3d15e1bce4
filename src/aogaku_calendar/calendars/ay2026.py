"""
Academic Year 2026 (April 2026 - March 2027)

Teaching terms:
- Spring term: April 6 - July 23
- Autumn term: September 14 - December 22, resuming January 8 - January 25

Examination periods:
- Spring semester: July 24 - July 31
- Autumn semester: January 26 - February 2

Long vacations:
- Summer break: August 1 - September 12
- Winter break: December 23 - January 7
- Spring break: February 3 - March 27

Some national holidays are explicitly documented as class days
(Showa Day, Marine Day, Respect for the Aged Day, Sports Day) and so
is the university's founding day. Every other national holiday cancels
classes.

Precedence: makeup days first, then forced class days, then cancelled
days, then the term ranges. Any date outside the terms is treated as a
cancelled day.
"""
from __future__ import annotations

from datetime import date

from ..models import (
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


ACADEMIC_YEAR = 2026

TIERS_2026 = (
    Tier.BREAK_RANGE,
    Tier.EXAM_RANGE,
    Tier.MAKEUP,
    Tier.FORCED_CLASS_DAY,
    Tier.KYUKO,
    Tier.TERM_RANGE,
)

HOLIDAYS_2026 = (
    Holiday(date(2026, 4, 29), "Showa Day"),
    Holiday(date(2026, 5, 3), "Constitution Memorial Day"),
    Holiday(date(2026, 5, 4), "Greenery Day"),
    Holiday(date(2026, 5, 5), "Children's Day"),
    Holiday(date(2026, 5, 6), "Substitute Holiday"),
    Holiday(date(2026, 7, 20), "Marine Day"),
    Holiday(date(2026, 8, 11), "Mountain Day"),
    Holiday(date(2026, 9, 21), "Respect for the Aged Day"),
    Holiday(date(2026, 9, 22), "Citizens' Holiday"),
    Holiday(date(2026, 9, 23), "Autumnal Equinox Day"),
    Holiday(date(2026, 10, 12), "Sports Day"),
    Holiday(date(2026, 11, 3), "Culture Day"),
    Holiday(date(2026, 11, 16), "Founding Day"),
    Holiday(date(2026, 11, 23), "Labor Thanksgiving Day"),
    Holiday(date(2027, 1, 1), "New Year's Day"),
    Holiday(date(2027, 1, 11), "Coming of Age Day"),
    Holiday(date(2027, 2, 11), "National Foundation Day"),
    Holiday(date(2027, 2, 23), "Emperor's Birthday"),
    Holiday(date(2027, 3, 21), "Vernal Equinox Day"),
    Holiday(date(2027, 3, 22), "Substitute Holiday"),
)


def academic_year_2026() -> RuleSet:
    """Build the rule set for academic year 2026."""
    return RuleSet(
        academic_year=ACADEMIC_YEAR,
        label="AY2026",
        tiers=TIERS_2026,
        default_category=DayCategory.KYUKO,
        summer_break=DateRange(date(2026, 8, 1), date(2026, 9, 12)),
        winter_break=DateRange(date(2026, 12, 23), date(2027, 1, 7)),
        spring_break=DateRange(date(2027, 2, 3), date(2027, 3, 27)),
        exams=(
            DateRange(date(2026, 7, 24), date(2026, 7, 31)),
            DateRange(date(2027, 1, 26), date(2027, 2, 2)),
        ),
        terms=(
            Term(
                name="spring",
                ranges=(DateRange(date(2026, 4, 6), date(2026, 7, 23)),),
            ),
            Term(
                name="autumn",
                ranges=(
                    DateRange(date(2026, 9, 14), date(2026, 12, 22)),
                    DateRange(date(2027, 1, 8), date(2027, 1, 25)),
                ),
            ),
        ),
        kyuko=CampusDateSets.build(
            common=[
                # Aoyama festival
                date(2026, 10, 30), date(2026, 10, 31), date(2026, 11, 1),
                date(2026, 11, 2),
            ],
            campus_only={
                # University entrance test preparation and exam days
                Campus.AOYAMA: [date(2027, 1, 15), date(2027, 1, 16)],
                # Sagamihara festival
                Campus.SAGAMIHARA: [date(2026, 10, 10)],
            },
        ),
        makeup=CampusDateSets.build(
            common=[date(2026, 7, 23), date(2027, 1, 21)],
            campus_only={
                # Aoyama holds ordinary classes on this day
                Campus.SAGAMIHARA: [date(2027, 1, 22)],
            },
        ),
        forced_class_days=DateSet.of(
            date(2026, 4, 29),
            date(2026, 7, 20),
            date(2026, 9, 21),
            date(2026, 10, 12),
            date(2026, 11, 16),
        ),
        national_holidays=DateSet.of(
            date(2026, 5, 3),
            date(2026, 5, 4),
            date(2026, 5, 5),
            date(2026, 5, 6),
            date(2026, 8, 11),
            date(2026, 9, 22),
            date(2026, 9, 23),
            date(2026, 11, 3),
            date(2026, 11, 23),
            date(2027, 1, 1),
            date(2027, 1, 11),
            date(2027, 2, 11),
            date(2027, 2, 23),
            # March 21 is a Sunday; only the substitute holiday is listed
            date(2027, 3, 22),
        ),
        holidays=HOLIDAYS_2026,
    )
