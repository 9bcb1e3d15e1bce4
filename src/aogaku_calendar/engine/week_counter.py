"""
Term Week Counter

Answers "which week of the term is this for its weekday": the number of
days with the same weekday, from the start of the term up to the date,
on which ordinary classes were actually held.

A Monday-only course that lost one Monday to a national holiday is one
week behind a Tuesday course, so the count is per weekday rather than
per calendar week.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Optional

from ..calendars.base import DateLike, is_sunday, to_civil_date
from ..models import Campus, DayCategory, RuleSet
from .day_classifier import DayClassifier


def term_week_number(
    d: DateLike,
    campus: Campus,
    rule_set: RuleSet,
    classifier: Optional[DayClassifier] = None,
) -> Optional[int]:
    """
    Get the term week number of a date for its weekday.

    Args:
        d: Date to number
        campus: Campus whose cancellations apply
        rule_set: Rule set of the date's academic year
        classifier: Classifier to use (default: a new DayClassifier)

    Returns:
        1-based week number, or None when the date is a Sunday, lies
        outside every term, or no class has been held on its weekday yet
    """
    day = to_civil_date(d)
    if is_sunday(day):
        return None

    term = rule_set.term_for(day)
    if term is None:
        return None

    if classifier is None:
        classifier = DayClassifier()

    # First occurrence of the same weekday on or after the term start
    offset = (day.weekday() - term.start.weekday()) % 7
    cursor = term.start + timedelta(days=offset)

    count = 0
    while cursor <= day:
        if classifier.categorize(cursor, campus, rule_set) == DayCategory.CLASS_DAY:
            count += 1
        cursor += timedelta(weeks=1)

    return count if count > 0 else None
