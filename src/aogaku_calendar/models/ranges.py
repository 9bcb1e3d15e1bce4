"""
Date Range and Date Set Models

Inclusive calendar-day ranges and unordered sets of calendar days.
Dates carry no time-of-day; comparisons are by civil calendar day.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Iterator, Mapping, Optional

from .enums import Campus


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of calendar days.

    Attributes:
        start: First day of the range
        end: Last day of the range (inclusive)
    """
    start: date
    end: date

    def contains(self, d: date) -> bool:
        """Check if start <= d <= end."""
        return self.start <= d <= self.end

    def __contains__(self, d: object) -> bool:
        return isinstance(d, date) and self.contains(d)

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

    def iter_days(self) -> Iterator[date]:
        """Yield every day in the range in order."""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def overlaps(self, other: DateRange) -> bool:
        """Check if the two ranges share at least one day."""
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class DateSet:
    """Unordered collection of distinct calendar days."""
    dates: frozenset[date] = field(default_factory=frozenset)

    def contains(self, d: date) -> bool:
        return d in self.dates

    def __contains__(self, d: object) -> bool:
        return d in self.dates

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self.dates))

    def __len__(self) -> int:
        return len(self.dates)

    def __bool__(self) -> bool:
        return bool(self.dates)

    @classmethod
    def of(cls, *dates: date) -> DateSet:
        """Create a set from individual dates."""
        return cls(dates=frozenset(dates))

    @classmethod
    def from_iterable(cls, dates: Iterable[date]) -> DateSet:
        return cls(dates=frozenset(dates))


EMPTY_DATE_SET = DateSet()


@dataclass(frozen=True)
class CampusDateSets:
    """
    A day set shared by all campuses plus per-campus additions.

    Campus-specific sets are stored as sorted (campus, set) pairs so the
    dataclass stays hashable.
    """
    common: DateSet = EMPTY_DATE_SET
    by_campus: tuple[tuple[Campus, DateSet], ...] = ()

    @classmethod
    def build(
        cls,
        common: Iterable[date] = (),
        campus_only: Optional[Mapping[Campus, Iterable[date]]] = None,
    ) -> CampusDateSets:
        """Build from plain date iterables."""
        pairs = tuple(
            (campus, DateSet.from_iterable(dates))
            for campus, dates in sorted(
                (campus_only or {}).items(), key=lambda item: item[0].value
            )
            if dates
        )
        return cls(common=DateSet.from_iterable(common), by_campus=pairs)

    def for_campus(self, campus: Campus) -> DateSet:
        """Get the campus-specific set (empty if the campus has none)."""
        for key, dates in self.by_campus:
            if key == campus:
                return dates
        return EMPTY_DATE_SET

    def contains(self, d: date, campus: Campus) -> bool:
        """Check the common set, then the campus-specific set."""
        if self.common.contains(d):
            return True
        return self.for_campus(campus).contains(d)

    def all_dates(self) -> frozenset[date]:
        """Every date in the common and campus-specific sets."""
        result = set(self.common.dates)
        for _, dates in self.by_campus:
            result.update(dates.dates)
        return frozenset(result)

    def __bool__(self) -> bool:
        return bool(self.common) or any(bool(dates) for _, dates in self.by_campus)
