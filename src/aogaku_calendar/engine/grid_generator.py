"""
Month Grid Generator

Produces the fixed 6 x 7 (Monday-first) grid of dates used to lay out a
month view. Grid generation never consults rule sets; cells that belong
to neighbouring months are included as-is and styled by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..calendars.base import DateLike, add_months, first_day_of_month


GRID_ROWS = 6
GRID_COLUMNS = 7
GRID_SIZE = GRID_ROWS * GRID_COLUMNS


@dataclass(frozen=True)
class GridGenerator:
    """
    Month grid layout.

    Usage:
        generator = GridGenerator()
        cells = generator.grid(date(2026, 2, 14))   # 42 dates, Mon 2026-01-26 first
        weeks = generator.rows(date(2026, 2, 14))   # 6 lists of 7 dates
    """

    def grid_start(self, month_reference: DateLike) -> date:
        """
        Get the first cell of the month's grid.

        This is the Monday on or before the first day of the month: the
        first day itself when it is a Monday, six days earlier when it is
        a Sunday.
        """
        first = first_day_of_month(month_reference)
        return first - timedelta(days=first.weekday())

    def grid(self, month_reference: DateLike) -> list[date]:
        """
        Get the 42 consecutive days shown for a month.

        Args:
            month_reference: Any date within the target month

        Returns:
            Six full Monday-to-Sunday weeks covering the month
        """
        start = self.grid_start(month_reference)
        return [start + timedelta(days=offset) for offset in range(GRID_SIZE)]

    def rows(self, month_reference: DateLike) -> list[list[date]]:
        """Get the grid split into six weeks."""
        cells = self.grid(month_reference)
        return [
            cells[row * GRID_COLUMNS:(row + 1) * GRID_COLUMNS]
            for row in range(GRID_ROWS)
        ]

    def shift_month(self, month_reference: DateLike, months: int) -> date:
        """Get the first day of the month ``months`` away (for paging)."""
        return add_months(month_reference, months)


def grid_days(month_reference: DateLike) -> list[date]:
    """Get the 42-day grid for a month using a temporary generator."""
    return GridGenerator().grid(month_reference)
