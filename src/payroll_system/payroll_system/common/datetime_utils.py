from __future__ import annotations

import calendar
from datetime import date


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month, both inclusive."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
