from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, timedelta

from dotenv import load_dotenv

BASE_DATE_ENV = "PARTIAL_ISODATE_BASE_DATE"


def days_in_year(year: int) -> int:
    leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    return 366 if leap else 365


@dataclass(frozen=True)
class Calendar:
    """Builds concrete dates and supplies the processing date used for defaults.

    All constructors raise ValueError when the fields do not name a real date.
    Pass base_date to pin "today" (tests, reproducible batch runs).
    """

    base_date: date | None = None

    @classmethod
    def from_env(cls) -> "Calendar":
        load_dotenv()
        raw = os.environ.get(BASE_DATE_ENV, "").strip()
        if not raw:
            return cls()
        try:
            base = date.fromisoformat(raw)
        except ValueError:
            raise RuntimeError(f"Invalid {BASE_DATE_ENV}={raw!r} (expected YYYY-MM-DD)") from None
        return cls(base_date=base)

    def today(self) -> date:
        return self.base_date or date.today()

    def from_ymd(self, year: int, month: int, day: int) -> date:
        return date(year, month, day)

    def from_day_of_year(self, year: int, day_of_year: int) -> date:
        first = date(year, 1, 1)
        n = days_in_year(year)
        if not 1 <= day_of_year <= n:
            raise ValueError(f"day of year must be in 1..{n} for {year}")
        return first + timedelta(days=day_of_year - 1)

    def from_iso_week(self, year: int, week: int, weekday: int = 1) -> date:
        # fromisocalendar rejects week 53 in 52-week years and weekdays outside 1..7
        return date.fromisocalendar(year, week, weekday)
