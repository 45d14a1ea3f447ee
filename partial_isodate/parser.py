from __future__ import annotations

from datetime import date

import structlog

from .calendars import Calendar
from .errors import DateParseError, InvalidCalendarFields, NoFormatMatch
from .formats import FormatDescriptor, match_format
from .normalize import run_normalizers
from .types import CapturedFields, MissingRecord, ParsedDate, ParseFailure

logger = structlog.get_logger(__name__)


class DateParser:
    """Parse ISO-8601 date strings (including truncated forms) and track defaulted components.

    The parser holds no per-parse state, so one instance may be shared freely.
    """

    def __init__(self, calendar: Calendar | None = None):
        self.calendar = calendar or Calendar()

    def parse(self, text: str) -> ParsedDate:
        """Parse text or raise NoFormatMatch / InvalidCalendarFields."""

        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        hit = match_format(text)
        if hit is None:
            logger.debug("date_parse_failed", text=text, error=NoFormatMatch.kind)
            raise NoFormatMatch(text)
        fmt, m = hit

        fields = CapturedFields(**{role: int(v) for role, v in zip(fmt.roles, m.groups())})
        fields = run_normalizers(fields, fmt.normalizers, self.calendar.today())

        try:
            d = self._build(fmt, fields)
        except ValueError as exc:
            logger.debug("date_parse_failed", text=text, format=fmt.name, error=InvalidCalendarFields.kind)
            raise InvalidCalendarFields(text, fields=fields.as_dict(), format=fmt.name, reason=str(exc)) from exc

        missing = MissingRecord(fields.missing)
        logger.debug("date_parsed", text=text, format=fmt.name, date=d.isoformat(), missing=sorted(missing.components))
        return ParsedDate(d=d, missing=missing, format=fmt.name, source=text)

    def try_parse(self, text: str) -> ParsedDate | ParseFailure:
        try:
            return self.parse(text)
        except DateParseError as exc:
            return exc.to_failure()

    def _build(self, fmt: FormatDescriptor, f: CapturedFields) -> date:
        cal = self.calendar
        if fmt.strategy == "ordinal":
            return cal.from_day_of_year(f.year, f.day_of_year)
        if fmt.strategy == "week":
            return cal.from_iso_week(f.year, f.week, 1 if f.weekday is None else f.weekday)
        return cal.from_ymd(f.year, 1 if f.month is None else f.month, 1 if f.day is None else f.day)


def parse_date(text: str, *, base_date: date | None = None) -> ParsedDate:
    """Convenience wrapper: parse with an optional pinned processing date."""
    return DateParser(Calendar(base_date=base_date)).parse(text)
