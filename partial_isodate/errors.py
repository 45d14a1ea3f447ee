from __future__ import annotations

from .types import FailureKind, ParseFailure


class DateParseError(ValueError):
    kind: FailureKind

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text
        self.message = message

    def to_failure(self) -> ParseFailure:
        return ParseFailure(text=self.text, kind=self.kind, message=self.message)


class NoFormatMatch(DateParseError):
    """No length-eligible format matched the input."""

    kind: FailureKind = "no_format_match"

    def __init__(self, text: str):
        super().__init__(text, f"No matching date format for {text!r} (length {len(text)})")


class InvalidCalendarFields(DateParseError):
    """The input matched a format, but the fields do not name a real date."""

    kind: FailureKind = "invalid_calendar_fields"

    def __init__(self, text: str, *, fields: dict[str, int], format: str, reason: str):
        shown = ", ".join(f"{k}={v}" for k, v in fields.items())
        super().__init__(text, f"Invalid date {text!r} as {format} ({shown}): {reason}")
        self.fields = dict(fields)
        self.format = format
        self.reason = reason

    def to_failure(self) -> ParseFailure:
        return ParseFailure(text=self.text, kind=self.kind, message=self.message, fields=dict(self.fields))
