from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Literal

Component = Literal["year", "month", "day"]
Strategy = Literal["plain", "ordinal", "week"]
FailureKind = Literal["no_format_match", "invalid_calendar_fields"]

COMPONENTS: tuple[str, ...] = ("year", "month", "day")


@dataclass(frozen=True)
class CapturedFields:
    """Numeric fields bound from a regex match, plus the components that were defaulted."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    week: int | None = None
    weekday: int | None = None
    missing: frozenset[str] = field(default_factory=frozenset)

    def as_dict(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for k in ("year", "month", "day", "day_of_year", "week", "weekday"):
            v = getattr(self, k)
            if v is not None:
                out[k] = v
        return out


@dataclass(frozen=True)
class MissingRecord:
    """Which of year/month/day were absent from the input text."""

    components: frozenset[str] = frozenset()

    def is_missing(self, component: str) -> bool:
        if component not in COMPONENTS:
            raise ValueError(f"Unknown date component: {component!r} (expected one of {', '.join(COMPONENTS)})")
        return component in self.components

    def __bool__(self) -> bool:
        return bool(self.components)


@dataclass(frozen=True)
class ParsedDate:
    d: date
    missing: MissingRecord
    format: str
    source: str

    def is_missing(self, component: str) -> bool:
        return self.missing.is_missing(component)

    def isoformat(self) -> str:
        return self.d.isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "input": self.source,
            "date": self.d.isoformat(),
            "format": self.format,
            "missing": [c for c in COMPONENTS if c in self.missing.components],
        }


@dataclass(frozen=True)
class ParseFailure:
    """Non-raising failure value returned by DateParser.try_parse."""

    text: str
    kind: FailureKind
    message: str
    fields: dict[str, int] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"input": self.text, "error": self.kind, "message": self.message}
        if self.fields is not None:
            out["fields"] = dict(self.fields)
        return out
