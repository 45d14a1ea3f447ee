"""Post-match fix-ups applied in table order to the captured fields.

Each normalizer takes the fields and the processing date and returns new
fields; the processing date only feeds defaults and century windows.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Callable

from .types import CapturedFields

Normalizer = Callable[[CapturedFields, date], CapturedFields]


def expand_century(f: CapturedFields, today: date) -> CapturedFields:
    """19 -> 1900, +0019 -> 1900."""
    return replace(f, year=f.year * 100)


def fix_2_digit_year(f: CapturedFields, today: date) -> CapturedFields:
    """Window a 2-digit year on the processing year: at or below it is this century."""
    century = today.year // 100
    if f.year <= today.year % 100:
        return replace(f, year=century * 100 + f.year)
    return replace(f, year=(century - 1) * 100 + f.year)


def fix_1_digit_year(f: CapturedFields, today: date) -> CapturedFields:
    return replace(f, year=today.year - today.year % 10 + f.year)


def add_year(f: CapturedFields, today: date) -> CapturedFields:
    return replace(f, year=today.year)


def add_month(f: CapturedFields, today: date) -> CapturedFields:
    return replace(f, month=today.month)


def add_week(f: CapturedFields, today: date) -> CapturedFields:
    # ISO year, not calendar year: Jan 1st may still belong to last year's week 52/53.
    iso = today.isocalendar()
    return replace(f, year=iso[0], week=iso[1])


def missing_year(f: CapturedFields, today: date) -> CapturedFields:
    year = today.year if f.year is None else f.year
    return replace(f, year=year, missing=f.missing | {"year"})


def missing_month(f: CapturedFields, today: date) -> CapturedFields:
    month = 1 if f.month is None else f.month
    return replace(f, month=month, missing=f.missing | {"month"})


def missing_day(f: CapturedFields, today: date) -> CapturedFields:
    day = 1 if f.day is None else f.day
    return replace(f, day=day, missing=f.missing | {"day"})


def run_normalizers(f: CapturedFields, normalizers: tuple[Normalizer, ...], today: date) -> CapturedFields:
    for fn in normalizers:
        f = fn(f, today)
    return f
