"""Ordered table of supported ISO-8601 date spellings.

Order is priority: for a given input length the first descriptor whose
pattern matches wins. Hyphens are optional in the patterns; the length sets
decide which spellings are actually accepted (e.g. YYYY-MM-DD but not
YYYY-MMDD).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .normalize import (
    Normalizer,
    add_month,
    add_week,
    add_year,
    expand_century,
    fix_1_digit_year,
    fix_2_digit_year,
    missing_day,
    missing_month,
    missing_year,
)
from .types import Strategy

_YEAR_SOURCES: tuple[Normalizer, ...] = (add_year, add_week, missing_year)


@dataclass(frozen=True)
class FormatDescriptor:
    name: str
    lengths: frozenset[int]
    pattern: re.Pattern[str]
    roles: tuple[str, ...]
    normalizers: tuple[Normalizer, ...] = ()
    strategy: Strategy = "plain"

    def accepts_length(self, n: int) -> bool:
        return n in self.lengths


def _fmt(
    name: str,
    lengths: int | tuple[int, ...],
    regex: str,
    roles: str,
    normalizers: tuple[Normalizer, ...] = (),
    strategy: Strategy = "plain",
) -> FormatDescriptor:
    ls = (lengths,) if isinstance(lengths, int) else lengths
    pattern = re.compile(regex, re.ASCII)
    role_t = tuple(roles.split())
    if pattern.groups != len(role_t):
        raise ValueError(f"{name}: {pattern.groups} groups but {len(role_t)} roles")
    if "year" not in role_t and not any(n in _YEAR_SOURCES for n in normalizers):
        raise ValueError(f"{name}: no year captured or defaulted")
    return FormatDescriptor(
        name=name,
        lengths=frozenset(ls),
        pattern=pattern,
        roles=role_t,
        normalizers=normalizers,
        strategy=strategy,
    )


FORMATS: tuple[FormatDescriptor, ...] = (
    # Calendar dates
    _fmt("YYYYMMDD", 8, r"(\d{4})(\d\d)(\d\d)", "year month day"),
    _fmt("YYYY-MM-DD", 10, r"(\d{4})-(\d\d)-(\d\d)", "year month day"),
    _fmt("YYYY-MM", 7, r"(\d{4})-(\d\d)", "year month", (missing_day,)),
    _fmt("YYYY", 4, r"(\d{4})", "year", (missing_month, missing_day)),
    _fmt("YY", 2, r"(\d\d)", "year", (expand_century, missing_month, missing_day)),
    _fmt("YYMMDD", (6, 8), r"(\d\d)-?(\d\d)-?(\d\d)", "year month day", (fix_2_digit_year,)),
    _fmt("-YYMM", (5, 6), r"-(\d\d)-?(\d\d)", "year month", (fix_2_digit_year, missing_day)),
    _fmt("-YY", 3, r"-(\d\d)", "year", (fix_2_digit_year, missing_month, missing_day)),
    _fmt("--MMDD", (6, 7), r"--(\d\d)-?(\d\d)", "month day", (add_year, missing_year)),
    _fmt("--MM", 4, r"--(\d\d)", "month", (add_year, missing_year, missing_day)),
    _fmt("---DD", 5, r"---(\d\d)", "day", (add_year, add_month, missing_year, missing_month)),
    # Expanded (+YYYYYY) calendar dates
    _fmt("+YYYYYYMMDD", (11, 13), r"\+(\d{6})-?(\d\d)-?(\d\d)", "year month day"),
    _fmt("+YYYYYY-MM", 10, r"\+(\d{6})-(\d\d)", "year month"),
    _fmt("+YYYYYY", 7, r"\+(\d{6})", "year"),
    _fmt("+YYYY", 5, r"\+(\d{4})", "year", (expand_century,)),
    # Ordinal dates
    _fmt("YYYYDDD", (7, 8), r"(\d{4})-?(\d{3})", "year day_of_year", strategy="ordinal"),
    _fmt("YYDDD", (5, 6), r"(\d\d)-?(\d{3})", "year day_of_year", (fix_2_digit_year,), "ordinal"),
    _fmt("-DDD", 4, r"-(\d{3})", "day_of_year", (add_year,), "ordinal"),
    _fmt("+YYYYYYDDD", (10, 11), r"\+(\d{6})-?(\d{3})", "year day_of_year", strategy="ordinal"),
    # Week dates
    _fmt("YYYYWwwD", (8, 10), r"(\d{4})-?W(\d\d)-?(\d)", "year week weekday", strategy="week"),
    _fmt("YYYYWww", (7, 8), r"(\d{4})-?W(\d\d)", "year week", strategy="week"),
    _fmt("YYWwwD", (6, 8), r"(\d\d)-?W(\d\d)-?(\d)", "year week weekday", (fix_2_digit_year,), "week"),
    _fmt("YYWww", (5, 6), r"(\d\d)-?W(\d\d)", "year week", (fix_2_digit_year,), "week"),
    _fmt("-YWwwD", (6, 8), r"-(\d)-?W(\d\d)-?(\d)", "year week weekday", (fix_1_digit_year,), "week"),
    _fmt("-YWww", (5, 6), r"-(\d)-?W(\d\d)", "year week", (fix_1_digit_year,), "week"),
    _fmt("-WwwD", (5, 6), r"-W(\d\d)-?(\d)", "week weekday", (add_year,), "week"),
    _fmt("-Www", 4, r"-W(\d\d)", "week", (add_year,), "week"),
    _fmt("-W-D", 4, r"-W-(\d)", "weekday", (add_week,), "week"),
    _fmt("+YYYYYYWwwD", (11, 13), r"\+(\d{6})-?W(\d\d)-?(\d)", "year week weekday", strategy="week"),
    _fmt("+YYYYYYWww", (10, 11), r"\+(\d{6})-?W(\d\d)", "year week", strategy="week"),
)

LENGTHS: frozenset[int] = frozenset(n for f in FORMATS for n in f.lengths)


def candidates(length: int) -> tuple[FormatDescriptor, ...]:
    return tuple(f for f in FORMATS if f.accepts_length(length))


def match_format(text: str) -> tuple[FormatDescriptor, re.Match[str]] | None:
    """Return the first length-eligible descriptor whose pattern fully matches text."""

    for fmt in candidates(len(text)):
        m = fmt.pattern.fullmatch(text)
        if m:
            return fmt, m
    return None
