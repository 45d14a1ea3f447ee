from __future__ import annotations

import pytest

from partial_isodate.formats import FORMATS, LENGTHS, _fmt, candidates, match_format
from partial_isodate.normalize import add_month, missing_day


def test_table_shape() -> None:
    assert len(FORMATS) == 30
    for f in FORMATS:
        assert 1 <= len(f.lengths) <= 3
        assert f.pattern.groups == len(f.roles)
        assert f.strategy in ("plain", "ordinal", "week")

    assert LENGTHS == {2, 3, 4, 5, 6, 7, 8, 10, 11, 13}


def test_candidates_keep_table_order() -> None:
    names = [f.name for f in candidates(4)]
    assert names == ["YYYY", "--MM", "-DDD", "-Www", "-W-D"]
    assert candidates(9) == ()
    assert candidates(0) == ()


@pytest.mark.parametrize(
    "text,name",
    [
        ("19850412", "YYYYMMDD"),
        ("1985-04-12", "YYYY-MM-DD"),
        ("1985-04", "YYYY-MM"),
        ("1985", "YYYY"),
        ("19", "YY"),
        ("850412", "YYMMDD"),
        ("85-04-12", "YYMMDD"),
        ("-8504", "-YYMM"),
        ("-85-04", "-YYMM"),
        ("-85", "-YY"),
        ("--0412", "--MMDD"),
        ("--04-12", "--MMDD"),
        ("--04", "--MM"),
        ("---12", "---DD"),
        ("+0019850412", "+YYYYYYMMDD"),
        ("+001985-04-12", "+YYYYYYMMDD"),
        ("+001985-04", "+YYYYYY-MM"),
        ("+001985", "+YYYYYY"),
        ("+0019", "+YYYY"),
        ("1985102", "YYYYDDD"),
        ("1985-102", "YYYYDDD"),
        ("85102", "YYDDD"),
        ("85-102", "YYDDD"),
        ("-102", "-DDD"),
        ("+001985102", "+YYYYYYDDD"),
        ("+001985-102", "+YYYYYYDDD"),
        ("1985W155", "YYYYWwwD"),
        ("1985-W15-5", "YYYYWwwD"),
        ("1985W15", "YYYYWww"),
        ("1985-W15", "YYYYWww"),
        ("85W155", "YYWwwD"),
        ("85-W15-5", "YYWwwD"),
        ("85W15", "YYWww"),
        ("85-W15", "YYWww"),
        ("-5W155", "-YWwwD"),
        ("-5-W15-5", "-YWwwD"),
        ("-5W15", "-YWww"),
        ("-5-W15", "-YWww"),
        ("-W155", "-WwwD"),
        ("-W15-5", "-WwwD"),
        ("-W15", "-Www"),
        ("-W-5", "-W-D"),
        ("+001985W155", "+YYYYYYWwwD"),
        ("+001985-W15-5", "+YYYYYYWwwD"),
        ("+001985W15", "+YYYYYYWww"),
        ("+001985-W15", "+YYYYYYWww"),
    ],
)
def test_first_matching_format_wins(text: str, name: str) -> None:
    hit = match_format(text)
    assert hit is not None
    assert hit[0].name == name


@pytest.mark.parametrize(
    "text",
    [
        "",
        "123456789",  # no format of length 9
        "1985-0412",  # hyphens must be all-or-nothing for this length
        "198504-12",
        "85-0412",
        "+00198504-12",
        "1985/04/12",
        "abcd",
        "١٩٨٥",  # non-ASCII digits
        " 1985",
        "1985-W1",
    ],
)
def test_no_match(text: str) -> None:
    assert match_format(text) is None


def test_every_format_supplies_a_year() -> None:
    with pytest.raises(ValueError, match="no year"):
        _fmt("--MM-bad", 4, r"--(\d\d)", "month", (missing_day,))
    with pytest.raises(ValueError, match="no year"):
        _fmt("---DD-bad", 5, r"---(\d\d)", "day", (add_month,))
