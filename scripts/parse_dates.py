#!/usr/bin/env python3
"""Parse ISO-8601 date strings and report which components were missing.

Prints one JSON object per input. Exit status is 1 if any input failed.

Usage:
  python3 scripts/parse_dates.py 1985 1985-04 1985-W15-5
  python3 scripts/parse_dates.py --base-date 2024-06-01 -- 850412 --0412 -W-5
  printf '1985\\n--0412\\n' | python3 scripts/parse_dates.py

Truncated forms start with '-', so put them after '--' (or feed them on stdin).

The processing date (used for 2-digit years and omitted years/weeks) comes from
--base-date, else PARTIAL_ISODATE_BASE_DATE (env or .env), else today.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date

from partial_isodate import Calendar, DateParser
from partial_isodate.logging import configure_logging
from partial_isodate.types import ParseFailure


def _base_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {s!r}") from None


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="*", help="Date strings (default: one per stdin line).")
    ap.add_argument("--base-date", type=_base_date, default=None, help="Processing date, YYYY-MM-DD.")
    ap.add_argument("--log-level", default=None, help="Overrides PARTIAL_ISODATE_LOG_LEVEL.")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    cal = Calendar(base_date=args.base_date) if args.base_date else Calendar.from_env()
    parser = DateParser(cal)

    # Input is expected pre-cleaned; only the line terminator is dropped from stdin.
    items = args.text if args.text else [ln.rstrip("\r\n") for ln in sys.stdin if ln.strip()]

    failed = 0
    for item in items:
        res = parser.try_parse(item)
        if isinstance(res, ParseFailure):
            failed += 1
        print(json.dumps(res.to_dict(), ensure_ascii=False))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
