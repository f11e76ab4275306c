#!/usr/bin/env python3
"""Preview the backdated commits a date expression would produce.

Nothing is written anywhere; this only parses the date, generates the
timestamps and prints the commit plan.

Examples:
  python3 scripts/preview_dates.py --date 1990
  python3 scripts/preview_dates.py --date "Jan 1990" --hour 9
  python3 scripts/preview_dates.py --date 1990,1985 --no-sort
  python3 scripts/preview_dates.py --date 1990-1995 --author-name "Ada" --author-email ada@example.com

Defaults for --hour / distribution / ordering come from TIMETRAVELER_* env
vars (or .env), see timetraveler/config.py.
"""

from __future__ import annotations

import argparse
import logging

from timetraveler.config import timestamp_config_from_env
from timetraveler.date import DateParseError, parse_date_input
from timetraveler.plan import (
    GitIdentity,
    describe_date_input,
    format_commit_timestamp,
    plan_commits,
    summarize_plan,
)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--date", required=True, help="1990 | 1990-01 | Jan 1990 | 1990-01-01 | 1990-1995 | 1990,1992")
    ap.add_argument("--hour", type=int, default=None, help="Commit hour 0-23 (default: env or 18)")
    ap.add_argument("--no-distribute", action="store_true", help="Use --hour for every commit")
    ap.add_argument("--no-sort", action="store_true", help="Keep list order instead of sorting by time")
    ap.add_argument("--author-name", default=None)
    ap.add_argument("--author-email", default=None)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        date_input = parse_date_input(args.date)
    except DateParseError as e:
        raise SystemExit(str(e))

    try:
        config = timestamp_config_from_env(
            default_hour=args.hour,
            distribute_times=False if args.no_distribute else None,
            chronological_order=False if args.no_sort else None,
        )
    except (RuntimeError, ValueError) as e:
        raise SystemExit(str(e))

    author = GitIdentity()
    if args.author_name or args.author_email:
        author = GitIdentity(
            name=args.author_name or author.name,
            email=args.author_email or author.email,
        )

    commits = plan_commits(date_input, config, author=author)
    summary = summarize_plan(commits)

    print(f"Input: {args.date!r} -> {describe_date_input(date_input)}")
    print(f"Author: {author}")
    print()
    for i, c in enumerate(commits, start=1):
        print(f"  {i:>3}. {format_commit_timestamp(c.timestamp)}  {c.filename}  {c.message!r}")
    print()
    print(f"Commits to create: {summary.commits_to_create}")
    print(f"Years: {', '.join(str(y) for y in summary.years)}")
    print(f"Files to create: {len(summary.files_to_create)}")
    if summary.first and summary.last:
        print(f"Span: {format_commit_timestamp(summary.first)} .. {format_commit_timestamp(summary.last)}")
    print(f"Estimated duration: ~{summary.estimated_duration_s}s")
    for r in summary.risks:
        print(f"Risk: {r}")


if __name__ == "__main__":
    main()
