"""Dry-run commit plan.

Turns a parsed date into the list of backdated commits that would be created,
plus a summary for previewing before anything touches a repository. Nothing
here runs git; PlannedCommit.env() is what a caller passes to `git commit`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .date.timestamps import generate_timestamps
from .date.types import DateInput, FullDate, TimestampConfig, Year, YearList, YearMonth, YearRange

# Explicit offset: git reads a zone-less date in the local timezone.
COMMIT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Rough wall-clock cost per commit (clone/commit/push round trips).
SECONDS_PER_COMMIT = 10

MANY_YEARS_THRESHOLD = 10
OLD_YEAR_THRESHOLD = 1990


@dataclass(frozen=True)
class GitIdentity:
    name: str = "Git Time Traveler"
    email: str = "timetraveler@example.com"

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class PlannedCommit:
    timestamp: datetime
    author: GitIdentity
    message: str
    filename: str

    @property
    def year(self) -> int:
        return self.timestamp.year

    def env(self) -> dict[str, str]:
        """Environment for `git commit` so author and committer carry the backdated time."""
        ts = format_commit_timestamp(self.timestamp)
        return {
            "GIT_AUTHOR_DATE": ts,
            "GIT_COMMITTER_DATE": ts,
            "GIT_AUTHOR_NAME": self.author.name,
            "GIT_AUTHOR_EMAIL": self.author.email,
            "GIT_COMMITTER_NAME": self.author.name,
            "GIT_COMMITTER_EMAIL": self.author.email,
        }


@dataclass(frozen=True)
class PlanSummary:
    commits_to_create: int
    years: tuple[int, ...]
    files_to_create: tuple[str, ...]
    first: datetime | None
    last: datetime | None
    estimated_duration_s: int
    risks: tuple[str, ...] = field(default_factory=tuple)


def format_commit_timestamp(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime(COMMIT_TIMESTAMP_FORMAT)


def commit_filename(year: int) -> str:
    return f"timetravel-{year}.md"


def commit_message(year: int) -> str:
    return f"Time travel commit for {year}"


def file_preview(year: int, repo_name: str) -> str:
    """First lines of the file committed for `year`, for dry-run display."""
    content = (
        f"# Time Travel Commit for {year}\n"
        "\n"
        f"This file was created to show activity in the year {year} on my GitHub profile.\n"
        "\n"
        f"Repository: {repo_name}\n"
    )
    return "\n".join(content.splitlines()[:3]) + "\n..."


def plan_commits(
    date_input: DateInput,
    config: TimestampConfig | None = None,
    *,
    author: GitIdentity | None = None,
) -> list[PlannedCommit]:
    """One PlannedCommit per generated timestamp, in generation order."""
    who = author or GitIdentity()
    return [
        PlannedCommit(
            timestamp=ts,
            author=who,
            message=commit_message(ts.year),
            filename=commit_filename(ts.year),
        )
        for ts in generate_timestamps(date_input, config)
    ]


def _risks(years: tuple[int, ...]) -> list[str]:
    out: list[str] = []
    if len(years) > MANY_YEARS_THRESHOLD:
        out.append(f"Processing {len(years)} years may trigger GitHub rate limits")
    old = sorted(y for y in years if y < OLD_YEAR_THRESHOLD)
    if old:
        out.append(f"Very old years ({', '.join(str(y) for y in old)}) may look suspicious on your profile")
    return out


def summarize_plan(commits: list[PlannedCommit]) -> PlanSummary:
    years = tuple(dict.fromkeys(c.year for c in commits))
    files = tuple(dict.fromkeys(c.filename for c in commits))
    stamps = [c.timestamp for c in commits]
    return PlanSummary(
        commits_to_create=len(commits),
        years=years,
        files_to_create=files,
        first=min(stamps) if stamps else None,
        last=max(stamps) if stamps else None,
        estimated_duration_s=len(commits) * SECONDS_PER_COMMIT,
        risks=tuple(_risks(years)),
    )


def describe_date_input(date_input: DateInput) -> str:
    if isinstance(date_input, Year):
        return f"year {date_input.year}"
    if isinstance(date_input, YearMonth):
        return f"month {date_input.year}-{date_input.month:02d}"
    if isinstance(date_input, FullDate):
        return f"date {date_input.date.isoformat()}"
    if isinstance(date_input, YearRange):
        n = date_input.end - date_input.start + 1
        return f"year range {date_input.start}-{date_input.end} ({n} year{'s' if n != 1 else ''})"
    if isinstance(date_input, YearList):
        n = len(date_input.years)
        return f"year list {', '.join(str(y) for y in date_input.years)} ({n} year{'s' if n != 1 else ''})"
    raise TypeError(f"Unsupported date input: {date_input!r}")
