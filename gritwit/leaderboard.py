"""The weekly leaderboard preview and the dashboard date header."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from gritwit.models import LeaderboardEntry

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class LeaderboardRow:
    """One displayed line of the leaderboard."""

    rank: int
    initials: str
    display_name: str
    score: str


def initials(name: str) -> str:
    """Upper-cased first letters of the first two words of a name."""
    return "".join(word[0] for word in name.split()[:2]).upper()


def workout_count_label(count: int) -> str:
    """The noun that follows a workout count."""
    return "workout" if count == 1 else "workouts"


def leaderboard_rows(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardRow]:
    """Rank the entries in the order given, starting from 1."""
    return [
        LeaderboardRow(
            rank=rank,
            initials=initials(entry.display_name),
            display_name=entry.display_name,
            score=f"{entry.workout_count} {workout_count_label(entry.workout_count)}",
        )
        for rank, entry in enumerate(entries, start=1)
    ]


def dashboard_dates(today: date | None = None) -> tuple[str, str]:
    """The weekday name and the long date shown at the top of the dashboard."""
    if today is None:
        today = date.today()
    day_name = _DAY_NAMES[today.weekday()]
    full_date = f"{_MONTH_NAMES[today.month - 1]} {today.day}, {today.year}"
    return day_name, full_date