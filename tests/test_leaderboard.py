from datetime import date, timedelta

import pytest

from gritwit.leaderboard import (
    LeaderboardRow,
    dashboard_dates,
    initials,
    leaderboard_rows,
    workout_count_label,
)
from gritwit.models import LeaderboardEntry


def test_initials_take_first_two_words():
    assert initials("ada grace lovelace") == "AG"


def test_initials_single_word():
    assert initials("zoe") == "Z"


def test_initials_empty_and_blank():
    assert initials("") == ""
    assert initials("   ") == ""


def test_initials_ignore_extra_whitespace():
    assert initials("  ada   lovelace ") == initials("ada lovelace")


@pytest.mark.parametrize("count", [0, 2, 5, 100])
def test_plural_label(count):
    assert workout_count_label(count) == "workouts"


def test_singular_label():
    assert workout_count_label(1) == "workout"


def test_rows_ranked_in_order():
    entries = [
        LeaderboardEntry(display_name="ada lovelace", workout_count=4),
        LeaderboardEntry(display_name="zoe", workout_count=1),
    ]
    rows = leaderboard_rows(entries)
    assert [r.rank for r in rows] == [1, 2]
    assert [r.display_name for r in rows] == ["ada lovelace", "zoe"]
    assert rows[0].score == "4 workouts"
    assert rows[1].score == "1 workout"
    assert rows[0].initials == initials("ada lovelace")


def test_rows_empty():
    assert leaderboard_rows([]) == []


def test_row_is_immutable():
    row = leaderboard_rows([LeaderboardEntry("zoe", 3)])[0]
    assert isinstance(row, LeaderboardRow)
    assert row.rank == 1
    assert row.score == "3 workouts"
    with pytest.raises(AttributeError):
        row.rank = 9
    assert row.rank == 1


def test_dashboard_dates_pinned():
    assert dashboard_dates(date(2024, 3, 5)) == ("Tuesday", "March 5, 2024")


def test_dashboard_dates_day_not_zero_padded():
    _, full = dashboard_dates(date(2024, 1, 7))
    assert full.endswith(" 7, 2024")


def test_dashboard_day_names_cycle_weekly():
    start = date(2024, 3, 4)
    names = [dashboard_dates(start + timedelta(days=i))[0] for i in range(14)]
    assert names[:7] == names[7:]
    assert len(set(names)) == 7


def test_dashboard_dates_default_is_today():
    assert dashboard_dates() == dashboard_dates(date.today())