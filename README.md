# gritwit

The logic behind a workout-logging site, with no web framework attached. It covers these jobs:

- scoring a programmed workout of the day (WOD), one section at a time
- logging custom workouts made of exercises and sets
- turning past workouts into history cards
- ranking a weekly leaderboard

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gritwit.models` holds the data records as dataclasses: `Wod`, `WodSection`, `WodMovement`, `WorkoutLog`, `WorkoutExercise`, `SectionLog`, `SectionScoreWithMeta`, `MovementLogWithName`, `LeaderboardEntry`, `HistoryEntry` and `DashboardData`. The input records `ExerciseSetInput`, `MovementLogInput` and `SectionScoreInput` each have a `to_dict()` method. `format_number` renders whole floats without a decimal part (`60.0` becomes `"60"`).
- `gritwit.messages` turns raw server errors into messages a user can read (`friendly_error`). It also picks the starting tab of the log page from the query parameters (`initial_tab` returns `"custom"` when an `edit` id is present, otherwise `"wod"`) and builds history links (`history_url`).
- `gritwit.dates` has `validate_date`, which checks a `YYYY-MM-DD` date, returns it as a `datetime.date` and raises `InvalidDateError` (a `ValueError`) when it is missing or malformed.
- `gritwit.leaderboard` builds avatar initials (`initials`), the `"workout"`/`"workouts"` label, ranked `LeaderboardRow`s (`leaderboard_rows`) and the weekday and long date shown on the dashboard (`dashboard_dates`).
- `gritwit.section_scoring` reads rep schemes such as `"5x5"` or `"21-15-9"` (`parse_rep_scheme`), formats prescribed weights, section type labels and time caps, and pre-fills `MovementLogState` inputs from a section's movements. Weights come from the female Rx when the gender is `"female"` and from the male Rx otherwise; `needs_gender_hint` tells whether to suggest setting a gender.
- `gritwit.history` groups and formats exercises, movements and section scores, builds edit links, and assembles a `HistoryCard` from a `HistoryEntry` with `history_card`.
- `gritwit.wod_score` builds `SectionScoreState`s for the visible sections, pre-filled from stored `SectionLog`s when editing. It turns those states into `SectionScoreInput`s (`build_scores`) and JSON (`scores_json`), and gives the submit button and success texts.
- `gritwit.custom_log` provides `CustomLogForm`, the form model for custom workouts. It adds and removes exercises and sets, updates set fields, loads stored sets for editing, and validates the form (raising `CustomLogError`). It then serialises the sets to JSON. `filter_exercises` filters any objects with a `name` by a case-insensitive search.

## Example

```python
from gritwit.section_scoring import parse_rep_scheme
from gritwit.messages import friendly_error
from gritwit.custom_log import CustomLogForm

parse_rep_scheme("3x10")       # (10, 3)
parse_rep_scheme("21-15-9")    # (45, 3)
friendly_error("ServerFnError: Unauthorized")
# 'Your session has expired. Please log in again.'

form = CustomLogForm()
key = form.add_exercise("ex-1", "Back Squat")
form.update_set(key, 1, reps="5", weight_kg="100")
form.to_json("2024-05-01")
# '[{"exercise_id":"ex-1","set_number":1,"reps":5,"weight_kg":100.0,"duration_seconds":null,"notes":null}]'
```

## What it does not do

The package only prepares, checks and formats data. It has no web server, no pages or HTML rendering, and no command to run. It also does no user authentication and no database storage. Fetching workouts and saving scores is left to the application that uses it.