from gritwit.history import (
    edit_url,
    format_movement,
    format_section_score,
    format_section_type,
    format_set,
    group_exercises,
    history_card,
)
from gritwit.models import (
    HistoryEntry,
    MovementLogWithName,
    SectionScoreWithMeta,
    WorkoutExercise,
    WorkoutLog,
)


def _set(name, number, **kwargs):
    return WorkoutExercise(
        exercise_id=f"id-{name}", exercise_name=name, set_number=number, **kwargs
    )


def test_group_exercises_keeps_first_seen_order_and_set_order():
    exercises = [_set("Squat", 1), _set("Bench", 1), _set("Squat", 2)]
    groups = group_exercises(exercises)
    assert [name for name, _ in groups] == ["Squat", "Bench"]
    assert [s.set_number for s in groups[0][1]] == [1, 2]
    assert sum(len(sets) for _, sets in groups) == len(exercises)


def test_group_exercises_empty():
    assert group_exercises([]) == []


def test_format_set_reps_and_weight():
    assert format_set(_set("Squat", 1, reps=10, weight_kg=60.0)) == "10 reps × 60kg"


def test_format_set_without_values_names_the_set():
    assert format_set(_set("Squat", 3)) == "Set 3"


def test_format_set_short_duration_in_seconds():
    assert format_set(_set("Plank", 1, duration_seconds=45)) == "45s"


def test_format_set_long_duration_as_clock():
    assert format_set(_set("Row", 1, duration_seconds=65)) == "1:05"


def test_format_set_keeps_fractional_weight():
    assert format_set(_set("Clean", 1, weight_kg=62.5)) == "62.5kg"


def test_format_movement_empty_is_dash():
    assert format_movement(MovementLogWithName("s1", "Row")) == "—"


def test_format_movement_single_set_not_shown():
    assert format_movement(MovementLogWithName("s1", "Row", sets=1, reps=5)) == "5 reps"


def test_format_movement_multiple_sets_prefix():
    detail = format_movement(
        MovementLogWithName("s1", "Deadlift", sets=3, reps=5, weight_kg=20.0)
    )
    assert detail.startswith("3× ")
    assert detail.endswith("20kg")


def test_format_section_type_known_and_unknown():
    assert format_section_type("fortime") == "For Time"
    assert format_section_type("amrap") == "AMRAP"
    assert format_section_type("emom") == "EMOM"
    assert format_section_type("strength") == "Strength"
    assert format_section_type("warmup") == "warmup"


def test_format_section_score_fortime():
    assert format_section_score(SectionScoreWithMeta("l", "fortime")) == "—"
    score = SectionScoreWithMeta("l", "fortime", finish_time_seconds=125)
    assert format_section_score(score) == "2:05"


def test_format_section_score_rounds():
    plain = SectionScoreWithMeta("l", "amrap", rounds_completed=5)
    assert format_section_score(plain) == "5 rounds"
    extra = SectionScoreWithMeta("l", "emom", rounds_completed=5, extra_reps=3)
    assert format_section_score(extra) == "5 rounds + 3 reps"
    assert format_section_score(SectionScoreWithMeta("l", "amrap")) == "0 rounds"


def test_format_section_score_strength_and_other():
    assert format_section_score(SectionScoreWithMeta("l", "strength")) == "—"
    strength = SectionScoreWithMeta("l", "strength", weight_kg=100.0)
    assert format_section_score(strength) == "100kg"
    assert format_section_score(SectionScoreWithMeta("l", "warmup")) == "—"


def test_edit_url_custom_and_wod():
    assert edit_url(WorkoutLog(id="abc", workout_date="2024-01-01")) == "/log?edit=abc"
    wod_log = WorkoutLog(id="abc", workout_date="2024-01-01", wod_id="w1")
    assert edit_url(wod_log) == "/log?wod_id=w1&edit_log=abc"


def test_history_card_custom_workout():
    entry = HistoryEntry(
        log=WorkoutLog(id="abc", workout_date="2024-01-01", notes="felt good"),
        exercises=[_set("Squat", 1, reps=10, weight_kg=60.0), _set("Squat", 2)],
    )
    card = history_card(entry)
    assert card.title == "Custom Workout"
    assert card.is_wod is False
    assert card.shows_rx is False
    assert card.edit_url == "/log?edit=abc"
    assert card.notes == "felt good"
    assert [g.name for g in card.exercise_groups] == ["Squat"]
    assert card.exercise_groups[0].sets == ["10 reps × 60kg", "Set 2"]
    assert card.sections == []


def test_history_card_wod_sections_and_movements():
    entry = HistoryEntry(
        log=WorkoutLog(id="abc", workout_date="2024-01-01", is_rx=False, wod_id="w1"),
        wod_title="Fran",
        section_scores=[
            SectionScoreWithMeta("s1", "fortime", section_title="Main"),
            SectionScoreWithMeta("s2", "strength", skipped=True, weight_kg=80.0),
        ],
        movement_logs=[
            MovementLogWithName("s1", "Thruster", reps=21),
            MovementLogWithName("s2", "Squat"),
        ],
    )
    card = history_card(entry)
    assert card.title == "Fran"
    assert card.rx_label == "Scaled"
    assert card.rx_class == "result-rx result-rx--scaled"
    first, second = card.sections
    assert first.label == "Main"
    assert [m.name for m in first.movements] == ["Thruster"]
    assert second.label == "Strength"
    assert second.score == "Skipped"
    assert second.shows_rx is False
    assert [m.detail for m in second.movements] == ["—"]