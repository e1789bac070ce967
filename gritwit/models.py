"""Records exchanged between the pages and the workout store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def format_number(value: float | int) -> str:
    """Render a number the way scores are shown: whole values without a decimal part."""
    if isinstance(value, bool):
        raise TypeError("expected a number, not a bool")
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class WorkoutLog:
    """One logged workout, either free-form or attached to a WOD."""

    id: str
    workout_date: str
    notes: str | None = None
    is_rx: bool = True
    wod_id: str | None = None

    @property
    def is_wod(self) -> bool:
        return self.wod_id is not None


@dataclass
class WorkoutExercise:
    """A single set of an exercise inside a custom workout."""

    exercise_id: str
    exercise_name: str
    set_number: int
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    notes: str | None = None


@dataclass
class SectionScoreWithMeta:
    """A section score joined with the section's type and title."""

    section_log_id: str
    section_type: str
    section_title: str | None = None
    finish_time_seconds: int | None = None
    rounds_completed: int | None = None
    extra_reps: int | None = None
    weight_kg: float | None = None
    is_rx: bool = True
    skipped: bool = False


@dataclass
class MovementLogWithName:
    """A logged movement inside a section, with the exercise name."""

    section_log_id: str
    exercise_name: str
    sets: int | None = None
    reps: int | None = None
    weight_kg: float | None = None
    notes: str | None = None


@dataclass
class LeaderboardEntry:
    """A user's workout count for the current week."""

    display_name: str
    workout_count: int


@dataclass
class ExerciseSetInput:
    """One submitted set of a custom workout."""

    exercise_id: str
    set_number: int
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "exercise_id": self.exercise_id,
            "set_number": self.set_number,
            "reps": self.reps,
            "weight_kg": self.weight_kg,
            "duration_seconds": self.duration_seconds,
            "notes": self.notes,
        }


@dataclass
class MovementLogInput:
    """Submitted values for one movement of a WOD section."""

    movement_id: str
    reps: int | None = None
    sets: int | None = None
    weight_kg: float | None = None
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "movement_id": self.movement_id,
            "reps": self.reps,
            "sets": self.sets,
            "weight_kg": self.weight_kg,
            "notes": self.notes,
        }


@dataclass
class SectionScoreInput:
    """Submitted score for one WOD section."""

    section_id: str
    finish_time_seconds: int | None = None
    rounds_completed: int | None = None
    extra_reps: int | None = None
    weight_kg: float | None = None
    notes: str | None = None
    is_rx: bool = True
    skipped: bool = False
    movement_logs: list[MovementLogInput] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "section_id": self.section_id,
            "finish_time_seconds": self.finish_time_seconds,
            "rounds_completed": self.rounds_completed,
            "extra_reps": self.extra_reps,
            "weight_kg": self.weight_kg,
            "notes": self.notes,
            "is_rx": self.is_rx,
            "skipped": self.skipped,
            "movement_logs": [m.to_dict() for m in self.movement_logs],
        }


@dataclass
class SectionLog:
    """A stored section score, used to pre-fill the form when editing."""

    section_id: str
    finish_time_seconds: int | None = None
    rounds_completed: int | None = None
    extra_reps: int | None = None
    weight_kg: float | None = None
    notes: str | None = None
    is_rx: bool = True
    skipped: bool = False


@dataclass
class Wod:
    """A programmed workout of the day."""

    id: str
    title: str
    programmed_date: str
    workout_type: str = ""
    description: str | None = None


@dataclass
class WodSection:
    """One scored part of a WOD."""

    id: str
    section_type: str
    title: str | None = None
    time_cap_minutes: int | None = None
    rounds: int | None = None


@dataclass
class WodMovement:
    """A prescribed movement inside a WOD section."""

    id: str
    exercise_name: str
    rep_scheme: str | None = None
    weight_kg_male: float | None = None
    weight_kg_female: float | None = None


@dataclass
class HistoryEntry:
    """A workout log enriched with exercise details and optional WOD title."""

    log: WorkoutLog
    wod_title: str | None = None
    exercises: list[WorkoutExercise] = field(default_factory=list)
    section_scores: list[SectionScoreWithMeta] = field(default_factory=list)
    movement_logs: list[MovementLogWithName] = field(default_factory=list)


@dataclass
class DashboardData:
    """Everything the home page shows."""

    day_name: str
    full_date: str
    exercises: int
    workouts: int
    streak: int
    leaderboard: list[LeaderboardEntry] = field(default_factory=list)