"""The cards shown on the workout history page."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from gritwit.models import (
    HistoryEntry,
    MovementLogWithName,
    SectionScoreWithMeta,
    WorkoutExercise,
    WorkoutLog,
    format_number,
)

_NO_VALUE = "—"

_SECTION_TYPE_NAMES = {
    "fortime": "For Time",
    "amrap": "AMRAP",
    "emom": "EMOM",
    "strength": "Strength",
}

_RX_LABELS = {True: "Rx", False: "Scaled"}
_RX_CLASSES = {True: "result-rx", False: "result-rx result-rx--scaled"}


def _clock(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02}"


@dataclass(frozen=True)
class MovementRow:
    """A logged movement under a section score."""

    name: str
    detail: str


@dataclass(frozen=True)
class SectionRow:
    """A section score line of a WOD log."""

    label: str
    score: str
    skipped: bool
    rx_label: str
    rx_class: str
    movements: list[MovementRow] = field(default_factory=list)

    @property
    def shows_rx(self) -> bool:
        return not self.skipped


@dataclass(frozen=True)
class ExerciseGroup:
    """All sets of one exercise in a custom workout, formatted for display."""

    name: str
    sets: list[str]


@dataclass(frozen=True)
class HistoryCard:
    """Everything a history card displays for one logged workout."""

    log_id: str
    title: str
    is_wod: bool
    rx_label: str
    rx_class: str
    edit_url: str
    sections: list[SectionRow] = field(default_factory=list)
    exercise_groups: list[ExerciseGroup] = field(default_factory=list)
    notes: str | None = None

    @property
    def shows_rx(self) -> bool:
        return self.is_wod


def group_exercises(
    exercises: Iterable[WorkoutExercise],
) -> list[tuple[str, list[WorkoutExercise]]]:
    """Group sets by exercise name, keeping first-seen order and set order."""
    groups: dict[str, list[WorkoutExercise]] = {}
    for exercise in exercises:
        groups.setdefault(exercise.exercise_name, []).append(exercise)
    return list(groups.items())


def format_set(set_: WorkoutExercise) -> str:
    """Format a single set for display, e.g. ``10 reps × 60kg``."""
    parts = []
    if set_.reps is not None:
        parts.append(f"{set_.reps} reps")
    if set_.weight_kg is not None:
        parts.append(f"{format_number(set_.weight_kg)}kg")
    if set_.duration_seconds is not None:
        minutes, secs = divmod(set_.duration_seconds, 60)
        parts.append(f"{minutes}:{secs:02}" if minutes > 0 else f"{secs}s")
    if not parts:
        return f"Set {set_.set_number}"
    return " × ".join(parts)


def format_movement(movement: MovementLogWithName) -> str:
    """Format a logged movement's sets, reps and weight."""
    parts = []
    if movement.sets is not None and movement.sets > 1:
        parts.append(f"{movement.sets}×")
    if movement.reps is not None:
        parts.append(f"{movement.reps} reps")
    if movement.weight_kg is not None:
        parts.append(f"{format_number(movement.weight_kg)}kg")
    return " ".join(parts) if parts else _NO_VALUE


def format_section_type(section_type: str) -> str:
    """Human name for a section type; unknown types are shown as they are."""
    return _SECTION_TYPE_NAMES.get(section_type, section_type)


def format_section_score(score: SectionScoreWithMeta) -> str:
    """The score of a section as the history shows it."""
    if score.section_type == "fortime":
        if score.finish_time_seconds is None:
            return _NO_VALUE
        return _clock(score.finish_time_seconds)
    if score.section_type in ("amrap", "emom"):
        rounds = score.rounds_completed or 0
        reps = score.extra_reps or 0
        if reps > 0:
            return f"{rounds} rounds + {reps} reps"
        return f"{rounds} rounds"
    if score.section_type == "strength":
        if score.weight_kg is None:
            return _NO_VALUE
        return f"{format_number(score.weight_kg)}kg"
    return _NO_VALUE


def edit_url(log: WorkoutLog) -> str:
    """Where the edit button leads: the WOD score form or the custom log form."""
    if log.wod_id is not None:
        return f"/log?wod_id={log.wod_id}&edit_log={log.id}"
    return f"/log?edit={log.id}"


def _section_row(
    score: SectionScoreWithMeta, movements: list[MovementLogWithName]
) -> SectionRow:
    label = (
        score.section_title
        if score.section_title is not None
        else format_section_type(score.section_type)
    )
    is_rx = bool(score.is_rx)
    return SectionRow(
        label=label,
        score="Skipped" if score.skipped else format_section_score(score),
        skipped=score.skipped,
        rx_label=_RX_LABELS[is_rx],
        rx_class=_RX_CLASSES[is_rx],
        movements=[
            MovementRow(name=m.exercise_name, detail=format_movement(m))
            for m in movements
            if m.section_log_id == score.section_log_id
        ],
    )


def history_card(entry: HistoryEntry) -> HistoryCard:
    """Build the card for one history entry."""
    log = entry.log
    is_rx = bool(log.is_rx)
    return HistoryCard(
        log_id=log.id,
        title=entry.wod_title if entry.wod_title is not None else "Custom Workout",
        is_wod=log.wod_id is not None,
        rx_label=_RX_LABELS[is_rx],
        rx_class=_RX_CLASSES[is_rx],
        edit_url=edit_url(log),
        sections=[_section_row(s, entry.movement_logs) for s in entry.section_scores],
        exercise_groups=[
            ExerciseGroup(name=name, sets=[format_set(s) for s in sets])
            for name, sets in group_exercises(entry.exercises)
        ],
        notes=log.notes,
    )