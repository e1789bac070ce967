"""State and validation of the custom (non-WOD) workout log form."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import Any, Protocol, TypeVar

from gritwit.models import ExerciseSetInput, WorkoutExercise, format_number

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class CustomLogError(ValueError):
    """Raised when a custom workout cannot be submitted as entered."""


def _parse_int(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


@dataclass
class SetData:
    """The raw inputs of one set, as typed into the form."""

    set_number: int
    reps: str = ""
    weight_kg: str = ""
    duration: str = ""
    notes: str = ""
    show_weight: bool = False
    show_notes: bool = False

    @property
    def has_data(self) -> bool:
        return bool(self.reps or self.weight_kg or self.duration)


_EDITABLE_SET_FIELDS = frozenset(f.name for f in fields(SetData)) - {"set_number"}


@dataclass
class ExerciseEntry:
    """One exercise in the form with its sets."""

    key: int
    exercise_id: str
    exercise_name: str
    sets: list[SetData] = field(default_factory=list)


@dataclass
class CustomLogForm:
    """A custom workout being created or edited."""

    edit_id: str = ""
    notes: str = ""
    entries: list[ExerciseEntry] = field(default_factory=list)
    next_key: int = 0

    @property
    def is_edit(self) -> bool:
        return bool(self.edit_id)

    def _entry(self, key: int) -> ExerciseEntry | None:
        return next((e for e in self.entries if e.key == key), None)

    def add_exercise(self, exercise_id: str, exercise_name: str) -> int:
        """Append an exercise with one empty set and return its key."""
        key = self.next_key
        self.next_key += 1
        self.entries.append(
            ExerciseEntry(
                key=key,
                exercise_id=exercise_id,
                exercise_name=exercise_name,
                sets=[SetData(1)],
            )
        )
        return key

    def remove_exercise(self, key: int) -> None:
        """Drop the exercise with the given key."""
        self.entries = [e for e in self.entries if e.key != key]

    def add_set(self, key: int) -> None:
        """Append an empty set to the exercise with the given key."""
        entry = self._entry(key)
        if entry is not None:
            entry.sets.append(SetData(len(entry.sets) + 1))

    def update_set(self, key: int, set_number: int, **kwargs: Any) -> None:
        """Change fields of one set, found by exercise key and set number."""
        unknown = set(kwargs) - _EDITABLE_SET_FIELDS
        if unknown:
            raise TypeError(f"unknown set fields: {', '.join(sorted(unknown))}")
        entry = self._entry(key)
        if entry is None:
            return
        target = next((s for s in entry.sets if s.set_number == set_number), None)
        if target is None:
            return
        for name, value in kwargs.items():
            setattr(target, name, value)

    def load_existing(self, exercises: Iterable[WorkoutExercise]) -> None:
        """Replace the entries with stored sets, grouped by exercise."""
        entries: list[ExerciseEntry] = []
        by_id: dict[str, ExerciseEntry] = {}
        for ex in exercises:
            set_data = SetData(
                set_number=ex.set_number,
                reps="" if ex.reps is None else str(ex.reps),
                weight_kg="" if ex.weight_kg is None else format_number(ex.weight_kg),
                duration="" if ex.duration_seconds is None else str(ex.duration_seconds),
                notes=ex.notes or "",
                show_weight=ex.weight_kg is not None,
                show_notes=ex.notes is not None,
            )
            entry = by_id.get(ex.exercise_id)
            if entry is None:
                entry = ExerciseEntry(
                    key=len(entries),
                    exercise_id=ex.exercise_id,
                    exercise_name=ex.exercise_name,
                )
                by_id[ex.exercise_id] = entry
                entries.append(entry)
            entry.sets.append(set_data)
        self.entries = entries
        self.next_key = len(entries)

    def build_sets(self) -> list[ExerciseSetInput]:
        """All sets of all exercises, in form order, as submitted inputs."""
        return [
            ExerciseSetInput(
                exercise_id=entry.exercise_id,
                set_number=s.set_number,
                reps=_parse_int(s.reps),
                weight_kg=_parse_float(s.weight_kg),
                duration_seconds=_parse_int(s.duration),
                notes=s.notes or None,
            )
            for entry in self.entries
            for s in entry.sets
        ]

    def validate(self, date: str) -> list[ExerciseSetInput]:
        """Check the form can be submitted and return its sets."""
        if not date:
            raise CustomLogError("Please select a date")
        sets = self.build_sets()
        if not sets:
            raise CustomLogError("Add at least one exercise")
        for entry in self.entries:
            if not any(s.has_data for s in entry.sets):
                raise CustomLogError(f"Fill in at least one set for {entry.exercise_name}")
        return sets

    def to_json(self, date: str) -> str:
        """The validated sets as sent to the server."""
        payload = [s.to_dict() for s in self.validate(date)]
        return json.dumps(_finite(payload), separators=(",", ":"), ensure_ascii=False)


class _Named(Protocol):
    name: str


_T = TypeVar("_T", bound=_Named)


def filter_exercises(exercises: Iterable[_T], query: str) -> list[_T]:
    """Exercises whose name contains the query, ignoring case; all for an empty query."""
    needle = query.lower()
    return [ex for ex in exercises if not needle or needle in ex.name.lower()]