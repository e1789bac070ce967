"""Scoring helpers for a single WOD section: rep schemes, labels and movement inputs."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from gritwit.models import WodMovement, format_number

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

_TYPE_LABELS = {
    "fortime": "For Time",
    "amrap": "AMRAP",
    "emom": "EMOM",
    "strength": "Strength",
}


def _parse_int(text: str) -> int | None:
    """Parse a 32-bit signed integer written without spaces, or return None."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        return None
    return value


@dataclass
class MovementLogState:
    """Editable inputs for one movement, with what the WOD prescribes."""

    movement_id: str
    exercise_name: str
    prescribed_reps: str | None = None
    prescribed_weight_male: float | None = None
    prescribed_weight_female: float | None = None
    reps: str = ""
    sets: str = ""
    weight_kg: str = ""
    notes: str = ""


def parse_rep_scheme(scheme: str | None) -> tuple[int | None, int | None]:
    """Read ``(reps, sets)`` out of a rep scheme.

    ``"5x5"`` and ``"3x10"`` are sets times reps, ``"21-15-9"`` sums to the total
    reps with one set per part, and a lone number is a rep count.
    """
    if scheme is None:
        return None, None
    text = scheme.strip()

    separator = "x" if "x" in text else "X" if "X" in text else None
    if separator is not None:
        left, right = text.split(separator, 1)
        sets = _parse_int(left.strip())
        reps = _parse_int(right.strip())
        if sets is not None and reps is not None:
            return reps, sets

    if "-" in text:
        parts = [n for n in (_parse_int(p.strip()) for p in text.split("-")) if n is not None]
        if len(parts) >= 2:
            return sum(parts), len(parts)

    single = _parse_int(text)
    if single is not None:
        return single, None

    return None, None


def format_prescribed_weight(male: float | None, female: float | None) -> str:
    """The Rx weight line shown next to a movement, empty when none is prescribed."""
    if male is not None and female is not None:
        return f"Rx: {format_number(male)}kg / {format_number(female)}kg"
    if male is not None:
        return f"Rx: {format_number(male)}kg"
    if female is not None:
        return f"Rx: {format_number(female)}kg"
    return ""


def section_type_label(section_type: str) -> str:
    """The heading label for a section type."""
    return _TYPE_LABELS.get(section_type, "Other")


def cap_info(section_type: str, time_cap: int | None) -> str:
    """The time-cap note for a section, empty where none applies."""
    if time_cap is None:
        return ""
    if section_type == "fortime":
        return f"Time cap: {time_cap} min"
    if section_type in ("amrap", "emom"):
        return f"{time_cap} min"
    return ""


def _preferred_weight(movement: WodMovement, gender: str | None) -> float | None:
    if gender == "female":
        first, second = movement.weight_kg_female, movement.weight_kg_male
    else:
        first, second = movement.weight_kg_male, movement.weight_kg_female
    return first if first is not None else second


def initial_movement_states(
    movements: Iterable[WodMovement], gender: str | None
) -> list[MovementLogState]:
    """Input states pre-filled from the prescription; weights default to the male Rx."""
    states = []
    for movement in movements:
        reps, sets = parse_rep_scheme(movement.rep_scheme)
        weight = _preferred_weight(movement, gender)
        states.append(
            MovementLogState(
                movement_id=movement.id,
                exercise_name=movement.exercise_name,
                prescribed_reps=movement.rep_scheme,
                prescribed_weight_male=movement.weight_kg_male,
                prescribed_weight_female=movement.weight_kg_female,
                reps="" if reps is None else str(reps),
                sets="" if sets is None else str(sets),
                weight_kg="" if weight is None else format_number(weight),
            )
        )
    return states


def needs_gender_hint(movements: Iterable[WodMovement], gender: str | None) -> bool:
    """Whether to suggest setting a gender: none is set and some Rx weights differ by gender."""
    if gender is not None:
        return False
    return any(
        m.weight_kg_male is not None
        and m.weight_kg_female is not None
        and m.weight_kg_male != m.weight_kg_female
        for m in movements
    )