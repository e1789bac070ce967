"""State and submission of the WOD scoring form."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from gritwit.models import (
    MovementLogInput,
    SectionLog,
    SectionScoreInput,
    WodSection,
    format_number,
)
from gritwit.section_scoring import MovementLogState

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")
_ROUNDS_TYPES = ("amrap", "emom")


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


@dataclass
class SectionScoreState:
    """Editable inputs for scoring one WOD section."""

    section_id: str
    section_type: str
    title: str
    time_cap: int | None = None
    rounds: int | None = None
    is_rx: bool = True
    skipped: bool = False
    minutes: str = ""
    seconds: str = ""
    rounds_completed: str = ""
    extra_reps: str = ""
    weight_kg: str = ""
    notes: str = ""
    movement_states: list[MovementLogState] = field(default_factory=list)


def visible_sections(sections: Iterable[WodSection], focus_section: str) -> list[WodSection]:
    """Only the focused section when one is chosen, otherwise all of them."""
    if focus_section:
        return [s for s in sections if s.id == focus_section]
    return list(sections)


def _text(value: int | None) -> str:
    return "" if value is None else str(value)


def _state_for(section: WodSection, existing: SectionLog | None) -> SectionScoreState:
    state = SectionScoreState(
        section_id=section.id,
        section_type=section.section_type,
        title=section.title if section.title is not None else section.section_type,
        time_cap=section.time_cap_minutes,
        rounds=section.rounds,
    )
    if existing is None:
        return state
    state.is_rx = existing.is_rx
    state.skipped = existing.skipped
    if existing.finish_time_seconds is not None:
        minutes, seconds = divmod(existing.finish_time_seconds, 60)
        state.minutes, state.seconds = str(minutes), str(seconds)
    state.rounds_completed = _text(existing.rounds_completed)
    state.extra_reps = _text(existing.extra_reps)
    if existing.weight_kg is not None:
        state.weight_kg = format_number(existing.weight_kg)
    state.notes = existing.notes or ""
    return state


def section_states(
    sections: Iterable[WodSection],
    focus_section: str,
    existing_scores: Iterable[SectionLog],
) -> list[SectionScoreState]:
    """Form states for the visible sections, pre-filled from stored scores when editing."""
    existing_list = list(existing_scores)
    states = []
    for section in visible_sections(sections, focus_section):
        existing = next((e for e in existing_list if e.section_id == section.id), None)
        states.append(_state_for(section, existing))
    return states


def _movement_input(state: MovementLogState) -> MovementLogInput | None:
    reps = _parse_int(state.reps)
    sets = _parse_int(state.sets)
    weight = _parse_float(state.weight_kg)
    if reps is None and sets is None and weight is None and not state.notes:
        return None
    return MovementLogInput(
        movement_id=state.movement_id,
        reps=reps,
        sets=sets,
        weight_kg=weight,
        notes=state.notes or None,
    )


def _score_input(state: SectionScoreState) -> SectionScoreInput:
    finish_time = None
    if state.section_type == "fortime":
        total = (_parse_int(state.minutes) or 0) * 60 + (_parse_int(state.seconds) or 0)
        finish_time = total if total > 0 else None
    counts_rounds = state.section_type in _ROUNDS_TYPES
    return SectionScoreInput(
        section_id=state.section_id,
        finish_time_seconds=finish_time,
        rounds_completed=_parse_int(state.rounds_completed) if counts_rounds else None,
        extra_reps=_parse_int(state.extra_reps) if counts_rounds else None,
        weight_kg=_parse_float(state.weight_kg) if state.section_type == "strength" else None,
        notes=state.notes or None,
        is_rx=state.is_rx,
        skipped=state.skipped,
        movement_logs=[
            m for m in (_movement_input(ms) for ms in state.movement_states) if m is not None
        ],
    )


def build_scores(states: Iterable[SectionScoreState]) -> list[tuple[SectionScoreInput, str]]:
    """Turn the form states into submitted scores paired with their section types."""
    return [(_score_input(state), state.section_type) for state in states]


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def scores_json(states: Iterable[SectionScoreState]) -> str:
    """The scores as sent to the server: a list of ``[score, section_type]`` pairs."""
    payload = [[score.to_dict(), kind] for score, kind in build_scores(states)]
    return json.dumps(_finite(payload), separators=(",", ":"), ensure_ascii=False)


def submit_label(is_edit: bool, submitting: bool, saved: bool) -> str:
    """Text of the submit button."""
    if saved:
        return "\u2713 Saved!"
    if submitting:
        return "Submitting..."
    return "Update Score" if is_edit else "Log Score"


def success_message(is_edit: bool) -> str:
    """Message shown once the score has been stored."""
    verb = "updated" if is_edit else "logged"
    return f"Score {verb}!"