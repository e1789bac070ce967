"""Workout logging logic: WOD scoring, custom logs, history cards and leaderboards."""

__version__ = "0.1.0"

__all__ = [
    "custom_log",
    "dates",
    "history",
    "leaderboard",
    "messages",
    "models",
    "section_scoring",
    "wod_score",
]