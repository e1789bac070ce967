"""User-facing messages and small navigation helpers for the log pages."""

from __future__ import annotations

from collections.abc import Mapping

_PREFIXES = ("error running server function: ", "ServerFnError: ")

_CONNECTION_MARKERS = (
    "lookup address",
    "connection refused",
    "communicating with database",
    "timed out",
)


def friendly_error(raw: str) -> str:
    """Turn a raw server error into a message fit for the user."""
    clean = raw
    for prefix in _PREFIXES:
        if raw.startswith(prefix):
            clean = raw[len(prefix):]
            break

    if any(marker in clean for marker in _CONNECTION_MARKERS):
        return "Unable to reach the server. Please check your connection and try again."
    if "Unauthorized" in clean:
        return "Your session has expired. Please log in again."
    return clean


def initial_tab(query: Mapping[str, str]) -> str:
    """Pick the tab shown first: the custom log when editing, the WOD score otherwise."""
    edit_id = query.get("edit") or ""
    if edit_id:
        return "custom"
    return "wod"


def history_url(date: str) -> str:
    """The history page for a given day."""
    return f"/history?date={date}"