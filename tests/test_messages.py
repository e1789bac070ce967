import pytest

from gritwit.messages import friendly_error, history_url, initial_tab

UNREACHABLE = "Unable to reach the server. Please check your connection and try again."
EXPIRED = "Your session has expired. Please log in again."


def test_strips_server_function_prefix():
    assert friendly_error("error running server function: Date is required") == "Date is required"


def test_strips_server_fn_error_prefix():
    assert friendly_error("ServerFnError: Invalid date format") == "Invalid date format"


def test_only_one_prefix_is_stripped():
    raw = "error running server function: ServerFnError: Add at least one exercise"
    assert friendly_error(raw) == "ServerFnError: Add at least one exercise"


@pytest.mark.parametrize(
    "raw",
    [
        "failed to lookup address information",
        "ServerFnError: connection refused",
        "error communicating with database",
        "error running server function: request timed out",
    ],
)
def test_connection_problems(raw):
    assert friendly_error(raw) == UNREACHABLE


def test_unauthorized():
    assert friendly_error("ServerFnError: Unauthorized") == EXPIRED


def test_other_messages_pass_through():
    assert friendly_error("Workout not found") == "Workout not found"


def test_initial_tab_custom_when_editing():
    assert initial_tab({"edit": "log-123"}) == "custom"


@pytest.mark.parametrize("query", [{}, {"edit": ""}, {"wod_id": "w"}])
def test_initial_tab_wod_otherwise(query):
    assert initial_tab(query) == "wod"


def test_history_url():
    assert history_url("2024-03-01") == "/history?date=2024-03-01"