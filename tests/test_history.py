import json

from app.history import HISTORY_KEY, MAX_HISTORY, SearchHistory, is_current_location
from app.storage import SessionStorage


def test_load_empty(history) -> None:
    assert history.load() == []


def test_record_promotes_case_insensitive_duplicate(history) -> None:
    history.record("Austin")
    result = history.record("austin")

    assert result == ["austin"]
    assert history.load() == ["austin"]


def test_record_keeps_five_most_recent_first(history) -> None:
    for city in ["Austin", "Boston", "Chicago", "Denver", "El Paso", "Fresno"]:
        history.record(city)

    assert history.load() == ["Fresno", "El Paso", "Denver", "Chicago", "Boston"]
    assert len(history.load()) == MAX_HISTORY


def test_record_moves_existing_entry_to_front(history) -> None:
    for city in ["Austin", "Boston", "Chicago"]:
        history.record(city)

    assert history.record("BOSTON") == ["BOSTON", "Chicago", "Austin"]


def test_current_location_is_never_recorded(history) -> None:
    history.record("Austin")
    for value in ["My Current Location", "my current location", "  MY CURRENT LOCATION "]:
        assert history.record(value) == ["Austin"]

    assert history.load() == ["Austin"]
    assert is_current_location(" my current location")


def test_record_trims_and_ignores_blank(history) -> None:
    history.record("  Austin  ")
    history.record("   ")

    assert history.load() == ["Austin"]


def test_persisted_as_json_under_fixed_key(session, history) -> None:
    history.record("Austin")
    history.record("Boston")

    assert json.loads(session[HISTORY_KEY]) == ["Boston", "Austin"]


def test_clear_removes_persisted_list(session, history) -> None:
    history.record("Austin")

    assert history.clear() == []
    assert HISTORY_KEY not in session
    assert history.load() == []


def test_corrupt_storage_is_swallowed() -> None:
    for raw in ["{not json", json.dumps({"a": 1}), json.dumps([1, 2]), json.dumps("Austin")]:
        history = SearchHistory(SessionStorage({HISTORY_KEY: raw}))
        assert history.load() == []


def test_history_survives_new_store_instance(session) -> None:
    SearchHistory(SessionStorage(session)).record("Austin")

    assert SearchHistory(SessionStorage(session)).load() == ["Austin"]
