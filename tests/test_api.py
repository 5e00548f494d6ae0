import pytest

from event_calendar.api import UnknownApiFunctionError, api_state, call_api, get_api_functions


def _add(name="Meeting", start="2023-12-05T05:30:00", **fields):
    return call_api("add_event", name=name, start=start, **fields)


def test_registry_contains_every_calendar_function():
    names = {func.name for func in get_api_functions()}

    assert {
        "add_event",
        "remove_event",
        "events_by_name",
        "events_by_type",
        "events_by_date",
        "events_by_location",
        "events_for_month",
        "all_events",
        "list_available_functions",
    } <= names


def test_parameters_describe_optional_wildcards():
    listing = call_api("list_available_functions")["functions"]
    by_name = {item["name"]: item for item in listing}

    assert by_name["events_by_type"]["parameters"]["event_type"] == {
        "type": "string",
        "required": False,
        "default": None,
    }
    assert by_name["events_for_month"]["parameters"]["year"]["type"] == "integer"
    assert by_name["add_event"]["parameters"]["name"]["required"] is True


def test_add_event_reports_duplicates():
    first = _add(duration_minutes=60, event_type="Business", location="Office")
    second = _add(start="2023-12-06T08:30:00", duration_minutes=90)

    assert first["added"] is True
    assert first["event"] == {
        "name": "Meeting",
        "start": "2023-12-05T05:30:00",
        "duration_minutes": 60,
        "type": "Business",
        "description": "",
        "location": "Office",
    }
    assert second["added"] is False
    assert api_state.calendar.get_all_events()["Meeting"].duration_minutes == 60


def test_remove_event_reports_missing_names():
    _add()

    assert call_api("remove_event", name="Meeting") == {"removed": True, "name": "Meeting"}
    assert call_api("remove_event", name="Meeting") == {"removed": False, "name": "Meeting"}


def test_query_functions():
    _add(event_type="Business", location="Office")
    _add(name="Conference", start="2023-12-20T09:00:00", event_type="Tech", location="Conference Hall")

    assert [e["name"] for e in call_api("events_by_type", event_type="Tech")["events"]] == ["Conference"]
    assert [e["name"] for e in call_api("events_by_date", start="2023-12-05T05:30:00")["events"]] == ["Meeting"]
    assert call_api("events_by_date", start="2023-12-05T05:31:00")["events"] == []
    assert [e["name"] for e in call_api("events_by_location", location="Office")["events"]] == ["Meeting"]
    assert len(call_api("events_for_month", year=2023, month=12)["events"]) == 2
    assert len(call_api("events_by_name")["events"]) == 2
    assert set(call_api("all_events")["events"]) == {"Meeting", "Conference"}


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "start": "2023-12-05T05:30:00"},
        {"name": "Meeting", "start": "not-a-date"},
        {"name": "Meeting", "start": "2023-12-05T05:30:00", "duration_minutes": -5},
    ],
)
def test_add_event_rejects_invalid_input(fields):
    with pytest.raises(ValueError):
        call_api("add_event", **fields)
    assert len(api_state.context.store) == 0


def test_unknown_function_raises():
    with pytest.raises(UnknownApiFunctionError):
        call_api("update_event", name="Meeting")
