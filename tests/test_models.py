from datetime import datetime

import pytest

from event_calendar.api.serializers import deserialize_event, serialize_event
from event_calendar.domain import Event


def test_event_is_immutable(meeting):
    with pytest.raises(AttributeError):
        meeting.name = "Renamed"


def test_event_ends_at_adds_duration(meeting):
    assert meeting.ends_at == datetime(2023, 12, 5, 6, 30)


@pytest.mark.parametrize("name", ["", None])
def test_event_requires_a_name(name):
    with pytest.raises(ValueError):
        Event(name, datetime(2023, 12, 5, 5, 30), 60)


def test_event_rejects_negative_duration():
    with pytest.raises(ValueError):
        Event("Meeting", datetime(2023, 12, 5, 5, 30), -1)


def test_event_rejects_boolean_duration():
    with pytest.raises(ValueError):
        Event("Meeting", datetime(2023, 12, 5, 5, 30), True)


def test_deserialize_event_parses_iso_start_and_fills_defaults():
    event = deserialize_event({"name": "Standup", "start": "2024-01-02T09:15:00"})

    assert event == Event("Standup", datetime(2024, 1, 2, 9, 15), 0)


def test_serialize_event_uses_iso_start(meeting):
    payload = serialize_event(meeting)

    assert payload["start"] == "2023-12-05T05:30:00"
    assert payload["duration_minutes"] == 60
    assert deserialize_event(payload) == meeting


def test_deserialize_event_rejects_fractional_duration():
    with pytest.raises(ValueError):
        deserialize_event({"name": "Standup", "start": "2024-01-02T09:15:00", "duration_minutes": 1.9})
