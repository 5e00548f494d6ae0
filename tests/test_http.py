def _invoke(client, function_name, /, **arguments):
    return client.post(f"/api/functions/{function_name}", json={"arguments": arguments})


def test_health_reports_service_name(http_client):
    response = http_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "CalendarService", "events": 0}


def test_list_functions(http_client):
    response = http_client.get("/api/functions")

    assert response.status_code == 200
    names = {item["name"] for item in response.json()["functions"]}
    assert "add_event" in names
    assert "events_for_month" in names


def test_duplicate_add_is_a_successful_call(http_client):
    first = _invoke(http_client, "add_event", name="Meeting", start="2023-12-05T05:30:00", duration_minutes=60)
    second = _invoke(http_client, "add_event", name="Meeting", start="2023-12-06T08:30:00")

    assert first.status_code == 200
    assert first.json()["result"]["added"] is True
    assert second.status_code == 200
    assert second.json() == {
        "name": "add_event",
        "result": {
            "added": False,
            "event": {
                "name": "Meeting",
                "start": "2023-12-06T08:30:00",
                "duration_minutes": 0,
                "type": "",
                "description": "",
                "location": "",
            },
        },
    }


def test_remove_missing_event_is_a_successful_call(http_client):
    response = _invoke(http_client, "remove_event", name="Ghost")

    assert response.status_code == 200
    assert response.json()["result"] == {"removed": False, "name": "Ghost"}


def test_unknown_function_returns_404(http_client):
    response = _invoke(http_client, "edit_event", name="Meeting")

    assert response.status_code == 404


def test_invalid_arguments_return_400(http_client):
    bad_timestamp = _invoke(http_client, "add_event", name="Meeting", start="yesterday")
    unexpected_argument = _invoke(http_client, "remove_event", title="Meeting")

    assert bad_timestamp.status_code == 400
    assert unexpected_argument.status_code == 400


def test_null_filter_matches_everything(http_client):
    _invoke(http_client, "add_event", name="Meeting", start="2023-12-05T05:30:00", event_type="Business")
    _invoke(http_client, "add_event", name="Conference", start="2023-12-20T09:00:00", event_type="Tech")

    response = _invoke(http_client, "events_by_type", event_type=None)

    assert [event["name"] for event in response.json()["result"]["events"]] == ["Meeting", "Conference"]


def test_round_trip_over_http(http_client):
    def names(response):
        return [event["name"] for event in response.json()["result"]["events"]]

    added = _invoke(
        http_client,
        "add_event",
        name="Meeting",
        start="2023-12-05T05:30:00",
        duration_minutes=60,
        event_type="Business",
        description="Discuss project",
        location="Office",
    )
    duplicate = _invoke(
        http_client,
        "add_event",
        name="Meeting",
        start="2023-12-06T08:30:00",
        duration_minutes=90,
        event_type="Business",
        location="Coffee Shop",
    )
    conference = _invoke(
        http_client,
        "add_event",
        name="Conference",
        start="2023-12-20T09:00:00",
        duration_minutes=120,
        event_type="Tech",
        location="Conference Hall",
    )

    assert added.json()["result"]["added"] is True
    assert duplicate.json()["result"]["added"] is False
    assert conference.json()["result"]["added"] is True

    by_name = _invoke(http_client, "events_by_name", name="Meeting")
    assert by_name.json()["result"]["events"][0]["location"] == "Office"
    assert names(_invoke(http_client, "events_by_type", event_type="Tech")) == ["Conference"]
    assert names(_invoke(http_client, "events_by_date", start="2023-12-05T05:30:00")) == ["Meeting"]

    removed = _invoke(http_client, "remove_event", name="Meeting")
    assert removed.status_code == 200
    assert removed.json()["result"] == {"removed": True, "name": "Meeting"}

    remaining = _invoke(http_client, "all_events").json()["result"]["events"]
    assert list(remaining) == ["Conference"]
    assert http_client.get("/health").json()["events"] == 1
