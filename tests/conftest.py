from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from event_calendar.api import api_state
from event_calendar.domain import Event
from event_calendar.services.http import app


@pytest.fixture(autouse=True)
def fresh_api_state():
    api_state.reset()
    yield
    api_state.reset()


@pytest.fixture
def meeting() -> Event:
    return Event("Meeting", datetime(2023, 12, 5, 5, 30), 60, "Business", "Discuss project", "Office")


@pytest.fixture
def conference() -> Event:
    return Event("Conference", datetime(2023, 12, 20, 9, 0), 120, "Tech", "Annual tech conference", "Conference Hall")


@pytest.fixture
def http_client():
    with TestClient(app) as client:
        yield client
