from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from donation_tracker.app.core.config import Settings
from donation_tracker.app.main import create_app
from donation_tracker.app.services.donation_service import DonationStore


class SteppingClock:
    """Clock advancing by a fixed step on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


def make_draft(**overrides):
    draft = {
        "donorName": "John Smith",
        "type": "money",
        "quantity": 100,
        "unit": "dollars",
        "date": "2024-01-15T08:00:00.000Z",
        "notes": "Monthly donation",
    }
    draft.update(overrides)
    return draft


@pytest.fixture
def clock():
    return SteppingClock(datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    return DonationStore(clock=clock)


@pytest.fixture
def client(store):
    app = create_app(store=store, app_settings=Settings(seed_sample_data=False))
    return TestClient(app)
