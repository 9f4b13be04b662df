"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from glowlog.config import Settings
from glowlog.db import CheckInStore
from glowlog.models.checkin import CheckInRecord, images_from_payload
from glowlog.services.checkins import CheckInService

BASE_TIME = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def make_record(
    record_id: str,
    when: datetime | None = None,
    front: str | None = "data:image/jpeg;base64,FRONT",
    side: str | None = "data:image/jpeg;base64,SIDE",
    legacy: str | None = None,
    routine_id: str = "morning-wakeup",
) -> CheckInRecord:
    """Build a check-in record for tests."""
    return CheckInRecord(
        id=record_id,
        date=when or BASE_TIME,
        images=images_from_payload(front=front, side=side, legacy=legacy),
        routine_id=routine_id,
    )


def records_on_days(*days: int) -> list[CheckInRecord]:
    """One record per day offset from BASE_TIME."""
    return [
        make_record(f"r{day}", BASE_TIME + timedelta(days=day)) for day in days
    ]


class FakeHandle:
    """Timer handle that runs only when the test fires it."""

    def __init__(self, delay, callback, args):
        self.delay = delay
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def run(self):
        self.callback(*self.args)


class FakeScheduler:
    """Manual stand-in for an event loop's ``call_later``."""

    def __init__(self):
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def fire_next(self) -> bool:
        """Run the oldest pending callback. Returns False if none."""
        pending = self.pending
        if not pending:
            return False
        handle = pending[0]
        handle.fired = True
        handle.run()
        return True


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def store(temp_db_path):
    """Check-in store on a temporary database."""
    return CheckInStore(temp_db_path)


@pytest.fixture
def service(store):
    """Check-in service evaluated in UTC."""
    return CheckInService(store, tz=timezone.utc)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    return Settings(data_dir=tmp_path / "data", timezone="UTC")
