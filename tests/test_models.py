"""Tests for data models."""

from datetime import date, datetime, timezone

import pytest

from glowlog.errors import InvalidRecordError, MalformedTimestampError
from glowlog.models.calendar import CalendarDay, StreakState
from glowlog.models.checkin import (
    UNKNOWN_ROUTINE,
    CheckInRecord,
    FrontAndSide,
    FrontOnly,
    LegacyOnly,
    images_from_payload,
)


class TestImageVariants:
    """Tests for the front/side/legacy image union."""

    def test_front_and_side(self):
        """Test both angles present."""
        images = images_from_payload(front="f", side="s")
        assert images == FrontAndSide(front="f", side="s")
        assert images.front_view() == "f"
        assert images.side_view() == "s"

    def test_front_only(self):
        """Test missing side photo."""
        images = images_from_payload(front="f")
        assert isinstance(images, FrontOnly)
        assert images.side_view() is None

    def test_legacy_only(self):
        """Test single pre-split photo."""
        images = images_from_payload(legacy="old")
        assert isinstance(images, LegacyOnly)
        assert images.front_view() == "old"
        assert images.side_view() is None

    def test_front_preferred_over_legacy(self):
        """Test front wins when both front and legacy exist."""
        images = images_from_payload(front="f", legacy="old")
        assert images == FrontOnly(front="f")

    def test_no_displayable_image_rejected(self):
        """Test a record with neither front nor legacy is invalid."""
        with pytest.raises(InvalidRecordError):
            images_from_payload(side="s")
        with pytest.raises(InvalidRecordError):
            images_from_payload()


class TestCheckInRecord:
    """Tests for CheckInRecord serialization."""

    def test_from_dict_front_and_side(self):
        """Test loading a current-format record."""
        record = CheckInRecord.from_dict(
            {
                "id": "1714555800000",
                "date": "2024-05-01T09:30:00.000Z",
                "images": {"front": "f", "side": "s"},
                "courseId": "jawline",
            }
        )

        assert record.id == "1714555800000"
        assert record.date == datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        assert record.front_image == "f"
        assert record.side_image == "s"
        assert record.legacy_image is None
        assert record.routine_id == "jawline"

    def test_from_dict_legacy(self):
        """Test loading a record saved before front/side capture."""
        record = CheckInRecord.from_dict(
            {"id": "1", "date": "2023-12-01T08:00:00Z", "imageData": "old"}
        )

        assert record.legacy_image == "old"
        assert record.front_image is None
        assert record.side_image is None
        assert record.routine_id == UNKNOWN_ROUTINE

    def test_from_dict_rejects_bad_date(self):
        """Test malformed timestamps are rejected at construction."""
        with pytest.raises(MalformedTimestampError):
            CheckInRecord.from_dict(
                {"id": "1", "date": "yesterday-ish", "images": {"front": "f"}}
            )

    def test_from_dict_rejects_missing_id(self):
        """Test records need an id."""
        with pytest.raises(InvalidRecordError):
            CheckInRecord.from_dict({"date": "2024-05-01T09:30:00Z", "imageData": "x"})

    def test_to_dict_keeps_persisted_shape(self):
        """Test serialization writes the stored key names."""
        record = CheckInRecord.from_dict(
            {
                "id": "1",
                "date": "2024-05-01T09:30:00+00:00",
                "images": {"front": "f"},
                "courseId": "jawline",
            }
        )
        data = record.to_dict()

        assert data == {
            "id": "1",
            "date": "2024-05-01T09:30:00+00:00",
            "images": {"front": "f"},
            "courseId": "jawline",
        }

    def test_legacy_to_dict(self):
        """Test legacy records keep the single image field."""
        record = CheckInRecord.from_dict(
            {"id": "1", "date": "2024-05-01T09:30:00+00:00", "imageData": "old"}
        )
        data = record.to_dict()

        assert data["imageData"] == "old"
        assert "images" not in data

    def test_records_are_immutable(self):
        """Test records cannot be edited in place."""
        record = CheckInRecord.from_dict(
            {"id": "1", "date": "2024-05-01T09:30:00Z", "imageData": "old"}
        )
        with pytest.raises(AttributeError):
            record.routine_id = "changed"


class TestDerivedModels:
    """Tests for calendar and streak models."""

    def test_calendar_day(self):
        """Test day number and dict form."""
        cell = CalendarDay(day_key=date(2024, 5, 3), is_completed=True)
        assert cell.day == 3
        assert cell.to_dict() == {
            "date": "2024-05-03",
            "day": 3,
            "is_completed": True,
            "is_today": False,
        }

    def test_streak_status_display(self):
        """Test today's status message."""
        assert "Done" in StreakState(count=2, is_today_done=True).get_status_display()
        assert "No check-in" in StreakState(count=2, is_today_done=False).get_status_display()
