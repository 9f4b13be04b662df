"""Check-in record models."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum

from ..errors import InvalidRecordError
from ..services.dates import parse_timestamp

UNKNOWN_ROUTINE = "unknown"


class ViewMode(str, Enum):
    """Which photo angle to display for a check-in."""

    FRONT = "front"
    SIDE = "side"


@dataclass(frozen=True)
class LegacyOnly:
    """Single photo saved before front/side capture existed."""

    image: str

    def front_view(self) -> str:
        return self.image

    def side_view(self) -> str | None:
        return None


@dataclass(frozen=True)
class FrontOnly:
    """Front photo without a side profile."""

    front: str

    def front_view(self) -> str:
        return self.front

    def side_view(self) -> str | None:
        return None


@dataclass(frozen=True)
class FrontAndSide:
    """Complete front and side photo pair."""

    front: str
    side: str

    def front_view(self) -> str:
        return self.front

    def side_view(self) -> str | None:
        return self.side


CheckInImages = LegacyOnly | FrontOnly | FrontAndSide


def images_from_payload(
    front: str | None = None,
    side: str | None = None,
    legacy: str | None = None,
) -> CheckInImages:
    """Pick the image variant for loosely-optional image fields.

    Front is preferred over the legacy single image. A side photo with no
    front photo is not displayable and is rejected.
    """
    if front:
        if side:
            return FrontAndSide(front=front, side=side)
        return FrontOnly(front=front)
    if legacy:
        return LegacyOnly(image=legacy)
    raise InvalidRecordError("Check-in needs a front image or a legacy image")


@dataclass(frozen=True)
class CheckInRecord:
    """A dated photo check-in made after a routine.

    Records are never edited in place; the collection only grows by
    appending and shrinks by deleting whole records.
    """

    id: str
    date: datetime
    images: CheckInImages
    routine_id: str = UNKNOWN_ROUTINE

    @property
    def front_image(self) -> str | None:
        if isinstance(self.images, (FrontOnly, FrontAndSide)):
            return self.images.front
        return None

    @property
    def side_image(self) -> str | None:
        return self.images.side_view()

    @property
    def legacy_image(self) -> str | None:
        if isinstance(self.images, LegacyOnly):
            return self.images.image
        return None

    def to_dict(self) -> dict:
        """Convert to the persisted shape."""
        data: dict = {
            "id": self.id,
            "date": self.date.isoformat(),
            "courseId": self.routine_id,
        }
        if isinstance(self.images, LegacyOnly):
            data["imageData"] = self.images.image
        else:
            images = {"front": self.images.front}
            if self.side_image:
                images["side"] = self.side_image
            data["images"] = images
        return data

    @classmethod
    def from_dict(cls, data: dict, tz: tzinfo | None = None) -> "CheckInRecord":
        """Create from the persisted shape.

        Naive timestamps are read in ``tz`` (the machine zone by default).

        Raises:
            MalformedTimestampError: If ``date`` cannot be parsed
            InvalidRecordError: If the id or displayable image is missing
        """
        record_id = data.get("id")
        if not record_id:
            raise InvalidRecordError("Check-in is missing an id")

        images = data.get("images") or {}
        return cls(
            id=str(record_id),
            date=parse_timestamp(data.get("date"), tz),
            images=images_from_payload(
                front=images.get("front"),
                side=images.get("side"),
                legacy=data.get("imageData"),
            ),
            routine_id=data.get("courseId") or UNKNOWN_ROUTINE,
        )
