"""Chronological timelapse over check-in photos."""

from collections.abc import Iterable
from dataclasses import dataclass

from ..models.checkin import CheckInRecord, ViewMode


def image_for(record: CheckInRecord, mode: ViewMode) -> str | None:
    """Image to show for a record in the given view mode.

    Front mode falls back to the legacy single image. Side mode never
    falls back to another angle; callers render a missing-side state.
    """
    if mode == ViewMode.SIDE:
        return record.images.side_view()
    return record.images.front_view()


def has_side(record: CheckInRecord) -> bool:
    return record.images.side_view() is not None


@dataclass(frozen=True)
class TimelineFrame:
    """What the viewer shows at one cursor position."""

    record: CheckInRecord
    index: int
    total: int
    view_mode: ViewMode
    image: str | None
    has_side: bool

    @property
    def missing_side(self) -> bool:
        return self.view_mode == ViewMode.SIDE and self.image is None

    @property
    def position_label(self) -> str:
        return f"{self.index + 1} / {self.total}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.record.id,
            "date": self.record.date.isoformat(),
            "routine_id": self.record.routine_id,
            "index": self.index,
            "total": self.total,
            "view_mode": self.view_mode.value,
            "image": self.image,
            "has_side": self.has_side,
            "missing_side": self.missing_side,
        }


def resolve_frame(
    record: CheckInRecord, mode: ViewMode, index: int = 0, total: int = 1
) -> TimelineFrame:
    """Resolve the displayed image and side-view state for a record."""
    return TimelineFrame(
        record=record,
        index=index,
        total=total,
        view_mode=mode,
        image=image_for(record, mode),
        has_side=has_side(record),
    )


class TimelineSequencer:
    """Index-based cursor over check-ins sorted oldest to newest.

    The input is copied before sorting, so later changes to the caller's
    collection do not affect an open timeline. Ties keep their input
    order.
    """

    def __init__(
        self,
        records: Iterable[CheckInRecord],
        view_mode: ViewMode = ViewMode.FRONT,
    ):
        self.records: tuple[CheckInRecord, ...] = tuple(
            sorted(records, key=lambda record: record.date.timestamp())
        )
        self.view_mode = view_mode
        self._index = 0

    def __len__(self) -> int:
        return len(self.records)

    @property
    def index(self) -> int:
        return self._index

    @property
    def last_index(self) -> int:
        return max(0, len(self.records) - 1)

    @property
    def is_at_start(self) -> bool:
        return self._index == 0

    @property
    def is_at_end(self) -> bool:
        return self._index >= self.last_index

    @property
    def current(self) -> CheckInRecord | None:
        if not self.records:
            return None
        return self.records[self._index]

    def seek(self, index: int) -> int:
        """Jump to a position, clamped to the valid range."""
        self._index = min(max(0, index), self.last_index)
        return self._index

    def step(self, delta: int) -> int:
        """Move by ``delta`` positions; stepping past either end stays put."""
        return self.seek(self._index + delta)

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = ViewMode(mode)

    def toggle_view_mode(self) -> ViewMode:
        """Switch between front and side."""
        self.view_mode = (
            ViewMode.SIDE if self.view_mode == ViewMode.FRONT else ViewMode.FRONT
        )
        return self.view_mode

    def frame(self) -> TimelineFrame | None:
        """Frame at the cursor, or None for an empty timeline."""
        record = self.current
        if record is None:
            return None
        return resolve_frame(record, self.view_mode, self._index, len(self.records))
