"""Check-in collection service."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from ..db.repositories import CheckInStore
from ..errors import InvalidRecordError, StorageError
from ..models.calendar import CalendarDay, StreakState
from ..models.checkin import UNKNOWN_ROUTINE, CheckInRecord, ViewMode, images_from_payload
from .calendar import build_month_grid, completed_day_keys, summarize
from .dates import local_today
from .timeline import TimelineFrame, TimelineSequencer, resolve_frame

logger = logging.getLogger(__name__)

STORAGE_WARNING = "Gallery is full! Oldest photos might not be saved."


@dataclass(frozen=True)
class Capture:
    """Front and side photos handed over by the camera flow."""

    front: str
    side: str


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a mutation.

    ``persisted`` is False when the store refused the write; the change is
    still applied in memory for the current session.
    """

    record: CheckInRecord | None
    persisted: bool = True
    warning: str | None = None


class CheckInService:
    """Owns the live check-in collection and its derived views.

    Records are kept most recent first. Derived views are recomputed from
    the live collection; the sorted timeline is cached per ``version``,
    which changes on every append and delete.

    Mutations run one at a time under ``_write_lock`` so each write to the
    store carries the latest collection.
    """

    def __init__(self, store: CheckInStore, tz: tzinfo | None = None):
        self.store = store
        self.tz = tz
        self._records: list[CheckInRecord] = []
        self._version = 0
        self._timeline_cache: tuple[int, tuple[CheckInRecord, ...]] | None = None
        self._write_lock = asyncio.Lock()

    @property
    def records(self) -> list[CheckInRecord]:
        return list(self._records)

    @property
    def version(self) -> int:
        return self._version

    async def load(self) -> list[CheckInRecord]:
        """Replace the in-memory collection with the stored one."""
        async with self._write_lock:
            self._records = await self.store.load_records(self.tz)
            self._bump()
        return self.records

    def get(self, record_id: str) -> CheckInRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    async def record_capture(
        self,
        capture: Capture | None,
        routine_id: str | None = None,
        now: datetime | None = None,
    ) -> SaveResult | None:
        """Create a check-in from a finished capture.

        A cancelled capture (``None``) records nothing.
        """
        if capture is None:
            return None
        if not capture.front or not capture.side:
            raise InvalidRecordError("A capture needs both front and side images")

        now = now or datetime.now().astimezone()
        images = images_from_payload(front=capture.front, side=capture.side)
        async with self._write_lock:
            record = CheckInRecord(
                id=self._next_id(now),
                date=now,
                images=images,
                routine_id=routine_id or UNKNOWN_ROUTINE,
            )
            return await self._add(record)

    async def add(self, record: CheckInRecord) -> SaveResult:
        """Prepend a record and persist the collection."""
        async with self._write_lock:
            return await self._add(record)

    async def delete(self, record_id: str) -> SaveResult:
        """Remove a record by id; unknown ids are a no-op."""
        async with self._write_lock:
            record = self.get(record_id)
            if record is None:
                return SaveResult(record=None)
            self._records = [r for r in self._records if r.id != record_id]
            self._bump()
            return await self._persist(record)

    def timeline(self, view_mode: ViewMode = ViewMode.FRONT) -> TimelineSequencer:
        """Fresh cursor over the records, oldest first."""
        if self._timeline_cache is None or self._timeline_cache[0] != self._version:
            # Reversed gives insertion order, which breaks ties between equal dates
            ordered = TimelineSequencer(reversed(self._records)).records
            self._timeline_cache = (self._version, ordered)
        # Already sorted, so the sequencer's stable sort keeps this order
        return TimelineSequencer(self._timeline_cache[1], view_mode=view_mode)

    def summary(self, today: date | None = None) -> StreakState:
        return summarize(self._records, today=today, tz=self.tz)

    def month_grid(
        self,
        year: int | None = None,
        month: int | None = None,
        today: date | None = None,
    ) -> list[CalendarDay | None]:
        return build_month_grid(
            completed_day_keys(self._records, self.tz),
            year=year,
            month=month,
            today=today or local_today(self.tz),
        )

    def gallery(self, view_mode: ViewMode = ViewMode.FRONT) -> list[TimelineFrame]:
        """Frames in display order (most recent first)."""
        total = len(self._records)
        return [
            resolve_frame(record, view_mode, index, total)
            for index, record in enumerate(self._records)
        ]

    async def _add(self, record: CheckInRecord) -> SaveResult:
        if self.get(record.id) is not None:
            raise InvalidRecordError(f"Check-in {record.id} already exists")
        self._records.insert(0, record)
        self._bump()
        return await self._persist(record)

    def _bump(self) -> None:
        self._version += 1

    def _next_id(self, now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)
        existing = {record.id for record in self._records}
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    async def _persist(self, record: CheckInRecord) -> SaveResult:
        try:
            await self.store.save_records(self._records)
        except StorageError as e:
            logger.warning("Could not persist check-ins: %s", e)
            return SaveResult(record=record, persisted=False, warning=STORAGE_WARNING)
        return SaveResult(record=record)
