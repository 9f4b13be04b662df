"""Data access layer for glowlog."""

import json
import logging
from collections.abc import Sequence
from datetime import tzinfo
from pathlib import Path

import aiosqlite

from ..config import DEFAULT_MAX_PAYLOAD_BYTES
from ..errors import GlowlogError, StorageError, StorageFullError
from ..models.checkin import CheckInRecord
from .engine import get_db_path, init_db

logger = logging.getLogger(__name__)

SELFIES_KEY = "selfies"


class CheckInStore:
    """Key-value store holding the whole check-in collection as one blob.

    Every append or delete rewrites the full collection, the same contract
    as a browser key-value store. Payloads over ``max_payload_bytes`` are
    refused.
    """

    def __init__(
        self,
        db_path: Path | None = None,
        max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES,
    ):
        self.db_path = db_path or get_db_path()
        self.max_payload_bytes = max_payload_bytes
        self._initialized = False

    async def load_records(self, tz: tzinfo | None = None) -> list[CheckInRecord]:
        """Load the stored collection in stored order.

        Entries that fail validation are skipped and logged. Naive stored
        timestamps are read in ``tz``.
        """
        raw = await self.get(SELFIES_KEY)
        if raw is None:
            return []

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Stored check-ins are not valid JSON: {e}") from e
        if not isinstance(entries, list):
            raise StorageError("Stored check-ins are not a list")

        records = []
        for entry in entries:
            try:
                records.append(CheckInRecord.from_dict(entry, tz))
            except (GlowlogError, AttributeError) as e:
                logger.warning("Skipping stored check-in %r: %s", _entry_id(entry), e)
        return records

    async def save_records(self, records: Sequence[CheckInRecord]) -> None:
        """Replace the stored collection.

        Raises:
            StorageFullError: If the serialized collection is over quota
            StorageError: If the database write fails
        """
        payload = json.dumps([record.to_dict() for record in records])
        size = len(payload.encode("utf-8"))
        if size > self.max_payload_bytes:
            raise StorageFullError(
                f"Check-in collection is {size} bytes, limit is {self.max_payload_bytes}"
            )
        await self.set(SELFIES_KEY, payload)

    async def get(self, key: str) -> str | None:
        """Get a raw value by key."""
        await self._ensure_schema()
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to read {key!r}: {e}") from e
        if row is None:
            return None
        return row["value"]

    async def set(self, key: str, value: str) -> None:
        """Create or replace a raw value."""
        await self._ensure_schema()
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO kv_store (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, value),
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to write {key!r}: {e}") from e

    async def _ensure_schema(self) -> None:
        if self._initialized:
            return
        try:
            await init_db(self.db_path)
        except aiosqlite.Error as e:
            raise StorageError(f"Failed to open {self.db_path}: {e}") from e
        self._initialized = True


def _entry_id(entry: object) -> object:
    if isinstance(entry, dict):
        return entry.get("id")
    return None
