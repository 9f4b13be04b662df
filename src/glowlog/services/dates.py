"""Calendar-day normalization for check-in timestamps."""

from datetime import date, datetime, tzinfo

from ..errors import MalformedTimestampError


def parse_timestamp(value: str | datetime, tz: tzinfo | None = None) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    A trailing ``Z`` is read as UTC. Naive values are taken to be in ``tz``,
    or the machine's local zone when no zone is given.

    Raises:
        MalformedTimestampError: If the value is not a parseable timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise MalformedTimestampError(f"Cannot parse timestamp: {value!r}") from e
    else:
        raise MalformedTimestampError(f"Cannot parse timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz) if tz is not None else parsed.astimezone()
    return parsed


def day_key(instant: datetime, tz: tzinfo | None = None) -> date:
    """Local civil date of an instant, ignoring time of day."""
    return instant.astimezone(tz).date()


def local_today(tz: tzinfo | None = None) -> date:
    """Today's date in the given zone (local zone by default)."""
    return datetime.now(tz).date()
