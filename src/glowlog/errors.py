"""Exceptions raised by glowlog."""


class GlowlogError(Exception):
    """Base class for glowlog errors."""


class MalformedTimestampError(GlowlogError, ValueError):
    """A check-in date could not be parsed."""


class InvalidRecordError(GlowlogError, ValueError):
    """A check-in record is missing required fields."""


class StorageError(GlowlogError):
    """Persisting the check-in collection failed."""


class StorageFullError(StorageError):
    """The serialized collection exceeds the store's quota."""
