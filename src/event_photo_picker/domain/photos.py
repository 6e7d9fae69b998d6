"""Domain models for event photo candidates."""

from dataclasses import dataclass


def local_identifier(photo_id: str, file_path: str) -> str:
    """Return the dedup and selection key for a media record."""
    return f"{photo_id}_{file_path}"


@dataclass(frozen=True)
class Photo:
    """A media-library item considered for an event."""

    id: str
    file_path: str
    date_taken: int
    date_modified: int
    width: int
    height: int
    mime_type: str
    size_bytes: int
    is_uploaded: bool = False

    @property
    def local_identifier(self) -> str:
        return local_identifier(self.id, self.file_path)


@dataclass(frozen=True)
class EventWindow:
    """Time range of an event in epoch milliseconds, both ends inclusive."""

    event_id: str
    start_time: int
    end_time: int
    event_name: str | None = None

    def contains(self, timestamp_ms: int) -> bool:
        return self.start_time <= timestamp_ms <= self.end_time


@dataclass(frozen=True)
class UploadCounts:
    """Aggregate upload state of a candidate set."""

    total: int
    uploaded: int
    pending: int
