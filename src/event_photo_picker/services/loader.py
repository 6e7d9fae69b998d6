"""Candidate loading from the device media library."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

from event_photo_picker.domain.errors import InvalidRequestError
from event_photo_picker.domain.photos import EventWindow, Photo

logger = logging.getLogger(__name__)

MEDIA_FIELDS = (
    "id",
    "file_path",
    "date_taken",
    "date_modified",
    "width",
    "height",
    "mime_type",
    "size",
)


class PhotoSource(Protocol):
    """Read access to the device media library."""

    def query_photos(
        self, start_ms: int, end_ms: int, fields: tuple[str, ...]
    ) -> Iterable[Mapping[str, object]]:
        """Return raw records captured within the inclusive range, newest first."""


@dataclass
class CandidateLoader:
    """Builds the time-bounded, deduplicated candidate list for an event."""

    source: PhotoSource

    def load(self, window: EventWindow) -> list[Photo]:
        """Return photos captured inside the window, newest first."""
        if window.start_time > window.end_time:
            raise InvalidRequestError("startTime must not be after endTime")
        photos: list[Photo] = []
        seen: set[str] = set()
        dropped = 0
        rows = self.source.query_photos(
            window.start_time, window.end_time, MEDIA_FIELDS
        )
        for row in rows:
            try:
                photo = photo_from_record(row)
            except (KeyError, TypeError, ValueError, OverflowError) as exc:
                dropped += 1
                logger.warning(
                    "Dropping malformed media record",
                    extra={"event_id": window.event_id, "error": str(exc)},
                )
                continue
            if not window.contains(photo.date_taken):
                continue
            if photo.local_identifier in seen:
                continue
            seen.add(photo.local_identifier)
            photos.append(photo)
        # sorted() is stable, so equal capture times keep the source order.
        photos = sorted(photos, key=lambda photo: photo.date_taken, reverse=True)
        logger.info(
            "Loaded event candidates",
            extra={
                "event_id": window.event_id,
                "count": len(photos),
                "dropped": dropped,
            },
        )
        return photos


def photo_from_record(row: Mapping[str, object]) -> Photo:
    """Materialize a raw media record, raising on missing or corrupt fields."""
    photo_id = row["id"]
    file_path = row["file_path"]
    if photo_id is None or file_path is None:
        raise ValueError("media record is missing its id or path")
    width = _as_int(row["width"])
    height = _as_int(row["height"])
    if width < 0 or height < 0:
        raise ValueError("media record has negative dimensions")
    return Photo(
        id=str(photo_id),
        file_path=str(file_path),
        date_taken=_as_int(row["date_taken"]),
        date_modified=_as_int(row["date_modified"]),
        width=width,
        height=height,
        mime_type=str(row["mime_type"] or ""),
        size_bytes=_as_int(row["size"]),
    )


def _as_int(value: object) -> int:
    if value is None or isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)  # type: ignore[arg-type]
