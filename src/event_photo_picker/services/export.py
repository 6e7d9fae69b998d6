"""Export of selected photos into transfer payloads."""

import base64
import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

from event_photo_picker.domain.exports import ExportedPhoto
from event_photo_picker.domain.photos import Photo

logger = logging.getLogger(__name__)

_EXTENSION_MIME_TYPES = (
    (".png", "image/png"),
    (".gif", "image/gif"),
    (".webp", "image/webp"),
)


class ByteReader(Protocol):
    """Reads the raw bytes behind a media path or URI."""

    def read_bytes(self, file_path: str) -> bytes:
        """Return the file contents."""


@dataclass
class ExportEncoder:
    """Resolves selected identifiers and builds transfer payloads."""

    reader: ByteReader
    max_workers: int = 4

    def export(
        self,
        selected_ids: Sequence[str],
        resolver: Callable[[str], Photo | None],
        include_content: bool,
    ) -> list[ExportedPhoto]:
        """Return one payload per resolvable id, in the order requested."""
        photos: list[Photo] = []
        for identifier in selected_ids:
            photo = resolver(identifier)
            if photo is None:
                logger.info(
                    "Skipping selected photo missing from session",
                    extra={"local_identifier": identifier},
                )
                continue
            photos.append(photo)
        if not include_content or not photos:
            return [metadata_for(photo) for photo in photos]
        workers = max(1, min(self.max_workers, len(photos)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields results in submission order.
            contents = list(executor.map(self._encode_content, photos))
        return [
            metadata_for(photo, content)
            for photo, content in zip(photos, contents, strict=True)
        ]

    def _encode_content(self, photo: Photo) -> str:
        try:
            data = self.reader.read_bytes(photo.file_path)
            return to_data_url(data, infer_mime_type(photo.file_path))
        except Exception:
            logger.exception(
                "Failed to encode photo content",
                extra={"file_path": photo.file_path},
            )
            return ""


def infer_mime_type(file_path: str) -> str:
    """Guess an image MIME type from the file extension."""
    lowered = file_path.lower()
    for extension, mime_type in _EXTENSION_MIME_TYPES:
        if lowered.endswith(extension):
            return mime_type
    return "image/jpeg"


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _to_seconds(timestamp_ms: int) -> int:
    seconds = abs(timestamp_ms) // 1000
    return seconds if timestamp_ms >= 0 else -seconds


def metadata_for(photo: Photo, content: str | None = None) -> ExportedPhoto:
    """Project a photo onto its transfer metadata."""
    return ExportedPhoto(
        local_identifier=photo.local_identifier,
        creation_time_seconds=_to_seconds(photo.date_taken),
        modification_time_seconds=_to_seconds(photo.date_modified),
        width=photo.width,
        height=photo.height,
        mime_type=photo.mime_type,
        is_uploaded=photo.is_uploaded,
        file_path=photo.file_path,
        size_bytes=photo.size_bytes,
        content=content,
    )
