"""SQLite-backed media library index."""

import os
import sqlite3
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from event_photo_picker.domain.errors import (
    PermissionDeniedError,
    SourceUnavailableError,
)
from event_photo_picker.services.loader import PhotoSource

# Record field -> MediaStore column.
_COLUMNS = {
    "id": "_id",
    "file_path": "_data",
    "date_taken": "datetaken",
    "date_modified": "date_modified",
    "width": "width",
    "height": "height",
    "mime_type": "mime_type",
    "size": "_size",
}


@dataclass
class SqliteMediaStore(PhotoSource):
    """Photo source reading a MediaStore-shaped ``images`` table."""

    db_path: Path
    table: str = "images"

    def query_photos(
        self, start_ms: int, end_ms: int, fields: tuple[str, ...]
    ) -> Iterator[Mapping[str, object]]:
        """Yield records captured within the inclusive range, newest first."""
        self._check_access()
        projection = ", ".join(f"{_COLUMNS[name]} AS {name}" for name in fields)
        query = (
            f"SELECT {projection} FROM {self.table} "
            "WHERE datetaken BETWEEN ? AND ? ORDER BY datetaken DESC"
        )
        try:
            conn = sqlite3.connect(
                f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True
            )
        except sqlite3.Error as exc:
            raise SourceUnavailableError(f"Cannot open media index: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            rows = conn.execute(query, (start_ms, end_ms)).fetchall()
        except sqlite3.Error as exc:
            raise SourceUnavailableError(f"Media index query failed: {exc}") from exc
        finally:
            conn.close()
        for row in rows:
            yield dict(row)

    def _check_access(self) -> None:
        if not self.db_path.exists():
            raise SourceUnavailableError(f"Media index not found: {self.db_path}")
        if not os.access(self.db_path, os.R_OK):
            raise PermissionDeniedError(
                "Photo permissions are required to access photos"
            )
