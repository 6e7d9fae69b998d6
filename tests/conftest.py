"""Shared test fixtures."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from event_photo_picker.config import Settings
from event_photo_picker.containers import AppContainer
from event_photo_picker.services.export import ByteReader, ExportEncoder
from event_photo_picker.services.loader import CandidateLoader, PhotoSource
from event_photo_picker.services.session_store import InMemorySessionStore
from event_photo_picker.services.sessions import (
    PickerSessionService,
    UploadedPhotoRepository,
)


def make_record(
    photo_id: str,
    date_taken: int,
    file_path: str | None = None,
    **overrides: object,
) -> dict[str, object]:
    """Build a raw media record as a photo source returns it."""
    record: dict[str, object] = {
        "id": photo_id,
        "file_path": file_path or f"/storage/DCIM/IMG_{photo_id}.jpg",
        "date_taken": date_taken,
        "date_modified": date_taken + 500,
        "width": 4032,
        "height": 3024,
        "mime_type": "image/jpeg",
        "size": 2_048_000,
    }
    record.update(overrides)
    return record


@dataclass
class FakePhotoSource(PhotoSource):
    """Photo source returning canned records without filtering them."""

    records: list[dict[str, object]] = field(default_factory=list)
    error: Exception | None = None
    calls: list[tuple[int, int]] = field(default_factory=list)

    def query_photos(
        self, start_ms: int, end_ms: int, fields: tuple[str, ...]
    ) -> Iterable[Mapping[str, object]]:
        self.calls.append((start_ms, end_ms))
        if self.error is not None:
            raise self.error
        return list(self.records)


@dataclass
class FakeByteReader(ByteReader):
    """Byte reader serving in-memory file contents."""

    files: dict[str, bytes] = field(default_factory=dict)
    reads: list[str] = field(default_factory=list)

    def read_bytes(self, file_path: str) -> bytes:
        self.reads.append(file_path)
        if file_path not in self.files:
            raise FileNotFoundError(file_path)
        return self.files[file_path]


@dataclass
class InMemoryUploadedPhotoRepository(UploadedPhotoRepository):
    """Uploaded photo repository keyed by event id."""

    uploaded: dict[str, set[str]] = field(default_factory=dict)

    def list_uploaded_identifiers(self, event_id: str) -> set[str]:
        return set(self.uploaded.get(event_id, set()))


class FailingUploadedPhotoRepository(UploadedPhotoRepository):
    def list_uploaded_identifiers(self, event_id: str) -> set[str]:
        raise RuntimeError("connection reset")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
        media_index_path=tmp_path / "media.db",
    )


@pytest.fixture
def photo_source() -> FakePhotoSource:
    return FakePhotoSource(
        records=[
            make_record("3", 6000),
            make_record("2", 4000),
            make_record("1", 2000),
        ]
    )


@pytest.fixture
def byte_reader() -> FakeByteReader:
    return FakeByteReader(
        files={
            "/storage/DCIM/IMG_1.jpg": b"first",
            "/storage/DCIM/IMG_2.jpg": b"second",
        }
    )


@pytest.fixture
def uploaded_repository() -> InMemoryUploadedPhotoRepository:
    return InMemoryUploadedPhotoRepository()


@pytest.fixture
def session_service(
    photo_source: FakePhotoSource,
    byte_reader: FakeByteReader,
    uploaded_repository: InMemoryUploadedPhotoRepository,
) -> PickerSessionService:
    return PickerSessionService(
        loader=CandidateLoader(photo_source),
        encoder=ExportEncoder(reader=byte_reader, max_workers=2),
        store=InMemorySessionStore(ttl_seconds=60),
        uploaded_repository=uploaded_repository,
    )


@pytest.fixture
def container(
    settings: Settings, session_service: PickerSessionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_service=session_service,
        close_resources=close_resources,
    )
