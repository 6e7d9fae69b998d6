"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from event_photo_picker.adapters.media_byte_reader import MediaByteReader
from event_photo_picker.adapters.sqlite_media_store import SqliteMediaStore
from event_photo_picker.adapters.supabase_uploaded_photo_repository import (
    SupabaseUploadedPhotoRepository,
)
from event_photo_picker.config import Settings
from event_photo_picker.services.export import ExportEncoder
from event_photo_picker.services.loader import CandidateLoader
from event_photo_picker.services.session_store import InMemorySessionStore
from event_photo_picker.services.sessions import PickerSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: PickerSessionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    uploaded_repository = SupabaseUploadedPhotoRepository(
        supabase_client, table=resolved_settings.uploaded_photos_table
    )
    media_store = SqliteMediaStore(resolved_settings.media_index_path)
    byte_reader = MediaByteReader.create(
        timeout=resolved_settings.remote_read_timeout_seconds
    )
    session_service = PickerSessionService(
        loader=CandidateLoader(media_store),
        encoder=ExportEncoder(
            reader=byte_reader,
            max_workers=resolved_settings.export_max_workers,
        ),
        store=InMemorySessionStore(ttl_seconds=resolved_settings.session_ttl_seconds),
        uploaded_repository=uploaded_repository,
    )

    async def close_resources() -> None:
        byte_reader.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        close_resources=close_resources,
    )
