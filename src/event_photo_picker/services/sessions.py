"""Lifecycle of event photo picking sessions."""

import logging
from collections.abc import Collection
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from event_photo_picker.domain.errors import (
    SessionNotFoundError,
    SourceUnavailableError,
)
from event_photo_picker.domain.exports import SelectionResult
from event_photo_picker.domain.photos import EventWindow, Photo, UploadCounts
from event_photo_picker.services.export import ExportEncoder
from event_photo_picker.services.loader import CandidateLoader
from event_photo_picker.services.reconciler import reconcile
from event_photo_picker.services.selection import SelectionState
from event_photo_picker.services.session_store import InMemorySessionStore
from event_photo_picker.services.windows import build_event_window

logger = logging.getLogger(__name__)


class UploadedPhotoRepository(Protocol):
    """Server-side record of photos already uploaded to an event."""

    def list_uploaded_identifiers(self, event_id: str) -> set[str]:
        """Return local identifiers already uploaded for the event."""


@dataclass(frozen=True)
class PickerRequest:
    """Raw parameters of a metadata or picking request."""

    event_id: str | None
    start_time: object
    end_time: object
    event_name: str | None = None
    uploaded_photo_ids: Collection[str] = ()


@dataclass(frozen=True)
class EventPhotosMetadata:
    """Reconciled candidates of an event with their upload counts."""

    window: EventWindow
    photos: list[Photo]
    counts: UploadCounts


@dataclass
class PickerSession:
    """One interactive picking session and the state it owns."""

    id: UUID
    window: EventWindow
    selection: SelectionState
    counts: UploadCounts
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


@dataclass
class PickerSessionService:
    """Coordinates loading, reconciliation, selection and export."""

    loader: CandidateLoader
    encoder: ExportEncoder
    store: InMemorySessionStore
    uploaded_repository: UploadedPhotoRepository | None = None

    def describe_event(self, request: PickerRequest) -> EventPhotosMetadata:
        """Return reconciled candidates for an event without opening a session."""
        window = build_event_window(
            request.event_id, request.event_name, request.start_time, request.end_time
        )
        photos, counts = self._load_candidates(window, request.uploaded_photo_ids)
        return EventPhotosMetadata(window=window, photos=photos, counts=counts)

    def open_session(self, request: PickerRequest) -> PickerSession:
        """Load an event's candidates into a new session."""
        metadata = self.describe_event(request)
        session = PickerSession(
            id=uuid4(),
            window=metadata.window,
            selection=SelectionState(metadata.photos),
            counts=metadata.counts,
        )
        self.store.add(session)
        logger.info(
            "Opened picker session",
            extra={
                "session_id": str(session.id),
                "event_id": metadata.window.event_id,
                "total": metadata.counts.total,
                "pending": metadata.counts.pending,
            },
        )
        return session

    def get_session(self, session_id: UUID) -> PickerSession:
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Picker session {session_id} not found")
        return session

    def list_sessions(self) -> list[PickerSession]:
        return self.store.values()

    def toggle(self, session_id: UUID, identifier: str) -> bool:
        """Toggle a photo in a session; return whether the toggle was applied."""
        return self.get_session(session_id).selection.toggle(identifier)

    def clear(self, session_id: UUID) -> None:
        self.get_session(session_id).selection.clear()

    def confirm(
        self, session_id: UUID, include_content: bool = True
    ) -> SelectionResult:
        """Close the session and export its selection.

        An empty selection is rejected and leaves the session open.
        """
        session = self.get_session(session_id)
        identifiers = session.selection.confirm()
        candidates = {
            photo.local_identifier: photo for photo in session.selection.photos
        }
        self.store.pop(session_id)
        photos = self.encoder.export(identifiers, candidates.get, include_content)
        logger.info(
            "Confirmed picker session",
            extra={
                "session_id": str(session_id),
                "selected": len(identifiers),
                "exported": len(photos),
            },
        )
        return SelectionResult(photos=photos)

    def cancel(self, session_id: UUID) -> SelectionResult:
        """Discard a session and return the empty result."""
        if self.store.pop(session_id) is not None:
            logger.info(
                "Cancelled picker session", extra={"session_id": str(session_id)}
            )
        return SelectionResult()

    def _load_candidates(
        self, window: EventWindow, uploaded_photo_ids: Collection[str]
    ) -> tuple[list[Photo], UploadCounts]:
        uploaded_ids = set(uploaded_photo_ids)
        if self.uploaded_repository is not None:
            try:
                uploaded_ids |= self.uploaded_repository.list_uploaded_identifiers(
                    window.event_id
                )
            except Exception as exc:
                logger.exception(
                    "Failed to fetch uploaded photo ids",
                    extra={"event_id": window.event_id},
                )
                raise SourceUnavailableError(
                    "Could not fetch uploaded photos for the event"
                ) from exc
        candidates = self.loader.load(window)
        return reconcile(candidates, uploaded_ids)
