"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from event_photo_picker.api.admin import router as admin_router
from event_photo_picker.api.models import (
    ConfirmRequest,
    EventPhotosRequest,
    ToggleRequest,
)
from event_photo_picker.app_logging import configure_logging
from event_photo_picker.containers import AppContainer
from event_photo_picker.domain.errors import (
    InvalidRequestError,
    PermissionDeniedError,
    PickerError,
    SessionNotFoundError,
    SourceUnavailableError,
)
from event_photo_picker.domain.exports import ExportedPhoto, SelectionResult
from event_photo_picker.domain.photos import Photo
from event_photo_picker.services.export import metadata_for
from event_photo_picker.services.sessions import PickerSession


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(PickerError)
    async def picker_error_handler(request: Request, exc: PickerError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning("Photo source unavailable", extra={"path": request.url.path})
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/events/photos/metadata")
    def event_photos_metadata(
        body: EventPhotosRequest, request: Request
    ) -> dict[str, object]:
        """Return reconciled photo metadata for an event window."""
        state_container: AppContainer = request.app.state.container
        metadata = state_container.session_service.describe_event(
            body.to_picker_request()
        )
        return {
            "photos": [_photo_payload(photo) for photo in metadata.photos],
            "totalCount": metadata.counts.total,
            "uploadedCount": metadata.counts.uploaded,
            "pendingCount": metadata.counts.pending,
        }

    @app.post("/picker/sessions", status_code=status.HTTP_201_CREATED)
    def open_session(body: EventPhotosRequest, request: Request) -> dict[str, object]:
        """Open a picking session for an event window."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.open_session(
            body.to_picker_request()
        )
        return _session_payload(session)

    @app.get("/picker/sessions/{session_id}")
    def get_session(session_id: UUID, request: Request) -> dict[str, object]:
        """Return the candidates and selection of a session."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service.get_session(session_id)
        return _session_payload(session)

    @app.post("/picker/sessions/{session_id}/toggle")
    def toggle_photo(
        session_id: UUID, body: ToggleRequest, request: Request
    ) -> dict[str, object]:
        """Toggle the selection of one photo."""
        service = request.app.state.container.session_service
        applied = service.toggle(session_id, body.local_identifier)
        session = service.get_session(session_id)
        return {
            "applied": applied,
            "localIdentifier": body.local_identifier,
            "isSelected": session.selection.is_selected(body.local_identifier),
            "selectedCount": session.selection.selection_count(),
        }

    @app.post("/picker/sessions/{session_id}/clear")
    def clear_selection(session_id: UUID, request: Request) -> dict[str, object]:
        """Deselect every photo in a session."""
        service = request.app.state.container.session_service
        service.clear(session_id)
        return {"selectedCount": 0}

    @app.post("/picker/sessions/{session_id}/confirm")
    def confirm_selection(
        session_id: UUID, request: Request, body: ConfirmRequest | None = None
    ) -> dict[str, object]:
        """Close the session and return the selected photos."""
        options = body or ConfirmRequest()
        service = request.app.state.container.session_service
        result = service.confirm(session_id, include_content=options.include_content)
        return _result_payload(result)

    @app.post("/picker/sessions/{session_id}/cancel")
    def cancel_session(session_id: UUID, request: Request) -> dict[str, object]:
        """Discard a session."""
        service = request.app.state.container.session_service
        return _result_payload(service.cancel(session_id))

    return app


def _status_for(exc: PickerError) -> int:
    if isinstance(exc, InvalidRequestError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, PermissionDeniedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, SourceUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(exc, SessionNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _photo_payload(photo: Photo) -> dict[str, object]:
    return _exported_payload(metadata_for(photo))


def _exported_payload(photo: ExportedPhoto) -> dict[str, object]:
    payload: dict[str, object] = {
        "localIdentifier": photo.local_identifier,
        "creationDate": photo.creation_time_seconds,
        "modificationDate": photo.modification_time_seconds,
        "width": photo.width,
        "height": photo.height,
        "mimeType": photo.mime_type,
        "isUploaded": photo.is_uploaded,
        "filePath": photo.file_path,
        "size": photo.size_bytes,
    }
    if photo.content is not None:
        payload["base64"] = photo.content
    return payload


def _result_payload(result: SelectionResult) -> dict[str, object]:
    return {
        "photos": [_exported_payload(photo) for photo in result.photos],
        "count": result.count,
    }


def _session_payload(session: PickerSession) -> dict[str, object]:
    selection = session.selection
    photos = []
    for photo in selection.photos:
        payload = _photo_payload(photo)
        payload["isSelected"] = selection.is_selected(photo.local_identifier)
        photos.append(payload)
    return {
        "sessionId": str(session.id),
        "eventId": session.window.event_id,
        "eventName": session.window.event_name,
        "photos": photos,
        "totalCount": session.counts.total,
        "uploadedCount": session.counts.uploaded,
        "pendingCount": session.counts.pending,
        "selectedCount": selection.selection_count(),
    }
