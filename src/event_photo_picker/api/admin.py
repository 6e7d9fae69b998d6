"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from event_photo_picker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/sessions", dependencies=[Depends(require_admin)])
def list_sessions(request: Request) -> dict[str, object]:
    """Return live picker sessions with their selection progress."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions()
    return {
        "sessions": [
            {
                "sessionId": str(session.id),
                "eventId": session.window.event_id,
                "eventName": session.window.event_name,
                "createdAt": session.created_at.isoformat(),
                "totalCount": session.counts.total,
                "selectedCount": session.selection.selection_count(),
            }
            for session in sessions
        ]
    }
