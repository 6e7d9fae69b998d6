"""In-memory registry of live picker sessions."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from event_photo_picker.services.sessions import PickerSession


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _StoreEntry:
    session: "PickerSession"
    expires_at: datetime


@dataclass
class InMemorySessionStore:
    """Holds sessions until they are closed or their TTL elapses."""

    ttl_seconds: int = 900
    clock: Callable[[], datetime] = _utcnow
    _entries: dict[UUID, _StoreEntry] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, session: "PickerSession") -> None:
        expires_at = self.clock() + timedelta(seconds=self.ttl_seconds)
        with self._lock:
            self._purge_expired()
            self._entries[session.id] = _StoreEntry(session, expires_at)

    def get(self, session_id: UUID) -> "PickerSession | None":
        """Return a live session and extend its TTL; expired sessions are dropped."""
        with self._lock:
            self._purge_expired()
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            entry.expires_at = self.clock() + timedelta(seconds=self.ttl_seconds)
            return entry.session

    def pop(self, session_id: UUID) -> "PickerSession | None":
        with self._lock:
            self._purge_expired()
            entry = self._entries.pop(session_id, None)
            return entry.session if entry else None

    def values(self) -> list["PickerSession"]:
        with self._lock:
            self._purge_expired()
            return [entry.session for entry in self._entries.values()]

    def _purge_expired(self) -> None:
        now = self.clock()
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            self._entries.pop(key, None)
