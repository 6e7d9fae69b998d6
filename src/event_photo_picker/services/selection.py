"""Per-session selection state."""

from collections.abc import Sequence
from dataclasses import dataclass

from event_photo_picker.domain.errors import EmptySelectionError
from event_photo_picker.domain.photos import Photo


@dataclass
class _SelectionEntry:
    photo: Photo
    selected: bool = False


class SelectionState:
    """Selected flags for one session, keyed by local identifier.

    Entries are kept in candidate order. Uploaded photos can never be selected.
    """

    def __init__(self, candidates: Sequence[Photo]) -> None:
        self._entries: dict[str, _SelectionEntry] = {}
        for photo in candidates:
            self._entries.setdefault(photo.local_identifier, _SelectionEntry(photo))

    @property
    def photos(self) -> list[Photo]:
        return [entry.photo for entry in self._entries.values()]

    def resolve(self, identifier: str) -> Photo | None:
        """Return the candidate with the given identifier, if present."""
        entry = self._entries.get(identifier)
        return entry.photo if entry else None

    def is_selected(self, identifier: str) -> bool:
        entry = self._entries.get(identifier)
        return bool(entry and entry.selected)

    def toggle(self, identifier: str) -> bool:
        """Flip the selection of a photo; return False if the toggle was rejected."""
        entry = self._entries.get(identifier)
        if entry is None or entry.photo.is_uploaded:
            return False
        entry.selected = not entry.selected
        return True

    def clear(self) -> None:
        for entry in self._entries.values():
            entry.selected = False

    def current_selection(self) -> list[Photo]:
        return [entry.photo for entry in self._entries.values() if entry.selected]

    def selected_identifiers(self) -> list[str]:
        return [
            identifier
            for identifier, entry in self._entries.items()
            if entry.selected
        ]

    def selection_count(self) -> int:
        return sum(1 for entry in self._entries.values() if entry.selected)

    def confirm(self) -> list[str]:
        """Return the selected identifiers, rejecting an empty selection."""
        identifiers = self.selected_identifiers()
        if not identifiers:
            raise EmptySelectionError("Please select at least one photo")
        return identifiers
