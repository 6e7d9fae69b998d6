"""Domain models for exported selections."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExportedPhoto:
    """Transfer payload for one selected photo."""

    local_identifier: str
    creation_time_seconds: int
    modification_time_seconds: int
    width: int
    height: int
    mime_type: str
    is_uploaded: bool
    file_path: str
    size_bytes: int
    content: str | None = None


@dataclass(frozen=True)
class SelectionResult:
    """Final outcome of a picking session."""

    photos: list[ExportedPhoto] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.photos)
