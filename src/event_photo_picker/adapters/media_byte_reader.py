"""Byte access to media files on disk or behind a URL."""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from event_photo_picker.services.export import ByteReader


@dataclass
class MediaByteReader(ByteReader):
    """Reads local paths and ``file://`` URIs from disk, ``http(s)://`` via httpx."""

    http_client: httpx.Client
    timeout: float = 20.0

    @classmethod
    def create(cls, timeout: float = 20.0) -> "MediaByteReader":
        """Create a reader with a managed httpx session."""
        return cls(http_client=httpx.Client(follow_redirects=True), timeout=timeout)

    def read_bytes(self, file_path: str) -> bytes:
        """Return the bytes behind a path or URI."""
        parsed = urlparse(file_path)
        if parsed.scheme in {"http", "https"}:
            response = self.http_client.get(file_path, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        if parsed.scheme == "file":
            return Path(unquote(parsed.path)).read_bytes()
        return Path(file_path).read_bytes()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
