"""Tests for container wiring."""

import asyncio

import pytest

from event_photo_picker import containers
from event_photo_picker.containers import build_container


def test_build_container_creates_services(
    settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr(containers, "create_client", fake_create_client)

    container = build_container(settings)

    assert created == [("https://example.supabase.co", "service-key")]
    assert container.session_service is not None
    assert container.session_service.encoder.max_workers == settings.export_max_workers
    asyncio.run(container.close_resources())
