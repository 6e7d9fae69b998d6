"""ASGI entrypoint for the event photo picker API."""

from event_photo_picker.api.app import create_app
from event_photo_picker.containers import build_container

app = create_app(build_container())
