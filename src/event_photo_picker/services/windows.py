"""Normalization of event time windows."""

from datetime import UTC, datetime

from event_photo_picker.domain.errors import InvalidRequestError
from event_photo_picker.domain.photos import EventWindow


def parse_timestamp(value: object, field_name: str = "timestamp") -> int:
    """Convert an ISO-8601 string or epoch milliseconds into epoch milliseconds.

    Naive ISO values are treated as UTC. A trailing ``Z`` and fractional
    seconds of any precision are accepted, as is a space instead of ``T``.
    """
    if value is None:
        raise InvalidRequestError(f"Missing required parameter: {field_name}")
    if isinstance(value, bool):
        raise InvalidRequestError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise InvalidRequestError(f"Invalid {field_name}: {value!r}")
    text = value.strip()
    if not text:
        raise InvalidRequestError(f"Missing required parameter: {field_name}")
    if text.isascii() and text.isdigit():
        return int(text)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidRequestError(
            f"Invalid ISO8601 date for {field_name}: {value}"
        ) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return _epoch_millis(parsed)


def build_event_window(
    event_id: str | None,
    event_name: str | None,
    start_time: object,
    end_time: object,
) -> EventWindow:
    """Validate raw request fields and return a normalized event window."""
    if event_id is None or not str(event_id).strip():
        raise InvalidRequestError("Missing required parameter: eventId")
    start_ms = parse_timestamp(start_time, "startTime")
    end_ms = parse_timestamp(end_time, "endTime")
    if start_ms > end_ms:
        raise InvalidRequestError(
            f"startTime ({start_ms}) must not be after endTime ({end_ms})"
        )
    return EventWindow(
        event_id=str(event_id),
        event_name=event_name,
        start_time=start_ms,
        end_time=end_ms,
    )


def _epoch_millis(moment: datetime) -> int:
    delta = moment - datetime(1970, 1, 1, tzinfo=UTC)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000
