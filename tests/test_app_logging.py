"""Tests for logging configuration."""

import logging

import pytest

from event_photo_picker.app_logging import configure_logging
from event_photo_picker.domain.photos import EventWindow
from event_photo_picker.services.loader import CandidateLoader
from tests.conftest import FakePhotoSource, make_record


@pytest.fixture
def package_logger():  # type: ignore[no-untyped-def]
    logger = logging.getLogger("event_photo_picker")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_configure_logging_idempotent(package_logger: logging.Logger) -> None:
    configure_logging()
    first_count = len(package_logger.handlers)

    configure_logging("warning")
    second_count = len(package_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert package_logger.level == logging.WARNING


def test_loader_records_reach_package_handler(
    package_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging()
    bad = make_record("2", 3000)
    del bad["mime_type"]
    source = FakePhotoSource(records=[make_record("1", 4000), bad])

    window = EventWindow(event_id="evt", start_time=0, end_time=9000)
    CandidateLoader(source).load(window)

    err = capsys.readouterr().err
    assert "WARNING: event_photo_picker.services.loader: Dropping malformed" in err
    assert "INFO: event_photo_picker.services.loader: Loaded event candidates" in err


def test_level_filters_module_records(
    package_logger: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging("WARNING")
    source = FakePhotoSource(records=[make_record("1", 4000)])

    window = EventWindow(event_id="evt", start_time=0, end_time=9000)
    CandidateLoader(source).load(window)

    assert "Loaded event candidates" not in capsys.readouterr().err
