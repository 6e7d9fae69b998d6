"""Errors raised by the photo picker engine."""


class PickerError(Exception):
    """Base class for picker failures surfaced to callers."""


class InvalidRequestError(PickerError, ValueError):
    """Request parameters are missing or malformed."""


class EmptySelectionError(InvalidRequestError):
    """A selection was confirmed without any photos in it."""


class SourceUnavailableError(PickerError):
    """The media library could not be queried."""


class PermissionDeniedError(SourceUnavailableError):
    """Read access to the media library has not been granted."""


class SessionNotFoundError(PickerError, LookupError):
    """No live picker session matches the given id."""
