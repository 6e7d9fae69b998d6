"""Upload reconciliation for event candidates."""

from collections.abc import Collection, Sequence
from dataclasses import replace

from event_photo_picker.domain.photos import Photo, UploadCounts


def reconcile(
    candidates: Sequence[Photo], uploaded_ids: Collection[str]
) -> tuple[list[Photo], UploadCounts]:
    """Mark candidates already uploaded and count them.

    Returns new records in the input order; the input is left untouched.
    """
    annotated = [
        replace(photo, is_uploaded=photo.local_identifier in uploaded_ids)
        for photo in candidates
    ]
    uploaded = sum(1 for photo in annotated if photo.is_uploaded)
    counts = UploadCounts(
        total=len(annotated),
        uploaded=uploaded,
        pending=len(annotated) - uploaded,
    )
    return annotated, counts
