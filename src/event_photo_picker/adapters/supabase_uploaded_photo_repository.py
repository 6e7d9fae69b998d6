"""Supabase repository of photos already uploaded to events."""

from dataclasses import dataclass

from supabase import Client

from event_photo_picker.services.sessions import UploadedPhotoRepository


@dataclass
class SupabaseUploadedPhotoRepository(UploadedPhotoRepository):
    """Supabase implementation for uploaded photo lookups."""

    client: Client
    table: str = "event_photo_uploads"

    def list_uploaded_identifiers(self, event_id: str) -> set[str]:
        """Return the local identifiers recorded as uploaded for an event."""
        response = (
            self.client.table(self.table)
            .select("local_identifier")
            .eq("event_id", event_id)
            .execute()
        )
        return {
            str(row["local_identifier"])
            for row in response.data or []
            if row.get("local_identifier")
        }
