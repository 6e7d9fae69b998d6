"""Pydantic models for picker request payloads."""

from pydantic import BaseModel, ConfigDict, Field

from event_photo_picker.services.sessions import PickerRequest


class EventPhotosRequest(BaseModel):
    """Event window and uploaded ids sent by the host app."""

    model_config = ConfigDict(populate_by_name=True)

    event_id: str | None = Field(default=None, alias="eventId")
    event_name: str | None = Field(default=None, alias="eventName")
    start_time: str | int | None = Field(default=None, alias="startTime")
    end_time: str | int | None = Field(default=None, alias="endTime")
    uploaded_photo_ids: list[str] = Field(
        default_factory=list, alias="uploadedPhotoIds"
    )

    def to_picker_request(self) -> PickerRequest:
        return PickerRequest(
            event_id=self.event_id,
            event_name=self.event_name,
            start_time=self.start_time,
            end_time=self.end_time,
            uploaded_photo_ids=frozenset(self.uploaded_photo_ids),
        )


class ToggleRequest(BaseModel):
    """Photo to toggle within a session."""

    model_config = ConfigDict(populate_by_name=True)

    local_identifier: str = Field(alias="localIdentifier")


class ConfirmRequest(BaseModel):
    """Options for confirming a selection."""

    model_config = ConfigDict(populate_by_name=True)

    include_content: bool = Field(default=True, alias="includeContent")
