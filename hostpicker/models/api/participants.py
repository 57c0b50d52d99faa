from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateParticipantRequest(BaseModel):
    """Request model for registering a participant."""

    name: str = Field(
        ..., min_length=1, max_length=255, description="Participant display name"
    )

    model_config = ConfigDict(str_strip_whitespace=True)


class ArchiveParticipantRequest(BaseModel):
    """Request model for setting the archived flag."""

    archived: bool = Field(..., description="Exclude from future selection")


class ArchiveAllResponse(BaseModel):
    """Response model for a bulk archive update."""

    archived: bool
    updated: int


class ParticipantResponse(BaseModel):
    """Response model for participant data."""

    id: UUID
    name: str
    archived: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
