from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CreateSelectionRequest(BaseModel):
    """Request model for creating a selection.

    Leave ``participant_id`` empty to draw a random available participant.
    """

    participant_id: Optional[UUID] = Field(
        default=None, description="Force a specific participant"
    )


class SelectionResponse(BaseModel):
    """Response model for selection data."""

    id: UUID
    round_id: UUID
    participant_id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SelectionResultResponse(BaseModel):
    """Outcome of a selection attempt; ``selection`` is null when exhausted."""

    round_id: UUID
    selection: Optional[SelectionResponse]
    exhausted: bool
