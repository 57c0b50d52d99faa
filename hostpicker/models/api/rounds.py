from datetime import datetime
from enum import Enum
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .participants import ParticipantResponse
from .selections import SelectionResponse


class RoundState(str, Enum):
    """Derived lifecycle state of a round."""

    OPEN = "open"
    EXHAUSTED = "exhausted"


class RoundResponse(BaseModel):
    """Response model for round data."""

    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoundSummaryResponse(RoundResponse):
    """Round with the selections recorded so far."""

    selections: List[SelectionResponse]


class RoundDetailResponse(RoundSummaryResponse):
    """Round with its selections, available participants and state."""

    state: RoundState
    available: List[ParticipantResponse]
