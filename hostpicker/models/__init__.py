# Export all models
from .api import (
    ParticipantResponse,
    RoundDetailResponse,
    RoundResponse,
    RoundSummaryResponse,
    SelectionResponse,
)
from .db import (
    ParticipantModel,
    RoundModel,
    SelectionModel,
)

__all__ = [
    # API models
    "ParticipantResponse",
    "RoundResponse",
    "RoundSummaryResponse",
    "RoundDetailResponse",
    "SelectionResponse",
    # DB models
    "ParticipantModel",
    "RoundModel",
    "SelectionModel",
]
