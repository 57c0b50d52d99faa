# API models for request/response contracts
from .participants import (
    ArchiveAllResponse,
    ArchiveParticipantRequest,
    CreateParticipantRequest,
    ParticipantResponse,
)
from .rounds import (
    RoundDetailResponse,
    RoundResponse,
    RoundState,
    RoundSummaryResponse,
)
from .selections import (
    CreateSelectionRequest,
    SelectionResponse,
    SelectionResultResponse,
)

__all__ = [
    "ArchiveAllResponse",
    "ArchiveParticipantRequest",
    "CreateParticipantRequest",
    "ParticipantResponse",
    "RoundDetailResponse",
    "RoundResponse",
    "RoundState",
    "RoundSummaryResponse",
    "CreateSelectionRequest",
    "SelectionResponse",
    "SelectionResultResponse",
]
