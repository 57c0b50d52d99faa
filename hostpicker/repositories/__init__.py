# Repository classes for database operations
from .base_repository import BaseRepository
from .participant_repository import ParticipantRepository
from .round_repository import RoundRepository
from .selection_repository import SelectionRepository

__all__ = [
    "BaseRepository",
    "ParticipantRepository",
    "RoundRepository",
    "SelectionRepository",
]
