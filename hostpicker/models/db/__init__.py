# SQLAlchemy database models
from .participant_model import ParticipantModel
from .round_model import RoundModel
from .selection_model import SelectionModel

__all__ = ["ParticipantModel", "RoundModel", "SelectionModel"]
