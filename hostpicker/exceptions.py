"""Error taxonomy for participant, round and selection operations.

An exhausted round is deliberately absent here: it is a normal terminal
state and is reported as ``None`` rather than raised.
"""

from typing import Iterable, List
from uuid import UUID


class HostPickerError(Exception):
    """Base exception for all application errors."""

    pass


class NotFoundError(HostPickerError):
    """Raised when a round, participant or selection does not exist."""

    def __init__(self, entity: str, id: object):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity.capitalize()} with ID {id} not found")


class IneligibleParticipantError(HostPickerError):
    """Raised when a named participant may not be selected for a round."""

    def __init__(self, participant_id: UUID, round_id: UUID, violations: Iterable):
        self.participant_id = participant_id
        self.round_id = round_id
        self.violations: List = list(violations)
        names = ", ".join(str(getattr(v, "value", v)) for v in self.violations)
        super().__init__(
            f"Participant {participant_id} is not eligible for round "
            f"{round_id}: {names}"
        )


class DuplicateSelectionError(HostPickerError):
    """Raised by storage when (round, participant) is already recorded."""

    def __init__(self, round_id: UUID, participant_id: UUID):
        self.round_id = round_id
        self.participant_id = participant_id
        super().__init__(
            f"Participant {participant_id} already selected in round {round_id}"
        )


class SelectionConflictError(HostPickerError):
    """Raised when concurrent writers keep winning the insert race."""

    def __init__(self, round_id: UUID, attempts: int):
        self.round_id = round_id
        self.attempts = attempts
        super().__init__(
            f"Could not record a selection for round {round_id} "
            f"after {attempts} attempts"
        )
