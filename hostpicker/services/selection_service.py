import random
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.config import settings
from hostpicker.exceptions import (
    DuplicateSelectionError,
    IneligibleParticipantError,
    NotFoundError,
    SelectionConflictError,
)
from hostpicker.logging_config import get_logger
from hostpicker.models.api.rounds import RoundResponse
from hostpicker.models.api.selections import SelectionResponse
from hostpicker.repositories.participant_repository import ParticipantRepository
from hostpicker.repositories.round_repository import RoundRepository
from hostpicker.repositories.selection_repository import SelectionRepository
from hostpicker.services import selector

logger = get_logger(__name__)


class SelectionService:
    """Service for picking hosts and recording the picks."""

    def __init__(
        self,
        db: AsyncSession,
        rng: Optional[random.Random] = None,
        max_retries: Optional[int] = None,
    ):
        self.db = db
        self.rng = rng
        if max_retries is None:
            max_retries = settings.SELECTION_MAX_RETRIES
        if max_retries < 1:
            raise ValueError("Max retries must be at least 1")
        self.max_retries = max_retries
        self.round_repo = RoundRepository(db)
        self.participant_repo = ParticipantRepository(db)
        self.selection_repo = SelectionRepository(db)

    async def select_host(self, round_id: UUID) -> Optional[SelectionResponse]:
        """
        Pick a random available participant and record the pick:

        1. Read the round, its eligible participants and its selections
        2. Draw one available participant
        3. Insert the selection; the unique constraint rejects lost races
        4. On a lost race, start over from fresh data

        Returns None when the round is exhausted.
        """
        for attempt in range(1, self.max_retries + 1):
            round_ = await self._get_round(round_id)
            participants = await self.participant_repo.list_eligible_before(
                round_.created_at
            )
            selections = await self.selection_repo.get_by_round(round_id)

            chosen = selector.select_for(round_, participants, selections, self.rng)
            if chosen is None:
                logger.info("Round exhausted", extra={"round_id": round_id})
                return None

            try:
                selection = await self.selection_repo.insert_unique(
                    round_id, chosen.id
                )
            except DuplicateSelectionError:
                logger.warning(
                    "Lost selection race, retrying",
                    extra={
                        "round_id": round_id,
                        "participant_id": chosen.id,
                        "attempt": attempt,
                    },
                )
                continue

            logger.info(
                "Selected host",
                extra={"round_id": round_id, "participant_id": chosen.id},
            )
            return selection

        logger.error(
            "Selection retries exhausted",
            extra={"round_id": round_id, "attempt": self.max_retries},
        )
        raise SelectionConflictError(round_id, self.max_retries)

    async def select_participant(
        self, round_id: UUID, participant_id: UUID
    ) -> SelectionResponse:
        """Record a specific participant as the round's pick, if eligible."""
        round_ = await self._get_round(round_id)
        participant = await self.participant_repo.get_by_id(participant_id)
        if not participant:
            raise NotFoundError("participant", participant_id)

        selections = await self.selection_repo.get_by_round(round_id)
        violations = selector.check_eligibility(participant, round_, selections)
        if violations:
            raise IneligibleParticipantError(participant_id, round_id, violations)

        try:
            selection = await self.selection_repo.insert_unique(
                round_id, participant_id
            )
        except DuplicateSelectionError:
            # The same participant was requested twice; not a race to retry
            raise IneligibleParticipantError(
                participant_id, round_id, [selector.Violation.ALREADY_SELECTED]
            )

        logger.info(
            "Selected requested host",
            extra={"round_id": round_id, "participant_id": participant_id},
        )
        return selection

    async def list_selections(self, round_id: UUID) -> List[SelectionResponse]:
        if not await self.round_repo.exists(round_id):
            raise NotFoundError("round", round_id)
        return await self.selection_repo.get_by_round(round_id)

    async def delete_selection(self, selection_id: UUID) -> None:
        """Delete a selection, making its participant available again."""
        if not await self.selection_repo.delete(selection_id):
            raise NotFoundError("selection", selection_id)
        logger.info(f"Deleted selection {selection_id}")

    async def _get_round(self, round_id: UUID) -> RoundResponse:
        round_ = await self.round_repo.get_by_id(round_id)
        if not round_:
            raise NotFoundError("round", round_id)
        return round_
