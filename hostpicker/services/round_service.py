from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.exceptions import NotFoundError
from hostpicker.logging_config import get_logger
from hostpicker.models.api.participants import ParticipantResponse
from hostpicker.models.api.rounds import (
    RoundDetailResponse,
    RoundResponse,
    RoundSummaryResponse,
)
from hostpicker.repositories.participant_repository import ParticipantRepository
from hostpicker.repositories.round_repository import RoundRepository
from hostpicker.repositories.selection_repository import SelectionRepository
from hostpicker.services import selector

logger = get_logger(__name__)


class RoundService:
    """Service for starting rounds and reporting their progress."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.round_repo = RoundRepository(db)
        self.participant_repo = ParticipantRepository(db)
        self.selection_repo = SelectionRepository(db)

    async def start_round(self) -> RoundResponse:
        round_ = await self.round_repo.create_round()
        logger.info("Started round", extra={"round_id": round_.id})
        return round_

    async def list_rounds(
        self, limit: Optional[int] = 50, offset: Optional[int] = 0
    ) -> List[RoundSummaryResponse]:
        """List rounds newest first, each with its selections."""
        # Validate parameters
        if limit is not None and (limit <= 0 or limit > 1000):
            raise ValueError("Limit must be between 1 and 1000")
        if offset is not None and offset < 0:
            raise ValueError("Offset must be non-negative")

        return await self.round_repo.list_rounds(limit=limit or 50, offset=offset or 0)

    async def get_round(self, round_id: UUID) -> RoundResponse:
        round_ = await self.round_repo.get_by_id(round_id)
        if not round_:
            raise NotFoundError("round", round_id)
        return round_

    async def available_for(self, round_id: UUID) -> List[ParticipantResponse]:
        """Participants that can still be selected in the round."""
        round_ = await self.get_round(round_id)
        participants = await self.participant_repo.list_eligible_before(
            round_.created_at
        )
        selections = await self.selection_repo.get_by_round(round_id)
        return selector.compute_available(round_, participants, selections)

    async def get_round_detail(self, round_id: UUID) -> RoundDetailResponse:
        """
        Get a round with:

        1. Its selections so far
        2. The participants still available
        3. Its derived state (open or exhausted)
        """
        summary = await self.round_repo.get_with_selections(round_id)
        if not summary:
            raise NotFoundError("round", round_id)

        participants = await self.participant_repo.list_eligible_before(
            summary.created_at
        )
        available = selector.compute_available(
            summary, participants, summary.selections
        )
        state = selector.round_state(summary, participants, summary.selections)

        return RoundDetailResponse(
            id=summary.id,
            created_at=summary.created_at,
            selections=summary.selections,
            state=state,
            available=available,
        )
