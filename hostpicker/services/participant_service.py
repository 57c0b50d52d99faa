from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.config import settings
from hostpicker.exceptions import NotFoundError
from hostpicker.logging_config import get_logger
from hostpicker.models.api.participants import ParticipantResponse
from hostpicker.repositories.participant_repository import ParticipantRepository

logger = get_logger(__name__)


class ParticipantService:
    """Service for registering participants and toggling their archived flag."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def register(self, name: str) -> ParticipantResponse:
        participant = await self.participant_repo.register(name.strip())
        logger.info(f"Registered participant {participant.id}")
        return participant

    async def list_participants(
        self,
        archived: Optional[bool] = None,
        limit: Optional[int] = 50,
        offset: Optional[int] = 0,
    ) -> List[ParticipantResponse]:
        """List participants, optionally only archived or only active ones."""
        # Validate parameters
        if limit is not None and (limit <= 0 or limit > 1000):
            raise ValueError("Limit must be between 1 and 1000")
        if offset is not None and offset < 0:
            raise ValueError("Offset must be non-negative")

        return await self.participant_repo.list_participants(
            archived=archived, limit=limit or 50, offset=offset or 0
        )

    async def get_participant(self, participant_id: UUID) -> ParticipantResponse:
        participant = await self.participant_repo.get_by_id(participant_id)
        if not participant:
            raise NotFoundError("participant", participant_id)
        return participant

    async def set_archived(
        self, participant_id: UUID, archived: bool
    ) -> ParticipantResponse:
        """
        Archive or unarchive one participant.

        Archiving removes the participant from every round that is not yet
        exhausted; unarchiving restores them, subject to the other rules.
        """
        participant = await self.participant_repo.set_archived(participant_id, archived)
        if not participant:
            raise NotFoundError("participant", participant_id)
        logger.info(
            f"Participant archived={archived}",
            extra={"participant_id": participant_id},
        )
        return participant

    async def set_archived_for_all(
        self, archived: bool, batch_size: Optional[int] = None
    ) -> int:
        """Set the archived flag for every participant, batch by batch."""
        if batch_size is None:
            batch_size = settings.ARCHIVE_BATCH_SIZE
        updated = await self.participant_repo.set_archived_for_all(archived, batch_size)
        logger.info(f"Bulk archive set archived={archived} on {updated} participants")
        return updated
