import uuid
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from hostpicker.database import utcnow
from hostpicker.logging_config import get_logger
from hostpicker.models.api.participants import ParticipantResponse
from hostpicker.models.db.participant_model import ParticipantModel
from hostpicker.repositories.base_repository import BaseRepository

logger = get_logger(__name__)


class ParticipantRepository(BaseRepository[ParticipantModel, ParticipantResponse]):
    """Repository for participant operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ParticipantModel)

    async def register(
        self, name: str, created_at: Optional[datetime] = None
    ) -> ParticipantResponse:
        """Add a new, unarchived participant."""
        new_participant = ParticipantResponse(
            id=uuid.uuid4(),
            name=name,
            archived=False,
            created_at=created_at or utcnow(),
        )
        return await self.create(new_participant)

    async def list_participants(
        self,
        archived: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[ParticipantResponse]:
        """List participants oldest first, optionally filtered by archived flag."""
        query = select(self.model_class)
        if archived is not None:
            query = query.where(self.model_class.archived.is_(archived))
        query = (
            query.order_by(self.model_class.created_at, self.model_class.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def list_eligible_before(self, before: datetime) -> List[ParticipantResponse]:
        """Get unarchived participants created strictly before ``before``."""
        query = (
            select(self.model_class)
            .where(
                self.model_class.archived.is_(False),
                self.model_class.created_at < before,
            )
            .order_by(self.model_class.created_at)
        )  # type: ignore
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def set_archived(
        self, participant_id: UUID, archived: bool
    ) -> Optional[ParticipantResponse]:
        """Set the archived flag on one participant."""
        db_model = await self._get_model(participant_id)
        if not db_model:
            return None

        db_model.archived = archived
        await self.db.commit()
        await self.db.refresh(db_model)
        return self._to_pydantic(db_model)

    async def set_archived_for_all(self, archived: bool, batch_size: int) -> int:
        """Set the archived flag on every participant in bounded batches.

        Each batch is committed on its own so row locks are held only for
        one batch at a time. Returns the number of rows changed.
        """
        if batch_size <= 0:
            raise ValueError("Batch size must be positive")

        total = 0
        while True:
            ids_query = (
                select(self.model_class.id)
                .where(self.model_class.archived != archived)
                .order_by(self.model_class.id)
                .limit(batch_size)
            )
            result = await self.db.execute(ids_query)
            batch_ids = list(result.scalars().all())
            if not batch_ids:
                break

            await self.db.execute(
                update(self.model_class)
                .where(self.model_class.id.in_(batch_ids))
                .values(archived=archived)
            )
            await self.db.commit()
            total += len(batch_ids)
            logger.debug(
                f"Archived flag set to {archived} for a batch of {len(batch_ids)}"
            )

        return total

    def _to_pydantic(self, db_model: Any) -> ParticipantResponse:
        """Convert SQLAlchemy ParticipantModel to Pydantic ParticipantResponse."""
        return ParticipantResponse(
            id=db_model.id,
            name=db_model.name,
            archived=db_model.archived,
            created_at=db_model.created_at,
        )

    def _from_pydantic(self, pydantic_model: ParticipantResponse) -> ParticipantModel:
        """Convert Pydantic ParticipantResponse to SQLAlchemy ParticipantModel."""
        return ParticipantModel(
            id=pydantic_model.id,
            name=pydantic_model.name,
            archived=pydantic_model.archived,
            created_at=pydantic_model.created_at,
        )
