from typing import Any, List
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from hostpicker.database import utcnow
from hostpicker.exceptions import DuplicateSelectionError
from hostpicker.models.api.selections import SelectionResponse
from hostpicker.models.db.selection_model import SelectionModel
from hostpicker.repositories.base_repository import BaseRepository


class SelectionRepository(BaseRepository[SelectionModel, SelectionResponse]):
    """Repository for selection operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, SelectionModel)

    async def get_by_round(self, round_id: UUID) -> List[SelectionResponse]:
        """Get all selections recorded for a round, oldest first."""
        query = (
            select(self.model_class)
            .where(self.model_class.round_id == round_id)
            .order_by(self.model_class.created_at)
        )  # type: ignore
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def pair_exists(self, round_id: UUID, participant_id: UUID) -> bool:
        """Check whether the participant is already selected in the round."""
        query = select(self.model_class.id).where(
            self.model_class.round_id == round_id,
            self.model_class.participant_id == participant_id,
        )
        result = await self.db.execute(query)
        return result.first() is not None

    async def insert_unique(
        self, round_id: UUID, participant_id: UUID
    ) -> SelectionResponse:
        """Insert a selection unless (round, participant) is already recorded.

        The unique constraint is the arbiter: a concurrent writer that got
        there first makes this raise DuplicateSelectionError. Any other
        integrity failure (e.g. a missing round) propagates unchanged.
        """
        selection = SelectionResponse(
            id=uuid4(),
            round_id=round_id,
            participant_id=participant_id,
            created_at=utcnow(),
        )
        try:
            return await self.create(selection)
        except IntegrityError:
            await self.db.rollback()
            if await self.pair_exists(round_id, participant_id):
                raise DuplicateSelectionError(round_id, participant_id)
            raise

    def _to_pydantic(self, db_model: Any) -> SelectionResponse:
        """Convert SQLAlchemy SelectionModel to Pydantic SelectionResponse."""
        return SelectionResponse(
            id=db_model.id,
            round_id=db_model.round_id,
            participant_id=db_model.participant_id,
            created_at=db_model.created_at,
        )

    def _from_pydantic(self, pydantic_model: SelectionResponse) -> SelectionModel:
        """Convert Pydantic SelectionResponse to SQLAlchemy SelectionModel."""
        return SelectionModel(
            id=pydantic_model.id,
            round_id=pydantic_model.round_id,
            participant_id=pydantic_model.participant_id,
            created_at=pydantic_model.created_at,
        )
