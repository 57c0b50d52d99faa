from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from hostpicker.database import utcnow
from hostpicker.models.api.rounds import RoundResponse, RoundSummaryResponse
from hostpicker.models.api.selections import SelectionResponse
from hostpicker.models.db.round_model import RoundModel
from hostpicker.repositories.base_repository import BaseRepository


class RoundRepository(BaseRepository[RoundModel, RoundResponse]):
    """Repository for round operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, RoundModel)

    async def create_round(self, created_at: Optional[datetime] = None) -> RoundResponse:
        """Start a new round."""
        new_round = RoundResponse(id=uuid4(), created_at=created_at or utcnow())
        return await self.create(new_round)

    async def get_with_selections(
        self, round_id: UUID
    ) -> Optional[RoundSummaryResponse]:
        """Get a round with its selections loaded."""
        query = (
            select(self.model_class)
            .where(self.model_class.id == round_id)
            .options(selectinload(self.model_class.selections))
            .execution_options(populate_existing=True)
        )  # type: ignore
        result = await self.db.execute(query)
        db_model = result.scalar_one_or_none()
        return self._to_summary(db_model) if db_model else None

    async def list_rounds(
        self, limit: int = 50, offset: int = 0
    ) -> List[RoundSummaryResponse]:
        """List rounds newest first, loading all selections in one extra query."""
        query = (
            select(self.model_class)
            .options(selectinload(self.model_class.selections))
            .execution_options(populate_existing=True)
            .order_by(self.model_class.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_summary(db_model) for db_model in db_models]

    def _to_summary(self, db_model: Any) -> RoundSummaryResponse:
        selections = sorted(db_model.selections, key=lambda s: s.created_at)
        return RoundSummaryResponse(
            id=db_model.id,
            created_at=db_model.created_at,
            selections=[
                SelectionResponse.model_validate(selection) for selection in selections
            ],
        )

    def _to_pydantic(self, db_model: Any) -> RoundResponse:
        """Convert SQLAlchemy RoundModel to Pydantic RoundResponse."""
        return RoundResponse(id=db_model.id, created_at=db_model.created_at)

    def _from_pydantic(self, pydantic_model: RoundResponse) -> RoundModel:
        """Convert Pydantic RoundResponse to SQLAlchemy RoundModel."""
        return RoundModel(id=pydantic_model.id, created_at=pydantic_model.created_at)
