from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from hostpicker.exceptions import DuplicateSelectionError
from hostpicker.models.api.participants import ParticipantResponse
from hostpicker.models.api.rounds import RoundResponse, RoundSummaryResponse
from hostpicker.models.api.selections import SelectionResponse
from hostpicker.models.db.participant_model import ParticipantModel
from hostpicker.models.db.round_model import RoundModel
from hostpicker.models.db.selection_model import SelectionModel
from hostpicker.repositories.base_repository import BaseRepository
from hostpicker.repositories.participant_repository import ParticipantRepository
from hostpicker.repositories.round_repository import RoundRepository
from hostpicker.repositories.selection_repository import SelectionRepository


class TestBaseRepository:
    """Unit tests for BaseRepository functionality."""

    def test_base_repository_creation(self, mock_db: Any) -> None:
        """Test that BaseRepository can be instantiated."""
        repo: BaseRepository[RoundModel, RoundResponse] = BaseRepository(
            mock_db, RoundModel
        )
        assert repo.db is mock_db
        assert repo.model_class is RoundModel

    @pytest.mark.asyncio
    async def test_get_by_id_with_mock(self, mock_db: Any) -> None:
        """Test get_by_id method with mocked database."""
        repo = RoundRepository(mock_db)
        round_id = uuid4()
        created_at = datetime.now(timezone.utc)

        mock_db_model = MagicMock(spec=RoundModel)
        mock_db_model.id = round_id
        mock_db_model.created_at = created_at

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = mock_db_model
        mock_db.execute.return_value = mock_result

        result = await repo.get_by_id(round_id)

        assert result == RoundResponse(id=round_id, created_at=created_at)
        mock_db.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_db: Any) -> None:
        """Test get_by_id when record is not found."""
        repo = RoundRepository(mock_db)

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db.execute.return_value = mock_result

        assert await repo.get_by_id(uuid4()) is None
        assert await repo.exists(uuid4()) is False

    @pytest.mark.asyncio
    async def test_create(self, mock_db: Any) -> None:
        """Test create method with mocked database."""
        repo = RoundRepository(mock_db)
        round_data = RoundResponse(id=uuid4(), created_at=datetime.now(timezone.utc))

        result = await repo.create(round_data)

        assert result == round_data
        mock_db.add.assert_called_once()
        added = mock_db.add.call_args.args[0]
        assert isinstance(added, RoundModel)
        assert added.id == round_data.id
        mock_db.commit.assert_called_once()
        mock_db.refresh.assert_called_once_with(added)

    @pytest.mark.asyncio
    async def test_delete(self, mock_db: Any) -> None:
        """Test delete method with mocked database."""
        repo = SelectionRepository(mock_db)
        mock_db_model = MagicMock(spec=SelectionModel)

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = mock_db_model
        mock_db.execute.return_value = mock_result

        assert await repo.delete(uuid4()) is True
        mock_db.delete.assert_called_once_with(mock_db_model)
        mock_db.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_db: Any) -> None:
        """Test delete method when record is not found."""
        repo = SelectionRepository(mock_db)

        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db.execute.return_value = mock_result

        assert await repo.delete(uuid4()) is False
        mock_db.delete.assert_not_called()

    def test_to_pydantic_not_implemented(self, mock_db: Any) -> None:
        """Test that _to_pydantic raises NotImplementedError."""
        repo: BaseRepository[RoundModel, RoundResponse] = BaseRepository(
            mock_db, RoundModel
        )

        with pytest.raises(NotImplementedError):
            repo._to_pydantic(None)

    def test_from_pydantic_not_implemented(self, mock_db: Any) -> None:
        """Test that _from_pydantic raises NotImplementedError."""
        repo: BaseRepository[RoundModel, RoundResponse] = BaseRepository(
            mock_db, RoundModel
        )

        with pytest.raises(NotImplementedError):
            repo._from_pydantic(
                RoundResponse(id=uuid4(), created_at=datetime.now(timezone.utc))
            )


class TestParticipantRepository:
    """Unit tests for ParticipantRepository."""

    @pytest.fixture
    def repository(self, mock_db: AsyncMock) -> ParticipantRepository:
        return ParticipantRepository(mock_db)

    def test_to_pydantic_conversion(self, repository: ParticipantRepository) -> None:
        """Test conversion from ParticipantModel to ParticipantResponse."""
        participant_id = uuid4()
        created_at = datetime.now(timezone.utc)

        db_model = MagicMock(spec=ParticipantModel)
        db_model.id = participant_id
        db_model.name = "Ada"
        db_model.archived = True
        db_model.created_at = created_at

        result = repository._to_pydantic(db_model)

        assert isinstance(result, ParticipantResponse)
        assert result.id == participant_id
        assert result.name == "Ada"
        assert result.archived is True

    def test_from_pydantic_conversion(self, repository: ParticipantRepository) -> None:
        """Test conversion from ParticipantResponse to ParticipantModel."""
        pydantic_model = ParticipantResponse(
            id=uuid4(),
            name="Grace",
            archived=False,
            created_at=datetime.now(timezone.utc),
        )

        result = repository._from_pydantic(pydantic_model)

        assert isinstance(result, ParticipantModel)
        assert result.id == pydantic_model.id
        assert result.archived is False

    @pytest.mark.asyncio
    async def test_register_creates_unarchived(
        self, repository: ParticipantRepository
    ) -> None:
        with patch.object(
            repository, "create", new_callable=AsyncMock, side_effect=lambda p: p
        ) as mock_create:
            result = await repository.register("Ada")

        mock_create.assert_awaited_once()
        assert result.name == "Ada"
        assert result.archived is False
        assert result.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_set_archived_not_found(
        self, repository: ParticipantRepository, mock_db: AsyncMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db.execute.return_value = mock_result

        assert await repository.set_archived(uuid4(), True) is None
        mock_db.commit.assert_not_called()


class TestRoundRepository:
    """Unit tests for RoundRepository."""

    @pytest.fixture
    def repository(self, mock_db: AsyncMock) -> RoundRepository:
        return RoundRepository(mock_db)

    def test_to_summary_orders_selections(self, repository: RoundRepository) -> None:
        round_id = uuid4()
        earlier = datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)
        later = datetime(2026, 1, 1, 11, 0, tzinfo=timezone.utc)

        def selection(created_at: datetime) -> SelectionModel:
            return SelectionModel(
                id=uuid4(),
                round_id=round_id,
                participant_id=uuid4(),
                created_at=created_at,
            )

        db_model = MagicMock(spec=RoundModel)
        db_model.id = round_id
        db_model.created_at = earlier
        db_model.selections = [selection(later), selection(earlier)]

        result = repository._to_summary(db_model)

        assert isinstance(result, RoundSummaryResponse)
        assert [s.created_at for s in result.selections] == [earlier, later]

    def test_from_pydantic_conversion(self, repository: RoundRepository) -> None:
        pydantic_model = RoundResponse(id=uuid4(), created_at=datetime.now(timezone.utc))

        result = repository._from_pydantic(pydantic_model)

        assert isinstance(result, RoundModel)
        assert result.id == pydantic_model.id
        assert result.created_at == pydantic_model.created_at


class TestSelectionRepository:
    """Unit tests for SelectionRepository."""

    @pytest.fixture
    def repository(self, mock_db: AsyncMock) -> SelectionRepository:
        return SelectionRepository(mock_db)

    def test_to_pydantic_conversion(self, repository: SelectionRepository) -> None:
        db_model = MagicMock(spec=SelectionModel)
        db_model.id = uuid4()
        db_model.round_id = uuid4()
        db_model.participant_id = uuid4()
        db_model.created_at = datetime.now(timezone.utc)

        result = repository._to_pydantic(db_model)

        assert isinstance(result, SelectionResponse)
        assert result.round_id == db_model.round_id
        assert result.participant_id == db_model.participant_id

    @pytest.mark.asyncio
    async def test_insert_unique_translates_duplicate(
        self, repository: SelectionRepository, mock_db: AsyncMock
    ) -> None:
        """A uniqueness violation becomes DuplicateSelectionError after rollback."""
        mock_db.commit.side_effect = IntegrityError(
            "INSERT INTO selections", {}, Exception("UNIQUE constraint failed")
        )

        with patch.object(
            repository, "pair_exists", new_callable=AsyncMock, return_value=True
        ):
            with pytest.raises(DuplicateSelectionError):
                await repository.insert_unique(uuid4(), uuid4())

        mock_db.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_insert_unique_propagates_other_integrity_errors(
        self, repository: SelectionRepository, mock_db: AsyncMock
    ) -> None:
        mock_db.commit.side_effect = IntegrityError(
            "INSERT INTO selections", {}, Exception("FOREIGN KEY constraint failed")
        )

        with patch.object(
            repository, "pair_exists", new_callable=AsyncMock, return_value=False
        ):
            with pytest.raises(IntegrityError):
                await repository.insert_unique(uuid4(), uuid4())

        mock_db.rollback.assert_awaited_once()
