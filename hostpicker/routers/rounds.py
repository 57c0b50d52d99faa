from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.database import get_db
from hostpicker.exceptions import (
    IneligibleParticipantError,
    NotFoundError,
    SelectionConflictError,
)
from hostpicker.logging_config import get_logger
from hostpicker.models.api.rounds import (
    RoundDetailResponse,
    RoundResponse,
    RoundSummaryResponse,
)
from hostpicker.models.api.selections import (
    CreateSelectionRequest,
    SelectionResponse,
    SelectionResultResponse,
)
from hostpicker.services.round_service import RoundService
from hostpicker.services.selection_service import SelectionService

router = APIRouter()
logger = get_logger(__name__)


@router.post("", response_model=RoundResponse, status_code=201)
async def start_round(db: AsyncSession = Depends(get_db)) -> RoundResponse:
    """Start a new round; only participants registered before now can be picked."""
    service = RoundService(db)
    return await service.start_round()


@router.get("", response_model=List[RoundSummaryResponse])
async def list_rounds(
    limit: Optional[int] = Query(
        50, description="Maximum number of rounds to return", ge=1, le=1000
    ),
    offset: Optional[int] = Query(0, description="Number of rounds to skip", ge=0),
    db: AsyncSession = Depends(get_db),
) -> List[RoundSummaryResponse]:
    """
    List rounds newest first, with the selections of each.

    Query parameters:
    - limit: Maximum number of rounds to return (default: 50, max: 1000)
    - offset: Number of rounds to skip (default: 0)
    """
    try:
        service = RoundService(db)
        return await service.list_rounds(limit=limit, offset=offset)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to list rounds")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{round_id}", response_model=RoundDetailResponse)
async def get_round(
    round_id: UUID, db: AsyncSession = Depends(get_db)
) -> RoundDetailResponse:
    """
    Get a round with its selections, available participants and state.

    Path parameters:
    - round_id: UUID of the round
    """
    try:
        service = RoundService(db)
        return await service.get_round_detail(round_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{round_id}/selections", response_model=List[SelectionResponse])
async def list_round_selections(
    round_id: UUID, db: AsyncSession = Depends(get_db)
) -> List[SelectionResponse]:
    try:
        service = SelectionService(db)
        return await service.list_selections(round_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/{round_id}/selections", response_model=SelectionResultResponse, status_code=201
)
async def create_selection(
    round_id: UUID,
    response: Response,
    request: Optional[CreateSelectionRequest] = None,
    db: AsyncSession = Depends(get_db),
) -> SelectionResultResponse:
    """
    Pick the next host for a round.

    Without a participant_id a random available participant is drawn.
    An exhausted round answers 200 with a null selection; start a new
    round to continue.
    """
    service = SelectionService(db)
    participant_id = request.participant_id if request else None

    try:
        if participant_id is None:
            selection = await service.select_host(round_id)
        else:
            selection = await service.select_participant(round_id, participant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IneligibleParticipantError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "violations": [v.value for v in e.violations],
            },
        )
    except SelectionConflictError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if selection is None:
        response.status_code = 200
    return SelectionResultResponse(
        round_id=round_id, selection=selection, exhausted=selection is None
    )
