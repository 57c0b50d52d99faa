from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.database import get_db
from hostpicker.exceptions import NotFoundError
from hostpicker.logging_config import get_logger
from hostpicker.models.api.participants import (
    ArchiveAllResponse,
    ArchiveParticipantRequest,
    CreateParticipantRequest,
    ParticipantResponse,
)
from hostpicker.services.participant_service import ParticipantService

router = APIRouter()
logger = get_logger(__name__)


@router.post("", response_model=ParticipantResponse, status_code=201)
async def register_participant(
    request: CreateParticipantRequest, db: AsyncSession = Depends(get_db)
) -> ParticipantResponse:
    """Register a new participant; they become eligible for later rounds."""
    service = ParticipantService(db)
    return await service.register(request.name)


@router.get("", response_model=List[ParticipantResponse])
async def list_participants(
    archived: Optional[bool] = Query(
        None, description="Filter by archived flag (omit for all)"
    ),
    limit: Optional[int] = Query(
        50, description="Maximum number of participants to return", ge=1, le=1000
    ),
    offset: Optional[int] = Query(
        0, description="Number of participants to skip", ge=0
    ),
    db: AsyncSession = Depends(get_db),
) -> List[ParticipantResponse]:
    """
    List participants.

    Query parameters:
    - archived: only archived (true) or only active (false) participants
    - limit: Maximum number of participants to return (default: 50, max: 1000)
    - offset: Number of participants to skip (default: 0)
    """
    try:
        service = ParticipantService(db)
        return await service.list_participants(
            archived=archived, limit=limit, offset=offset
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to list participants")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/archive", response_model=ArchiveAllResponse)
async def archive_all_participants(
    request: ArchiveParticipantRequest, db: AsyncSession = Depends(get_db)
) -> ArchiveAllResponse:
    """Archive or unarchive every participant, in bounded batches."""
    service = ParticipantService(db)
    updated = await service.set_archived_for_all(request.archived)
    return ArchiveAllResponse(archived=request.archived, updated=updated)


@router.get("/{participant_id}", response_model=ParticipantResponse)
async def get_participant(
    participant_id: UUID, db: AsyncSession = Depends(get_db)
) -> ParticipantResponse:
    try:
        service = ParticipantService(db)
        return await service.get_participant(participant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{participant_id}", response_model=ParticipantResponse)
async def set_participant_archived(
    participant_id: UUID,
    request: ArchiveParticipantRequest,
    db: AsyncSession = Depends(get_db),
) -> ParticipantResponse:
    """Archive or unarchive a single participant."""
    try:
        service = ParticipantService(db)
        return await service.set_archived(participant_id, request.archived)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
