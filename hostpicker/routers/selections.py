from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.database import get_db
from hostpicker.exceptions import NotFoundError
from hostpicker.services.selection_service import SelectionService

router = APIRouter()


@router.delete("/{selection_id}", status_code=204)
async def delete_selection(
    selection_id: UUID, db: AsyncSession = Depends(get_db)
) -> Response:
    """Delete a selection; its participant becomes available in that round again."""
    try:
        service = SelectionService(db)
        await service.delete_selection(selection_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
