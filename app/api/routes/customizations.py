from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_build_pipeline, get_history_service
from app.domain.schemas import (
    CustomizationResponse,
    HistoryEntry,
    LatestCustomizationResponse,
    SaveChangesRequest,
)
from app.services.build_pipeline import BuildPipeline
from app.services.history import HistoryService

router = APIRouter()


@router.post("", response_model=str)
def save_changes(
    data: SaveChangesRequest,
    pipeline: BuildPipeline = Depends(get_build_pipeline),
):
    """Build the CSS/JS artifacts and save them as a new version.

    Returns the store acknowledgment as a JSON string.
    """
    return pipeline.save_changes(data)


@router.get("/history", response_model=list[HistoryEntry])
def get_history(history: HistoryService = Depends(get_history_service)):
    """The 30 most recent versions, newest first."""
    return history.get_history()


@router.get("/last", response_model=LatestCustomizationResponse, response_model_exclude_unset=True)
def get_last(
    workspace: str = Query(..., min_length=1),
    history: HistoryService = Depends(get_history_service),
):
    """Latest version for a workspace, or an empty object if none was saved."""
    return history.get_last(workspace)


@router.get("/{document_id}", response_model=CustomizationResponse)
def get_by_id(document_id: str, history: HistoryService = Depends(get_history_service)):
    document = history.get_by_id(document_id)
    if not document:
        raise HTTPException(status_code=404, detail="Customization not found")
    return document
