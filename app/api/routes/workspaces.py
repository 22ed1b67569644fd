from fastapi import APIRouter, Depends

from app.api.deps import get_workspace_service
from app.core.security import get_auth_token
from app.services.workspaces import WorkspaceService

router = APIRouter()


@router.get("")
def get_workspaces(
    auth_token: str = Depends(get_auth_token),
    workspaces: WorkspaceService = Depends(get_workspace_service),
):
    """Deployment workspaces of the account (GatewayError → 502)."""
    return workspaces.list_workspaces(auth_token)
