from fastapi import APIRouter, Depends

from app.api.deps import get_setup_service
from app.domain.schemas import AppSetupSettings
from app.services.schema_provisioner import SetupService

router = APIRouter()


@router.get("", response_model=AppSetupSettings)
def get_setup_config(setup: SetupService = Depends(get_setup_service)):
    """App settings, provisioning the document schema first if needed."""
    return setup.get_setup_config()
