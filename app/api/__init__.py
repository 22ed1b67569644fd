from fastapi import APIRouter

from .routes import (
    customizations,
    health,
    setup,
    workspaces,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router, tags=["health"])

# Schema provisioning
api_router.include_router(setup.router, prefix="/setup", tags=["setup"])

# Customization versions
api_router.include_router(customizations.router, prefix="/customizations", tags=["customizations"])

# Platform passthrough
api_router.include_router(workspaces.router, prefix="/workspaces", tags=["workspaces"])
