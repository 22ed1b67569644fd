from functools import lru_cache

from fastapi import Depends

from app.core.config import settings, get_workspaces_url
from app.domain.schema_definition import SCHEMA_BODY, SCHEMA_VERSION
from app.repositories.app_settings import AppSettingsRepository
from app.repositories.documents import DocumentStoreRepository
from app.services.build_pipeline import BuildPipeline
from app.services.history import HistoryService
from app.services.hub import HubClient
from app.services.schema_provisioner import SchemaProvisioner, SetupService
from app.services.workspaces import WorkspaceService


@lru_cache
def get_document_store() -> DocumentStoreRepository:
    return DocumentStoreRepository()


@lru_cache
def get_settings_store() -> AppSettingsRepository:
    return AppSettingsRepository()


@lru_cache
def get_hub_client() -> HubClient:
    return HubClient(timeout=settings.gateway_timeout)


def get_build_pipeline(store=Depends(get_document_store)) -> BuildPipeline:
    return BuildPipeline(
        store=store,
        data_entity=settings.data_entity,
        schema_version=SCHEMA_VERSION,
        app_version=settings.app_version,
    )


def get_history_service(store=Depends(get_document_store)) -> HistoryService:
    return HistoryService(store=store, data_entity=settings.data_entity, schema_version=SCHEMA_VERSION)


def get_setup_service(
    store=Depends(get_document_store),
    settings_store=Depends(get_settings_store),
) -> SetupService:
    provisioner = SchemaProvisioner(
        store=store,
        data_entity=settings.data_entity,
        schema_version=SCHEMA_VERSION,
        schema_body=SCHEMA_BODY,
    )
    return SetupService(
        settings_store=settings_store,
        provisioner=provisioner,
        app_id=settings.app_id,
        app_version=settings.app_version,
    )


def get_workspace_service(hub: HubClient = Depends(get_hub_client)) -> WorkspaceService:
    return WorkspaceService(hub=hub, workspaces_url=get_workspaces_url())
