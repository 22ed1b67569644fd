"""
Schema provisioning for the customization documents.

The remote schema must exist at SCHEMA_VERSION before documents of that
version are written. Whether it was confirmed is cached in the app settings
under ``adminSetup``, so a confirmed install skips the remote call entirely.

States per installation:
- UNKNOWN: no ``adminSetup`` recorded yet
- STALE: recorded version differs from the expected one, or the last attempt failed
- CURRENT: ``hasSchema`` is set and the recorded version is the expected one
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from app.core.errors import NotModifiedError

logger = logging.getLogger(__name__)


class ProvisioningState(str, Enum):
    UNKNOWN = "unknown"
    STALE = "stale"
    CURRENT = "current"


@dataclass(frozen=True)
class Current:
    schema_version: str


@dataclass(frozen=True)
class Stale:
    reason: str


ProvisioningResult = Union[Current, Stale]


def classify(admin_setup: dict | None, expected_version: str) -> ProvisioningState:
    """Derive the provisioning state from a recorded ``adminSetup`` object."""
    if not admin_setup:
        return ProvisioningState.UNKNOWN
    if admin_setup.get("hasSchema") and admin_setup.get("schemaVersion") == expected_version:
        return ProvisioningState.CURRENT
    return ProvisioningState.STALE


class SchemaProvisioner:
    """Creates or updates the remote schema for one data entity and version."""

    def __init__(self, store, data_entity: str, schema_version: str, schema_body: dict):
        self.store = store
        self.data_entity = data_entity
        self.schema_version = schema_version
        self.schema_body = schema_body

    def ensure_schema(self) -> ProvisioningResult:
        """Push the schema to the store.

        A not-modified answer counts as success. Any other failure is
        returned as Stale instead of raised.
        """
        try:
            self.store.create_or_update_schema(self.data_entity, self.schema_version, self.schema_body)
        except NotModifiedError:
            logger.info(f"Schema {self.schema_version} already current for {self.data_entity}")
            return Current(self.schema_version)
        except Exception as e:
            logger.warning(f"Failed to provision schema {self.schema_version} for {self.data_entity}: {e}")
            return Stale(str(e) or e.__class__.__name__)

        logger.info(f"Schema {self.schema_version} provisioned for {self.data_entity}")
        return Current(self.schema_version)


class SetupService:
    """Serves the setup query, provisioning the schema when it isn't confirmed."""

    def __init__(
        self,
        settings_store,
        provisioner: SchemaProvisioner,
        app_id: str,
        app_version: str,
    ):
        self.settings_store = settings_store
        self.provisioner = provisioner
        self.app_id = app_id
        self.app_version = app_version

    def get_setup_config(self) -> dict:
        settings = self.settings_store.get_settings(self.app_id)
        expected = self.provisioner.schema_version

        state = classify(settings.get("adminSetup"), expected)
        if state != ProvisioningState.CURRENT:
            if not settings.get("adminSetup"):
                settings["adminSetup"] = {}
            admin_setup = settings["adminSetup"]

            result = self.provisioner.ensure_schema()
            if isinstance(result, Current):
                admin_setup["hasSchema"] = True
                admin_setup["schemaVersion"] = result.schema_version
            else:
                admin_setup["hasSchema"] = False
                logger.warning(f"Schema left {ProvisioningState.STALE.value} for {self.app_id}: {result.reason}")

            self.settings_store.save_settings(self.app_id, settings)

        # Never trusted from persisted state
        settings["adminSetup"]["appVersion"] = self.app_version
        return settings
