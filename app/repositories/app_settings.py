from postgrest.exceptions import APIError

from app.core.errors import DocumentStoreError
from database.connection import get_db, with_retry


class AppSettingsRepository:
    """Per-application settings blobs, one row per app id."""

    @staticmethod
    @with_retry()
    def get_settings(app_id: str) -> dict:
        """Get the settings object for an app, empty if none was saved."""
        db = get_db()
        try:
            result = db.table("app_settings").select("settings").eq("app_id", app_id).limit(1).execute()
        except APIError as e:
            raise DocumentStoreError(e.message or str(e)) from e
        if result and result.data:
            return result.data[0].get("settings") or {}
        return {}

    @staticmethod
    @with_retry()
    def save_settings(app_id: str, settings: dict) -> dict:
        """Replace the settings object for an app."""
        db = get_db()
        try:
            result = db.table("app_settings").upsert(
                {"app_id": app_id, "settings": settings},
                on_conflict="app_id",
            ).execute()
        except APIError as e:
            raise DocumentStoreError(e.message or str(e)) from e
        return result.data[0] if result and result.data else {}
