"""
Versioned document store backed by Supabase.

Documents live in the ``documents`` table as a JSON ``fields`` column tagged
with their data entity and schema version. Schemas live in
``document_schemas``, one row per (data entity, schema name).
"""

import logging

from postgrest.exceptions import APIError

from app.core.errors import DocumentStoreError, NotModifiedError
from database.connection import WRITE_RETRYABLE_ERRORS, get_db, with_retry

logger = logging.getLogger(__name__)

DOCUMENTS_TABLE = "documents"
SCHEMAS_TABLE = "document_schemas"


def _store_error(e: APIError) -> DocumentStoreError:
    return DocumentStoreError(e.message or str(e))


def _project(row: dict, fields: list[str]) -> dict:
    """Flatten a stored row into a document holding only ``fields``."""
    stored = row.get("fields") or {}
    document = {}
    for field in fields:
        if field == "id":
            document["id"] = row["id"]
        else:
            document[field] = stored.get(field)
    return document


class DocumentStoreRepository:

    @staticmethod
    @with_retry(retry_on=WRITE_RETRYABLE_ERRORS)
    def create_document(data_entity: str, fields: dict, schema_version: str) -> dict:
        """Create a document and return the write acknowledgment."""
        db = get_db()
        try:
            result = db.table(DOCUMENTS_TABLE).insert({
                "data_entity": data_entity,
                "schema_version": schema_version,
                "fields": fields,
            }).execute()
        except APIError as e:
            raise _store_error(e) from e
        if not result or not result.data:
            raise DocumentStoreError(f"Document store returned no row for {data_entity}")
        document_id = result.data[0]["id"]
        return {
            "Id": f"{data_entity}-{document_id}",
            "Href": f"{data_entity}/documents/{document_id}",
            "DocumentId": document_id,
        }

    @staticmethod
    @with_retry()
    def search_documents(
        data_entity: str,
        schema_version: str,
        fields: list[str],
        where: dict[str, str] | None = None,
        sort: str = "creationDate DESC",
        page: int = 1,
        page_size: int = 30,
    ) -> list[dict]:
        """Search documents of one schema version.

        ``where`` holds exact-match filters on document fields. ``sort`` is
        ``"<field> ASC|DESC"``; rows sharing the sort value are ordered by
        the store's insertion time, newest first.
        """
        db = get_db()
        sort_field, _, direction = sort.partition(" ")
        offset = (page - 1) * page_size

        query = (
            db.table(DOCUMENTS_TABLE)
            .select("id, fields")
            .eq("data_entity", data_entity)
            .eq("schema_version", schema_version)
        )
        for field, value in (where or {}).items():
            query = query.eq(f"fields->>{field}", value)
        query = (
            query.order(f"fields->>{sort_field}", desc=direction.strip().upper() == "DESC")
            .order("created_at", desc=True)
            .order("id", desc=True)
            .range(offset, offset + page_size - 1)
        )
        try:
            result = query.execute()
        except APIError as e:
            raise _store_error(e) from e
        rows = result.data if result and result.data else []
        return [_project(row, fields) for row in rows]

    @staticmethod
    @with_retry()
    def get_document(data_entity: str, document_id: str, fields: list[str]) -> dict | None:
        """Get a single document projected to ``fields``."""
        db = get_db()
        try:
            result = (
                db.table(DOCUMENTS_TABLE)
                .select("id, fields")
                .eq("data_entity", data_entity)
                .eq("id", document_id)
                .limit(1)
                .execute()
            )
        except APIError as e:
            raise _store_error(e) from e
        if not result or not result.data:
            return None
        return _project(result.data[0], fields)

    @staticmethod
    @with_retry()
    def create_or_update_schema(data_entity: str, schema_name: str, schema_body: dict) -> None:
        """Create or replace a schema.

        Raises:
            NotModifiedError: The schema already exists with this exact body.
            DocumentStoreError: The store rejected the call.
        """
        db = get_db()
        try:
            existing = (
                db.table(SCHEMAS_TABLE)
                .select("body")
                .eq("data_entity", data_entity)
                .eq("name", schema_name)
                .limit(1)
                .execute()
            )
            if existing and existing.data and existing.data[0].get("body") == schema_body:
                raise NotModifiedError(f"Schema {schema_name} of {data_entity} is up to date")

            db.table(SCHEMAS_TABLE).upsert(
                {"data_entity": data_entity, "name": schema_name, "body": schema_body},
                on_conflict="data_entity,name",
            ).execute()
        except APIError as e:
            raise _store_error(e) from e
        logger.info(f"Schema {schema_name} saved for {data_entity}")
