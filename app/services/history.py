from app.domain.schema_definition import (
    CUSTOMIZATION_FIELDS,
    HISTORY_FIELDS,
    LATEST_FIELDS,
)

HISTORY_PAGE_SIZE = 30
NEWEST_FIRST = "creationDate DESC"


class HistoryService:
    """Read side of the customization history."""

    def __init__(self, store, data_entity: str, schema_version: str):
        self.store = store
        self.data_entity = data_entity
        self.schema_version = schema_version

    def get_history(self) -> list[dict]:
        """The 30 most recent versions, audit fields only."""
        return self.store.search_documents(
            self.data_entity,
            self.schema_version,
            HISTORY_FIELDS,
            sort=NEWEST_FIRST,
            page=1,
            page_size=HISTORY_PAGE_SIZE,
        )

    def get_by_id(self, document_id: str) -> dict | None:
        """A single version with only the user-editable fields."""
        return self.store.get_document(self.data_entity, document_id, CUSTOMIZATION_FIELDS)

    def get_last(self, workspace: str) -> dict:
        """The newest version saved for ``workspace``, or ``{}`` if there is none.

        The search only resolves the id; the document itself is fetched
        separately with the full projection.
        """
        last = self.store.search_documents(
            self.data_entity,
            self.schema_version,
            ["id"],
            where={"workspace": workspace},
            sort=NEWEST_FIRST,
            page=1,
            page_size=1,
        )
        if not last:
            return {}

        document = self.store.get_document(self.data_entity, last[0]["id"], LATEST_FIELDS)
        return document or {}
