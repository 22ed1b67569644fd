"""Unit tests for the history/query service."""

from unittest.mock import MagicMock

import pytest

from app.domain.schema_definition import (
    CUSTOMIZATION_FIELDS,
    DATA_ENTITY,
    HISTORY_FIELDS,
    LATEST_FIELDS,
    SCHEMA_VERSION,
)
from app.services.history import HISTORY_PAGE_SIZE, HistoryService


@pytest.fixture
def history(document_store):
    return HistoryService(store=document_store, data_entity=DATA_ENTITY, schema_version=SCHEMA_VERSION)


def add_document(store, workspace: str, creation_date: int, **fields) -> str:
    ack = store.create_document(
        DATA_ENTITY,
        {
            "email": "admin@store.com",
            "workspace": workspace,
            "creationDate": str(creation_date),
            "appVersion": "1.2.3",
            "layout": {},
            "colors": {"primary": "#fff"},
            "css": "body{}",
            "javascript": None,
            "cssActive": True,
            "javascriptActive": False,
            "cssBuild": "built css",
            "javascriptBuild": "built js",
            **fields,
        },
        SCHEMA_VERSION,
    )
    return ack["DocumentId"]


class TestGetHistory:
    def test_newest_first_truncated_to_page_size(self, history, document_store):
        base = 1_700_000_000_000
        for offset in (5, 40, 12, 0, 33, 7, 21, 1, 38, 2, 30, 9, 18, 27, 3, 36, 14, 25, 6, 39,
                       11, 16, 22, 4, 35, 8, 29, 13, 19, 24, 31, 10, 37, 15, 26):
            add_document(document_store, "master", base + offset)

        entries = history.get_history()

        dates = [int(e["creationDate"]) for e in entries]
        assert len(entries) == HISTORY_PAGE_SIZE
        assert dates == sorted(dates, reverse=True)
        assert dates[0] == base + 40

    def test_projects_audit_fields_only(self, history, document_store):
        add_document(document_store, "master", 1_700_000_000_000)
        (entry,) = history.get_history()
        assert set(entry) == set(HISTORY_FIELDS)

    def test_ignores_other_schema_versions(self, history, document_store):
        document_store.create_document(DATA_ENTITY, {"creationDate": "1"}, "v0.0.1")
        assert history.get_history() == []

    def test_delegates_policy_to_store(self):
        store = MagicMock()
        HistoryService(store, DATA_ENTITY, SCHEMA_VERSION).get_history()
        store.search_documents.assert_called_once_with(
            DATA_ENTITY,
            SCHEMA_VERSION,
            HISTORY_FIELDS,
            sort="creationDate DESC",
            page=1,
            page_size=30,
        )


class TestGetById:
    def test_projection_excludes_builds_and_audit(self, history, document_store):
        document_id = add_document(document_store, "master", 1_700_000_000_000)

        document = history.get_by_id(document_id)

        assert set(document) == set(CUSTOMIZATION_FIELDS)
        for excluded in ("javascriptBuild", "cssBuild", "creationDate", "appVersion"):
            assert excluded not in document
        assert document["colors"] == {"primary": "#fff"}

    def test_unknown_id_returns_none(self, history):
        assert history.get_by_id("missing") is None


class TestGetLast:
    def test_no_documents_returns_empty(self, history, document_store):
        add_document(document_store, "other", 1_700_000_000_000)
        assert history.get_last("master") == {}

    def test_returns_newest_for_workspace(self, history, document_store):
        add_document(document_store, "master", 1_700_000_000_100, css="old")
        newest = add_document(document_store, "master", 1_700_000_000_300, css="newest")
        add_document(document_store, "master", 1_700_000_000_200, css="middle")
        add_document(document_store, "dev", 1_700_000_000_900, css="other workspace")

        document = history.get_last("master")

        assert document["id"] == newest
        assert document["css"] == "newest"
        assert set(document) == set(LATEST_FIELDS)

    def test_same_creation_date_newest_insert_first(self, history, document_store):
        first = add_document(document_store, "master", 1_700_000_000_000, css="first")
        second = add_document(document_store, "master", 1_700_000_000_000, css="second")

        assert [e["id"] for e in history.get_history()] == [second, first]
        assert history.get_last("master")["id"] == second

    def test_search_then_fetch(self):
        store = MagicMock()
        store.search_documents.return_value = [{"id": "abc"}]
        store.get_document.return_value = {"id": "abc", "workspace": "master"}

        result = HistoryService(store, DATA_ENTITY, SCHEMA_VERSION).get_last("master")

        store.search_documents.assert_called_once_with(
            DATA_ENTITY,
            SCHEMA_VERSION,
            ["id"],
            where={"workspace": "master"},
            sort="creationDate DESC",
            page=1,
            page_size=1,
        )
        store.get_document.assert_called_once_with(DATA_ENTITY, "abc", LATEST_FIELDS)
        assert result == {"id": "abc", "workspace": "master"}

    def test_vanished_document_returns_empty(self):
        store = MagicMock()
        store.search_documents.return_value = [{"id": "abc"}]
        store.get_document.return_value = None

        assert HistoryService(store, DATA_ENTITY, SCHEMA_VERSION).get_last("master") == {}
