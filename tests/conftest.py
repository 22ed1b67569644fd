"""
Shared fixtures: in-memory stand-ins for the Supabase-backed stores and a
TestClient wired to them.
"""

import copy
import itertools
import uuid

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.core.errors import NotModifiedError
from app.main import app
from app.services.hub import HubClient


class InMemoryDocumentStore:
    """Same contract as DocumentStoreRepository, held in a dict."""

    def __init__(self):
        self.documents: dict[str, dict] = {}
        self.schemas: dict[tuple[str, str], dict] = {}
        self.schema_calls = 0
        self.schema_error: Exception | None = None
        self._seq = itertools.count()

    def create_document(self, data_entity, fields, schema_version):
        document_id = uuid.uuid4().hex
        self.documents[document_id] = {
            "data_entity": data_entity,
            "schema_version": schema_version,
            "fields": copy.deepcopy(fields),
            "seq": next(self._seq),
        }
        return {"DocumentId": document_id}

    def search_documents(
        self,
        data_entity,
        schema_version,
        fields,
        where=None,
        sort="creationDate DESC",
        page=1,
        page_size=30,
    ):
        sort_field, _, direction = sort.partition(" ")
        rows = [
            (document_id, row)
            for document_id, row in self.documents.items()
            if row["data_entity"] == data_entity
            and row["schema_version"] == schema_version
            and all(row["fields"].get(k) == v for k, v in (where or {}).items())
        ]
        rows.sort(
            key=lambda item: (item[1]["fields"].get(sort_field) or "", item[1]["seq"]),
            reverse=direction.upper() == "DESC",
        )
        start = (page - 1) * page_size
        return [self._project(i, r, fields) for i, r in rows[start:start + page_size]]

    def get_document(self, data_entity, document_id, fields):
        row = self.documents.get(document_id)
        if not row or row["data_entity"] != data_entity:
            return None
        return self._project(document_id, row, fields)

    def create_or_update_schema(self, data_entity, schema_name, schema_body):
        self.schema_calls += 1
        if self.schema_error is not None:
            raise self.schema_error
        key = (data_entity, schema_name)
        if self.schemas.get(key) == schema_body:
            raise NotModifiedError(f"Schema {schema_name} is up to date")
        self.schemas[key] = copy.deepcopy(schema_body)

    @staticmethod
    def _project(document_id, row, fields):
        return {
            f: document_id if f == "id" else copy.deepcopy(row["fields"].get(f))
            for f in fields
        }


class InMemorySettingsStore:
    def __init__(self, initial: dict | None = None):
        self.settings: dict[str, dict] = copy.deepcopy(initial or {})
        self.save_calls = 0

    def get_settings(self, app_id):
        return copy.deepcopy(self.settings.get(app_id, {}))

    def save_settings(self, app_id, settings):
        self.save_calls += 1
        self.settings[app_id] = copy.deepcopy(settings)
        return {"app_id": app_id}


@pytest.fixture
def document_store():
    return InMemoryDocumentStore()


@pytest.fixture
def settings_store():
    return InMemorySettingsStore()


@pytest.fixture
def hub_responses():
    """Mutable (status, json) answered by the mocked platform endpoint."""
    return {"status": 200, "json": [{"name": "master"}, {"name": "dev"}]}


@pytest.fixture
def hub_requests():
    return []


@pytest.fixture
def hub_client(hub_responses, hub_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        hub_requests.append(request)
        return httpx.Response(hub_responses["status"], json=hub_responses["json"])

    return HubClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def client(document_store, settings_store, hub_client):
    app.dependency_overrides[deps.get_document_store] = lambda: document_store
    app.dependency_overrides[deps.get_settings_store] = lambda: settings_store
    app.dependency_overrides[deps.get_hub_client] = lambda: hub_client
    yield TestClient(app)
    app.dependency_overrides.clear()
