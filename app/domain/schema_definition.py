"""
Versioned schema of the checkout customization documents.

SCHEMA_VERSION tags every document written and names the schema requested
from the document store. Any change to SCHEMA_PROPERTIES must ship with a new
SCHEMA_VERSION.
"""

SCHEMA_VERSION = "v0.1.3"

DATA_ENTITY = "checkoutcustom"

AUDIT_FIELDS = ["email", "workspace", "creationDate", "appVersion"]

SCHEMA_PROPERTIES: dict[str, dict] = {
    "email": {"type": "string", "title": "Email"},
    "workspace": {"type": "string", "title": "Workspace"},
    "creationDate": {"type": "string", "title": "Creation Date"},
    "appVersion": {"type": "string", "title": "App Version"},
    "layout": {"type": ["null", "object"], "title": "Layout"},
    "colors": {"type": ["null", "object"], "title": "Colors"},
    "javascript": {"type": ["null", "string"], "title": "Custom Javascript"},
    "css": {"type": ["null", "string"], "title": "Custom CSS"},
    "javascriptActive": {"type": "boolean", "title": "Activate custom Javascript"},
    "cssActive": {"type": "boolean", "title": "Activate custom CSS"},
    "javascriptBuild": {"type": ["null", "string"], "title": "Javascript Build"},
    "cssBuild": {"type": ["null", "string"], "title": "CSS Build"},
}

SCHEMA_BODY: dict = {
    "properties": SCHEMA_PROPERTIES,
    "v-indexed": AUDIT_FIELDS,
    "v-default-fields": AUDIT_FIELDS,
    "v-cache": False,
}

# Field projections used by the query service. "id" is assigned by the store.
HISTORY_FIELDS = ["id", *AUDIT_FIELDS]

CUSTOMIZATION_FIELDS = [
    "css",
    "javascript",
    "layout",
    "colors",
    "javascriptActive",
    "cssActive",
]

LATEST_FIELDS = [
    "id",
    "email",
    "workspace",
    "creationDate",
    "appVersion",
    "layout",
    "javascript",
    "css",
    "colors",
    "javascriptActive",
    "cssActive",
]


def _check_projections() -> None:
    for projection in (HISTORY_FIELDS, CUSTOMIZATION_FIELDS, LATEST_FIELDS):
        unknown = [f for f in projection if f != "id" and f not in SCHEMA_PROPERTIES]
        if unknown:
            raise RuntimeError(
                f"Projection references fields missing from schema {SCHEMA_VERSION}: {unknown}"
            )


_check_projections()
