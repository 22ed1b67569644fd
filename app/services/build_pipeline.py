"""
Build pipeline for checkout customizations.

Renders the CSS and JS templates with the submitted layout and colors,
appends the raw custom sources when activated, and appends a new document
version to the store.
"""

import json
import logging
import time
from pathlib import Path
from typing import Callable

from app.domain.schemas import SaveChangesRequest
from app.services.template_renderer import render

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
CSS_TEMPLATE = "checkout6-custom.css"
JS_TEMPLATE = "checkout6-custom.js"


def _now_millis() -> str:
    return str(int(time.time() * 1000))


class BuildPipeline:
    def __init__(
        self,
        store,
        data_entity: str,
        schema_version: str,
        app_version: str,
        templates_dir: Path = TEMPLATES_DIR,
        clock: Callable[[], str] = _now_millis,
    ):
        self.store = store
        self.data_entity = data_entity
        self.schema_version = schema_version
        self.app_version = app_version
        self.templates_dir = templates_dir
        self.clock = clock

    def _load_template(self, name: str) -> str:
        return (self.templates_dir / name).read_text(encoding="utf-8")

    def build(self, params: SaveChangesRequest) -> dict:
        """Render both artifacts. Returns ``{"cssBuild": ..., "javascriptBuild": ...}``."""
        keys = params.template_keys()

        css_build = render(self._load_template(CSS_TEMPLATE), keys)
        if params.css_active:
            css_build += params.css or ""

        javascript_build = render(self._load_template(JS_TEMPLATE), keys)
        if params.javascript_active:
            javascript_build += params.javascript or ""

        return {"cssBuild": css_build, "javascriptBuild": javascript_build}

    def save_changes(self, params: SaveChangesRequest) -> str:
        """Build the artifacts and persist a new document version.

        Returns:
            The store's write acknowledgment, JSON-serialized
        """
        fields = {
            **params.document_fields(),
            **self.build(params),
            "creationDate": self.clock(),
            "appVersion": self.app_version,
        }
        ack = self.store.create_document(self.data_entity, fields, self.schema_version)
        logger.info(f"Saved customization for workspace {params.workspace} ({fields['creationDate']})")
        return json.dumps(ack)
