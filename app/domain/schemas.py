from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Any


class CamelModel(BaseModel):
    """Base model exposing camelCase keys, the shape stored in the documents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================
# Customization Input
# ============================================

class Layout(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    font_family: Optional[str] = None
    accordion_payments: Optional[bool] = None
    delivery_date_format: Optional[bool] = None
    hide_email_step: Optional[bool] = None
    show_note_field: Optional[bool] = None
    show_cart_quantity_price: Optional[bool] = None


class Colors(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    primary: Optional[str] = None
    secondary: Optional[str] = None
    accent: Optional[str] = None
    base: Optional[str] = None
    base_inverted: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None
    success: Optional[str] = None
    warning: Optional[str] = None
    danger: Optional[str] = None
    muted: Optional[str] = None
    border: Optional[str] = None


class SaveChangesRequest(CamelModel):
    """Submission of a new customization version."""

    email: EmailStr
    workspace: str = Field(..., min_length=1)
    layout: Optional[Layout] = None
    colors: Optional[Colors] = None
    css: Optional[str] = None
    javascript: Optional[str] = None
    css_active: bool = False
    javascript_active: bool = False

    def template_keys(self) -> dict[str, Any]:
        """Layout and colors merged into one map, colors winning on conflict."""
        keys: dict[str, Any] = {}
        if self.layout:
            keys.update(self.layout.model_dump(by_alias=True, exclude_none=True))
        if self.colors:
            keys.update(self.colors.model_dump(by_alias=True, exclude_none=True))
        return keys

    def document_fields(self) -> dict[str, Any]:
        """Submitted fields as stored in the document."""
        return {
            "email": self.email,
            "workspace": self.workspace,
            "layout": self.layout.model_dump(by_alias=True, exclude_none=True) if self.layout else None,
            "colors": self.colors.model_dump(by_alias=True, exclude_none=True) if self.colors else None,
            "css": self.css,
            "javascript": self.javascript,
            "cssActive": self.css_active,
            "javascriptActive": self.javascript_active,
        }


# ============================================
# Query Responses
# ============================================

class HistoryEntry(CamelModel):
    id: str
    email: Optional[str] = None
    workspace: Optional[str] = None
    creation_date: Optional[str] = None
    app_version: Optional[str] = None


class CustomizationResponse(CamelModel):
    css: Optional[str] = None
    javascript: Optional[str] = None
    layout: Optional[dict] = None
    colors: Optional[dict] = None
    javascript_active: Optional[bool] = None
    css_active: Optional[bool] = None


class LatestCustomizationResponse(CustomizationResponse):
    """Latest document for a workspace; every field is empty when none exists."""

    id: Optional[str] = None
    email: Optional[str] = None
    workspace: Optional[str] = None
    creation_date: Optional[str] = None
    app_version: Optional[str] = None


# ============================================
# Setup Schemas
# ============================================

class AdminSetup(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    has_schema: Optional[bool] = None
    schema_version: Optional[str] = None
    app_version: Optional[str] = None


class AppSetupSettings(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    admin_setup: AdminSetup
