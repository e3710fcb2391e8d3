"""Schemas for per list type case search configuration."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ListSearchConfigUpdate(BaseSchemaModel):
    """Field names as entered; validated by the search config service."""

    case_number_field_name: str = ""
    case_name_field_name: str = ""


class ListSearchConfigDetail(BaseSchemaModel):
    list_type_id: int
    case_number_field_name: str = ""
    case_name_field_name: str = ""
    updated_at: datetime | None = Field(None, description="Last change")
