"""Schemas for list type subscriptions."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums import Language
from core.schemas.base_schema_model import BaseSchemaModel


class ListTypeSubscriptionCreate(BaseSchemaModel):
    """Subscribe to every publication of a list type in a language."""

    list_type_id: int = Field(..., ge=1)
    language: Language


class ListTypeSubscriptionDetail(BaseSchemaModel):
    list_type_subscription_id: UUID
    user_id: UUID
    list_type_id: int
    language: str
    date_added: datetime
