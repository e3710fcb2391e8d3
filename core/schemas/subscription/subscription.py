"""Schemas for location and case subscriptions."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from core.enums import SearchType
from core.schemas.base_schema_model import BaseSchemaModel


class SubscriptionCreate(BaseSchemaModel):
    """Request schema for subscribing to a location or a case.

    Attributes:
        search_type: LOCATION_ID, CASE_NUMBER or CASE_NAME.
        search_value: Location id, case number or case name to match.
        case_name: Display name of the case, for case subscriptions.
        case_number: Display number of the case, for case subscriptions.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search_type": "CASE_NUMBER",
                "search_value": "AB-2025-000123",
                "case_name": "Smith v Jones",
                "case_number": "AB-2025-000123",
            }
        }
    )

    search_type: SearchType
    search_value: str = Field(..., min_length=1, max_length=255)
    case_name: str | None = Field(None, max_length=500)
    case_number: str | None = Field(None, max_length=255)


class SubscriptionDetail(BaseSchemaModel):
    subscription_id: UUID
    user_id: UUID
    search_type: str
    search_value: str
    case_name: str | None = None
    case_number: str | None = None
    date_added: datetime
