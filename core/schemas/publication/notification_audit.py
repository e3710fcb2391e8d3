"""Response schemas for notification audit queries."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationAuditDetail(BaseSchemaModel):
    """One recipient's delivery record for an artefact."""

    notification_id: UUID
    subscription_id: UUID
    user_id: UUID
    publication_id: UUID
    status: str
    error_message: str | None = None
    gov_notify_id: str | None = None
    created_at: datetime
    sent_at: datetime | None = None


class NotificationAuditListResponse(BaseSchemaModel):
    """Paginated notification audit rows."""

    results: list[NotificationAuditDetail] = Field(
        ..., description="Audit rows for this page"
    )
    count: int = Field(..., ge=0, description="Total rows for the artefact")
    next: str | None = Field(None, description="URL of the next page")
    previous: str | None = Field(None, description="URL of the previous page")
