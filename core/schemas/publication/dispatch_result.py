"""Aggregate outcome of a notification dispatch."""

from pydantic import BaseModel, Field


class DispatchResult(BaseModel):
    """Counts of what happened to each matched recipient."""

    success: bool = True
    total_subscriptions: int = Field(0, description="Distinct recipients matched")
    sent: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[str] = Field(default_factory=list)
