"""Validation outcome schemas for blob ingestion."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single violated rule, reported against the request field it concerns."""

    field: str = Field(..., description="Request field name, or 'body'")
    message: str = Field(..., description="Human readable message")


class ValidationResult(BaseModel):
    """Every violation found in one pass over a submission."""

    is_valid: bool = Field(..., description="True when errors is empty")
    errors: list[FieldError] = Field(default_factory=list)
    location_exists: bool = Field(
        False, description="court_id resolved to a known location"
    )
    list_type_id: int | None = Field(
        None, description="Resolved list type id, when list_type is known"
    )

    def joined_errors(self) -> str:
        """Render errors as ``field: message; field: message``."""
        return "; ".join(f"{e.field}: {e.message}" for e in self.errors)
