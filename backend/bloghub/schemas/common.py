"""
BlogHub Backend — Shared Schemas
=================================

Error bodies, list query parameters and the health response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentRead(BaseModel):
    """
    Fields common to every stored document.

    `id`, `created_at` and `updated_at` are read from ORM attributes and
    written out under the store's names.
    """

    id: str = Field(alias="_id", description="24-character hex identifier")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    # Accepts both ORM attribute names and the aliased keys FastAPI re-validates
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing route.

    Example (500):
        {"message": "Error in creating user!",
         "detail": "UNIQUE constraint failed: users.email"}
    """
    message: str = Field(description="Human-readable error description")
    detail: Optional[str] = Field(default=None, description="Underlying error text (500 only)")


class ListParams(BaseModel):
    """
    What:  Validated filters for the category and blog list endpoints.

    Parameters:
        page / limit: skip = (page - 1) * limit
        keywords:     case-insensitive substring matched against title OR description
        start_date / end_date: inclusive bounds on creation time (ISO 8601);
            either, both or neither may be given
    """
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    keywords: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
