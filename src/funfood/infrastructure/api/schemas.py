"""Response envelopes returned by the backend API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Standard ``{success, message, data}`` envelope."""
    model_config = ConfigDict(extra="ignore")

    success: bool = True
    message: str = ""
    data: Any = None


class PaginationMeta(BaseModel):
    """Pagination block of a list response."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    page: int = 1
    limit: int = 10
    total: int = 0
    total_pages: int = Field(default=0, alias="totalPages")
    has_next: bool = Field(default=False, alias="hasNext")
    has_prev: bool = Field(default=False, alias="hasPrev")


class PaginatedResponse(ApiResponse):
    """List envelope with pagination metadata."""

    data: list[Any] = Field(default_factory=list)
    pagination: PaginationMeta | None = None
