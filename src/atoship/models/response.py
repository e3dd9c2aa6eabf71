"""Typed wrappers around API responses."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from atoship.core.exceptions import AtoshipError
from atoship.models.base import ApiModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Result of a single API call.

    ``success`` is False when the server answered 2xx but reported a failure
    in the response envelope; HTTP errors raise instead.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = None
    request_id: Optional[str] = None

    def is_success(self) -> bool:
        return self.success

    def raise_for_error(self) -> "ApiResponse[T]":
        """Raise AtoshipError for an unsuccessful response, else return self."""
        if not self.success:
            raise AtoshipError(
                self.error or self.message or "Request failed",
                status_code=self.status_code,
                request_id=self.request_id,
            )
        return self


class Pagination(ApiModel):
    """Page metadata of a list endpoint."""

    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class PaginatedResponse(ApiResponse[List[T]], Generic[T]):
    """Result of a list call: one page of items plus pagination metadata."""

    data: List[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def items(self) -> List[T]:
        return self.data

    @property
    def has_next(self) -> bool:
        return self.pagination.has_next
