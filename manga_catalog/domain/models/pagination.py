from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")


class PaginationRequest(BaseModel):
    """Page window requested by a list call.

    Out-of-range values are clamped to the defaults instead of being
    rejected, so every instance is already within bounds.
    """

    model_config = ConfigDict(frozen=True)

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value: Optional[int]) -> int:
        if value is None or value < 1:
            return DEFAULT_PAGE
        return value

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, value: Optional[int]) -> int:
        if value is None or value < 1 or value > MAX_PAGE_SIZE:
            return DEFAULT_PAGE_SIZE
        return value

    @classmethod
    def normalize(cls, page: Optional[int] = None, page_size: Optional[int] = None) -> "PaginationRequest":
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PaginationResponse(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    next_page: Optional[int] = None
    previous_page: Optional[int] = None

    @classmethod
    def build(cls, request: PaginationRequest, total_items: int) -> "PaginationResponse":
        total_pages = (total_items + request.page_size - 1) // request.page_size
        has_next_page = request.page < total_pages
        has_prev_page = request.page > 1

        return cls(
            current_page=request.page,
            page_size=request.page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next_page=has_next_page,
            has_prev_page=has_prev_page,
            next_page=request.page + 1 if has_next_page else None,
            previous_page=request.page - 1 if has_prev_page else None,
        )


class PaginatedResult(BaseModel, Generic[T]):
    data: List[T] = Field(default_factory=list)
    pagination: PaginationResponse
