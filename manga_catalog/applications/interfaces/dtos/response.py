from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Envelope shared by every JSON response, success or error."""

    success: bool
    message: Optional[str] = None
    data: Optional[T] = None
    error: Optional[Any] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "APIResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: Any, message: Optional[str] = None) -> "APIResponse[Any]":
        return cls(success=False, error=error, message=message)
