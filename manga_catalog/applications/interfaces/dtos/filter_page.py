from typing import Optional

from pydantic import BaseModel, Field


class CatalogFilterParams(BaseModel):
    """Query-string filters accepted by the manga list endpoints."""

    active_only: bool = False
    min: Optional[float] = Field(default=None, description="Inclusive lower price bound")
    max: Optional[float] = Field(default=None, description="Inclusive upper price bound")
    userID: Optional[int] = Field(default=None, description="Only items created by this user")
