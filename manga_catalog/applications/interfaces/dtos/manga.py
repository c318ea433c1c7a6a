from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MangaSchema(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    is_active: bool = True


class MangaPublic(BaseModel):
    id: int
    name: str
    price: float
    is_active: bool
    owner_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
