from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from manga_catalog.domain.services.sanitizer import sanitize


class Manga(BaseModel):
    name: str
    price: float
    owner_id: int
    is_active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def is_valid(self) -> bool:
        return bool(self.name) and self.price >= 0 and self.owner_id > 0

    def sanitize(self) -> "Manga":
        return sanitize(self)


class MangaFilter(BaseModel):
    """Optional catalog filters. ``None`` bounds are not applied."""

    active_only: bool = False
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    owner_id: Optional[int] = None
