from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from manga_catalog.domain.services.sanitizer import sanitize


class User(BaseModel):
    name: str
    email: str
    password_hash: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.email) and bool(self.password_hash)

    def sanitize(self) -> "User":
        return sanitize(self)
