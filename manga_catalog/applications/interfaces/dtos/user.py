from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserSchema(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class UserUpdateSchema(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: Optional[str] = Field(default=None, min_length=6)


class UserPublic(BaseModel):
    id: int
    name: str
    email: EmailStr
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
