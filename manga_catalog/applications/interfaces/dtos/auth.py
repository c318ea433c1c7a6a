from pydantic import BaseModel, EmailStr, Field

from manga_catalog.applications.interfaces.dtos.user import UserPublic


class RegisterSchema(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class LoginSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class AuthResponse(BaseModel):
    token: str
    user: UserPublic


class Token(BaseModel):
    access_token: str
    token_type: str
