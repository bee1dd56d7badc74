"""User and authentication schemas."""

from typing import Annotated, List, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints

from app.schemas.base import RequestBody

# Taken exactly as typed; surrounding whitespace is part of the password
Password = Annotated[str, StringConstraints(strip_whitespace=False, min_length=1)]


class RegisterRequest(RequestBody):
    """Register request schema."""

    username: str = Field(..., min_length=1, max_length=150)
    password: Password
    first_name: str = Field(..., min_length=1, max_length=150)
    last_name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    photo_url: Optional[str] = None


class LoginRequest(RequestBody):
    """Login request schema."""

    username: str = Field(..., min_length=1)
    password: Password


class UserUpdate(RequestBody):
    """
    Update user request schema.

    ``is_admin`` is not accepted here, so the field is rejected as unknown.
    """

    username: Optional[str] = Field(None, min_length=1, max_length=150)
    password: Optional[Password] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=150)
    last_name: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[EmailStr] = None
    photo_url: Optional[str] = None


class UserBrief(BaseModel):
    username: str
    first_name: str
    last_name: str
    email: str


class User(UserBrief):
    photo_url: Optional[str] = None
    is_admin: bool = False


class TokenResponse(BaseModel):
    token: str
    message: str


class UserListResponse(BaseModel):
    users: List[UserBrief]


class UserResponse(BaseModel):
    user: User
    token: Optional[str] = None
