"""User endpoints: registration, login and profile management."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncConnection

from app.api.deps import get_db, require_login, require_self_or_admin
from app.core.security import create_access_token
from app.repositories import user as user_repository
from app.schemas.base import MessageResponse
from app.schemas.user import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

router = APIRouter()


@router.post("", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, db: AsyncConnection = Depends(get_db)):
    """Register a new user and return a token for them."""
    user = await user_repository.register(db, request.model_dump())
    token = create_access_token(user["username"], user["is_admin"])
    return {"token": token, "message": "Registered successfully"}


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, db: AsyncConnection = Depends(get_db)):
    """Login with username and password."""
    user = await user_repository.authenticate(db, request.username, request.password)
    token = create_access_token(user["username"], user["is_admin"])
    return {"token": token, "message": "Logged in successfully"}


@router.get("", response_model=UserListResponse, dependencies=[Depends(require_login)])
async def list_users(
    search: Optional[str] = Query(None, description="Case-insensitive substring of the username"),
    db: AsyncConnection = Depends(get_db),
):
    """List users as ``{users: [{username, first_name, last_name, email}...]}``."""
    filters = {"search": search} if search is not None else {}
    users = await user_repository.get_all(db, filters)
    return {"users": users}


@router.get("/{username}", response_model=UserResponse, response_model_exclude_unset=True,
            dependencies=[Depends(require_login)])
async def get_user(username: str, db: AsyncConnection = Depends(get_db)):
    """Get a user's public profile. Returns 404 if the username is unknown."""
    user = await user_repository.get(db, username)
    return {"user": user}


@router.patch("/{username}", response_model=UserResponse, response_model_exclude_unset=True,
              dependencies=[Depends(require_self_or_admin)])
async def update_user(
    username: str,
    request: UserUpdate,
    db: AsyncConnection = Depends(get_db),
):
    """
    Update the supplied fields of a user (the user themselves or an admin).

    A fresh token is included when the username changes, since the old one
    names a user that no longer exists.
    """
    data = request.model_dump(exclude_unset=True)
    user = await user_repository.update(db, username, data)

    if user["username"] != username:
        token = create_access_token(user["username"], user["is_admin"])
        return {"user": user, "token": token}

    return {"user": user}


@router.delete("/{username}", response_model=MessageResponse,
               dependencies=[Depends(require_self_or_admin)])
async def delete_user(username: str, db: AsyncConnection = Depends(get_db)):
    """Delete a user (the user themselves or an admin)."""
    await user_repository.delete(db, username)
    return {"message": "User deleted"}
