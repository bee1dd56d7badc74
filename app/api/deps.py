"""
API Dependencies
Common dependencies for API endpoints (database connection, identity, access checks)
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import UnauthorizedError
from app.core.policy import Access, Identity, authorize
from app.core.security import identity_from_token
from app.db.session import get_db

__all__ = [
    "get_db",
    "get_identity",
    "require_login",
    "require_admin",
    "require_self_or_admin",
]

# Bearer token; a missing or invalid token means "anonymous", not an error
bearer_scheme = HTTPBearer(auto_error=False)

# Older clients send the token as a request field instead of a header
TOKEN_FIELD = "_token"


async def _token_from_request(request: Request) -> Optional[str]:
    token = request.query_params.get(TOKEN_FIELD)
    if token:
        return token

    if not request.headers.get("content-type", "").startswith("application/json"):
        return None
    try:
        body = await request.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get(TOKEN_FIELD), str):
        return body[TOKEN_FIELD]
    return None


async def get_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Identity]:
    """
    Get the caller's identity, or None when anonymous.

    The ``Authorization: Bearer`` header is preferred; a ``_token`` field in
    the JSON body or query string is accepted when the header is absent.
    """
    if credentials is not None:
        return identity_from_token(credentials.credentials)
    return identity_from_token(await _token_from_request(request))


def require_access(required: Access):
    """Dependency factory checking the caller against an access level."""

    async def access_checker(
        identity: Optional[Identity] = Depends(get_identity),
    ) -> Optional[Identity]:
        if not authorize(identity, required):
            raise UnauthorizedError()
        return identity

    return access_checker


require_login = require_access(Access.AUTHENTICATED)
require_admin = require_access(Access.ADMIN)


async def require_self_or_admin(
    username: str,
    identity: Optional[Identity] = Depends(get_identity),
) -> Identity:
    """
    Require the caller to be the user named in the ``{username}`` path
    parameter, or an admin.
    """
    if not authorize(identity, Access.SELF_OR_ADMIN, resource_owner=username):
        raise UnauthorizedError()
    return identity
