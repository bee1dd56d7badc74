"""Security utilities: JWT issuance/verification and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import structlog
from jose import JWTError, jwt

from app.config import Settings, settings as default_settings
from app.core.policy import Identity

logger = structlog.get_logger(__name__)


def create_access_token(
    username: str,
    is_admin: bool,
    config: Settings = default_settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed JWT carrying ``{username, is_admin}``."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "username": username,
        "is_admin": bool(is_admin),
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": "access",
    }
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_token(token: str, config: Settings = default_settings) -> dict:
    """Decode and verify a JWT. Raises ``JWTError`` when invalid or expired."""
    return jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])


def identity_from_token(
    token: Optional[str], config: Settings = default_settings
) -> Optional[Identity]:
    """
    Resolve the identity carried by a token.

    A missing, tampered or expired token yields ``None`` so the request is
    treated as anonymous; role checks downstream deny as appropriate.
    """
    if not token:
        return None

    try:
        payload = decode_token(token, config)
    except JWTError as e:
        logger.info("token_rejected", reason=str(e))
        return None

    username = payload.get("username")
    if not isinstance(username, str) or not username:
        return None

    return Identity(username=username, is_admin=payload.get("is_admin") is True)


def get_password_hash(password: str, config: Settings = default_settings) -> str:
    """Hash a plaintext password with bcrypt."""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), password_hash.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False
