"""Authorization policy: who may perform which operation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Access(str, Enum):
    """Access level an operation requires."""

    ANONYMOUS = "anonymous"  # registration and login
    AUTHENTICATED = "authenticated"  # reads
    SELF_OR_ADMIN = "self_or_admin"  # mutating one's own user record
    ADMIN = "admin"  # company and job mutation


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as carried by a verified token."""

    username: str
    is_admin: bool = False


def authorize(
    identity: Optional[Identity],
    required: Access,
    resource_owner: Optional[str] = None,
) -> bool:
    """
    Decide whether ``identity`` may perform an operation requiring ``required``.

    Args:
        identity: the caller, or ``None`` for anonymous requests (including
            requests whose token failed verification).
        required: access level of the operation.
        resource_owner: username owning the target resource; only consulted
            for ``Access.SELF_OR_ADMIN``.
    """
    if required is Access.ANONYMOUS:
        return True

    if identity is None:
        return False

    if identity.is_admin:
        return True

    if required is Access.AUTHENTICATED:
        return True

    if required is Access.SELF_OR_ADMIN:
        return resource_owner is not None and identity.username == resource_owner

    return False
