"""Named authorization policies for mutating operations.

Each operation declares the policy it runs under instead of deciding
ad hoc in the handler:

    DELETE_POLICY = Policy.OWNER_ONLY
    ...
    authorize(DELETE_POLICY, identity, owner_id=row["user_id"])
"""

import logging
from enum import Enum

from ..exceptions import AuthenticationError, PermissionDenied
from .schemas import AuthenticatedIdentity

logger = logging.getLogger(__name__)


class Policy(str, Enum):
    """Who may perform an operation."""

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    OWNER_ONLY = "owner_only"


def authorize(
    policy: Policy,
    identity: AuthenticatedIdentity | None,
    owner_id: str | None = None
) -> None:
    """
    Enforce a policy for the given caller.

    Args:
        policy: Policy attached to the operation
        identity: Resolved caller, or None for anonymous requests
        owner_id: User ID recorded on the resource (OWNER_ONLY only)

    Raises:
        AuthenticationError: If the policy needs an identity and there is none
        PermissionDenied: If OWNER_ONLY and the caller is not the owner
    """
    if policy is Policy.PUBLIC:
        return

    if identity is None:
        raise AuthenticationError("token missing", {"policy": policy.value})

    if policy is Policy.OWNER_ONLY and identity.id != owner_id:
        logger.warning(f"User {identity.username} denied: not the creator")
        raise PermissionDenied(
            "not the creator",
            {"user_id": identity.id, "owner_id": owner_id}
        )
