"""Session guard: resolve the bearer token to a live principal."""

from typing import Annotated

from fastapi import Depends, Header

from src.oxhub.api.dependencies.repositories import UserRepo
from src.oxhub.core.exceptions import Unauthenticated
from src.oxhub.core.logging import bind_user_context
from src.oxhub.core.principal import MembershipClaim, Principal
from src.oxhub.core.security import ACCESS_TOKEN_TYPE, decode_token

MISSING_TOKEN_MESSAGE = "Access token not found"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from a ``Bearer <token>`` header value."""
    if not authorization:
        raise Unauthenticated(MISSING_TOKEN_MESSAGE)
    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token:
        raise Unauthenticated(MISSING_TOKEN_MESSAGE)
    return token


async def get_current_principal(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Verify the session token and load the user's memberships as they are now.

    Memberships are never taken from token claims, so a role granted or a
    company deleted after sign-in is visible on the very next request.
    """
    token = extract_bearer_token(authorization)
    payload = decode_token(token)
    if payload is None or payload.get("type", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
        raise Unauthenticated(INVALID_TOKEN_MESSAGE)

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise Unauthenticated(INVALID_TOKEN_MESSAGE) from e

    found = await user_repo.find_user_with_memberships(user_id=user_id)
    if found is None:
        raise Unauthenticated(INVALID_TOKEN_MESSAGE)

    user, memberships = found
    bind_user_context(user_id, user.email)

    return Principal(
        user_id=user_id,
        email=user.email,
        companies=tuple(
            MembershipClaim(
                company_id=m.company.id,  # type: ignore[arg-type]
                subdomain=m.company.subdomain,
                role=m.membership.role_enum,
                token=m.company.token,
            )
            for m in memberships
        ),
    )


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
