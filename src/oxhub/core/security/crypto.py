"""Cryptographic utilities - one-time passcodes and JWT session tokens."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from src.oxhub.core.config import get_settings

ACCESS_TOKEN_TYPE = "access"


def generate_otp(length: int | None = None) -> str:
    """Generate a numeric passcode uniformly over the fixed-width range.

    For the default length of 6 this is 100000..999999, so the value never
    has a leading zero and is always exactly ``length`` characters.
    """
    if length is None:
        length = get_settings().otp_length
    low = 10 ** (length - 1)
    high = 10**length
    return str(low + secrets.randbelow(high - low))


def otp_matches(stored: str | None, supplied: str) -> bool:
    """Exact string comparison of passcodes in constant time."""
    if stored is None:
        return False
    return secrets.compare_digest(stored.encode(), supplied.encode())


def create_access_token(
    user_id: int,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create the session JWT carrying user id, email and issued-at time."""
    settings = get_settings()
    now = datetime.now(UTC)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and validate JWT token. Returns None on any error."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
