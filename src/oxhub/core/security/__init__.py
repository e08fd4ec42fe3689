"""Security utilities - crypto and validators.

Re-exports all security-related functions for convenience.
"""

from src.oxhub.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
    generate_otp,
    otp_matches,
)
from src.oxhub.core.security.validators import (
    is_valid_email,
    strip_bearer_prefix,
    validate_bearer_format,
    validate_email_format,
    validate_subdomain_format,
)

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "create_access_token",
    "decode_token",
    "generate_otp",
    "otp_matches",
    # Validators
    "is_valid_email",
    "strip_bearer_prefix",
    "validate_bearer_format",
    "validate_email_format",
    "validate_subdomain_format",
]
