"""Input format validators."""

import re
from typing import Final

MAX_SUBDOMAIN_LENGTH: Final[int] = 63  # DNS label limit

# Permissive local@domain.tld shape: no whitespace, exactly one "@", a dot in the domain
EMAIL_REGEX: Final[str] = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
SUBDOMAIN_REGEX: Final[str] = r"^[a-zA-Z0-9-]+$"
BEARER_REGEX: Final[str] = r"^Bearer\s+.+"

_EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(EMAIL_REGEX)
_SUBDOMAIN_PATTERN: Final[re.Pattern[str]] = re.compile(SUBDOMAIN_REGEX)
_BEARER_PATTERN: Final[re.Pattern[str]] = re.compile(BEARER_REGEX)
_BEARER_PREFIX: Final[re.Pattern[str]] = re.compile(r"^Bearer\s+")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_PATTERN.fullmatch(email))


def validate_email_format(email: str) -> str:
    if not is_valid_email(email):
        raise ValueError("Please provide a valid email address")
    return email


def validate_subdomain_format(subdomain: str) -> str:
    """Letters, numbers and hyphens only. Length is enforced by Field(max_length=...)."""
    if not _SUBDOMAIN_PATTERN.fullmatch(subdomain):
        raise ValueError("Subdomain can only contain letters, numbers, and hyphens")
    return subdomain


def validate_bearer_format(token: str) -> str:
    if not _BEARER_PATTERN.match(token):
        raise ValueError('Token must start with "Bearer "')
    return token


def strip_bearer_prefix(token: str) -> str:
    """Remove a leading ``Bearer `` and surrounding whitespace."""
    return _BEARER_PREFIX.sub("", token).strip()
