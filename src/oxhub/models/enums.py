"""Shared enums for models."""

from enum import Enum


class CompanyRole(str, Enum):
    """User role within a company."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
